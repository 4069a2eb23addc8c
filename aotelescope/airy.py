"""
Diffraction-limited response of a centrally obstructed circular aperture.

Angles are expressed in units of the wavelength (i.e. the wavelength is set
to 1 in the units of D). With that convention the spatial frequency of the
PSF matches the pupil separation and the OTF cutoff frequency equals D.
"""
import logging

import numpy as np
from scipy.optimize import brentq

from .telescope import TelescopeAbstract

log = logging.getLogger(__name__)


def _monolithic_otf(u):
    """Normalized autocorrelation of a unit disk at normalized separation u <= 1."""
    return 2/np.pi*(np.arccos(u) - u*np.sqrt(1 - u**2))


def annular_otf(u, obstructionRatio):
    """
    OTF of an annular aperture versus frequency normalized by the cutoff.

    Closed-form autocorrelation of the annulus (O'Neill, 1956), equal to 1
    at u = 0 and to 0 for u >= 1.

    Parameters
    ----------
    u : float or array_like
        Radial spatial frequency divided by the cutoff frequency.
    obstructionRatio : float
        Central obstruction ratio in [0, 1).

    Returns
    -------
    float or numpy ndarray
        OTF values, same shape as u.
    """
    u = np.abs(np.asarray(u, dtype=float))
    eps = obstructionRatio
    out = np.zeros_like(u)

    inside = u < 1
    out[inside] = _monolithic_otf(u[inside])

    if eps > 0:
        # Autocorrelation of the obstruction
        index = u < eps
        out[index] += eps**2*_monolithic_otf(u[index]/eps)

        # Cross-correlation of the disk and the obstruction
        out[u <= (1 - eps)/2] -= 2*eps**2
        index = (u > (1 - eps)/2) & (u < (1 + eps)/2)
        chi = np.arccos(np.clip((1 + eps**2 - 4*u[index]**2)/(2*eps), -1, 1))
        out[index] += (2*eps/np.pi*np.sin(chi) + (1 + eps**2)/np.pi*chi -
                       2*(1 - eps**2)/np.pi*np.arctan(
                           (1 + eps)/(1 - eps)*np.tan(chi/2)) - 2*eps**2)

        out = out/(1 - eps**2)

    if out.ndim == 0:
        return float(out)
    return out


class AiryTelescope(TelescopeAbstract):
    """
    Telescope with the diffraction-limited (Airy) response of its pupil.

    The PSF is normalized to a unit integral over the plane, the OTF to 1 at
    the origin.
    """

    def otf(self, r):
        """
        Optical transfer function.

        Parameters
        ----------
        r : float or array_like
            Radial spatial frequency; the cutoff is at r = D.
        """
        return annular_otf(np.asarray(r, dtype=float)/self.D,
                           self.obstructionRatio)

    def psf(self, f):
        """
        Point spread function.

        Parameters
        ----------
        f : float or array_like
            Angular radius in units of the wavelength.
        """
        return self.area*self.FT(f)**2

    def fullWidthHalfMax(self):
        """
        Full width at half maximum of the PSF, in units of the wavelength.

        Twice the smallest radius where the PSF drops to half its peak.
        """
        halfMax = lambda r: self.FT(r)**2 - 0.5

        # The PSF first zero is at 1.22/D for a full aperture and moves
        # inward with the obstruction, so the crossing is bracketed there.
        rGrid = np.linspace(0, 1.22/self.D, 245)
        values = halfMax(rGrid)
        iCross = np.argmax(values < 0)
        rHalf = brentq(halfMax, rGrid[iCross - 1], rGrid[iCross])
        log.debug('PSF half maximum radius: %.6g', rHalf)

        return 2*rHalf
