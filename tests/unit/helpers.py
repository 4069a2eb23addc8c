import numpy as np

from aotelescope.telescope import TelescopeAbstract


class GaussianTelescope(TelescopeAbstract):
    """Telescope with the synthetic PSF exp(-r^2) and its Fourier transform."""

    def psf(self, f):
        return np.exp(-np.asarray(f)**2)

    def otf(self, r):
        # Peak equal to the total PSF energy, pi
        return np.pi*np.exp(-np.pi**2*np.asarray(r)**2)

    def fullWidthHalfMax(self):
        return 2*np.sqrt(np.log(2))


class DivergentPSF:
    """Provider whose encircled energy integral diverges at the origin."""

    def psf(self, f):
        return 1/f**2

    def otf(self, r):
        return 1/r**3
