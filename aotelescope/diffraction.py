"""
Diffraction integrals of an annular aperture.

Closed-form Fourier transform of a centrally obstructed circular pupil, and
the encircled/ensquared ("entrapped") energy obtained by adaptive quadrature
of a point-spread function or an optical transfer function. The PSF and OTF
come from any object implementing ``psf(r)`` and ``otf(r)``, see
:class:`aotelescope.telescope.OpticalResponseProvider`.
"""
import logging

import numpy as np
from scipy import integrate
from scipy.special import j1
import sympy

from . import check
from .errors import InvalidArgument, NumericalNonConvergence
from .util import jinc, sinc

log = logging.getLogger(__name__)

_VALID_TRAPS = ('circle', 'square')
_VALID_DOMAINS = ('psf', 'otf')

# Default quadrature settings
EPSABS = 1e-10
EPSREL = 1e-6
LIMIT = 200  # Maximum number of subintervals of each 1-D adaptive quadrature


def _disk_ft(diam, f):
    """Fourier transform of a filled disk of diameter diam at f != 0."""
    u = np.pi*diam*f
    return np.pi*diam**2/4.*2.*j1(u)/u


def fourier_transform(D, obstructionRatio, f):
    """
    Compute the normalized Fourier transform of an annular aperture.

    The aperture is a disk of diameter D with a concentric circular
    obstruction of diameter D*obstructionRatio. The transform is divided by
    the annulus area so that the value at the origin is 1.

    Parameters
    ----------
    D : float
        Aperture diameter.
    obstructionRatio : float
        Central obstruction diameter as a fraction of D, in [0, 1).
    f : float or array_like
        Spatial frequencies, in inverse units of D.

    Returns
    -------
    float or numpy ndarray
        Dimensionless transform, same shape as f.
    """
    check.real_positive_scalar(D, 'D', InvalidArgument)
    check.real_nonnegative_scalar(obstructionRatio, 'obstructionRatio',
                                  InvalidArgument)
    f = check.real_array(f, 'f', InvalidArgument).astype(np.float64)

    area = np.pi*D**2*(1 - obstructionRatio**2)/4.
    out = np.full(f.shape, area)
    index = f != 0
    out[index] = _disk_ft(D, f[index])
    if obstructionRatio > 0:
        out[index] -= obstructionRatio**2*np.pi*D**2/4.*2.*j1(
            np.pi*D*obstructionRatio*f[index])/(
            np.pi*D*obstructionRatio*f[index])
    out = out/area

    if out.ndim == 0:
        return float(out)
    return out


def symbolic_fourier_transform(f=None, D=None, obstructionRatio=None):
    """
    Symbolic counterpart of fourier_transform.

    Any argument left to None is replaced by a sympy symbol of the same
    name, so the default call returns the transform as a function of f, D
    and obstructionRatio. A numeric obstructionRatio of 0 gives the
    unobstructed expression.

    Returns
    -------
    sympy.Expr
        Normalized transform, in terms of sympy.besselj.
    """
    if f is None:
        f = sympy.Symbol('f', positive=True)
    if D is None:
        D = sympy.Symbol('D', positive=True)
    if obstructionRatio is None:
        obstructionRatio = sympy.Symbol('obstructionRatio', nonnegative=True)

    def disk(diam):
        u = sympy.pi*diam*f
        return 2*(sympy.pi*diam**2/4)*sympy.besselj(1, u)/u

    out = disk(D)
    if obstructionRatio != 0:
        out = out - disk(D*obstructionRatio)
    return out/(sympy.pi*D**2*(1 - obstructionRatio**2)/4)


def _quad(func, a, b, epsabs, epsrel, limit):
    """
    Call scipy's quad, turning non-convergence into an error.

    With full_output, QUADPACK's failure message is appended to the result
    instead of being issued as an IntegrationWarning.
    """
    result = integrate.quad(func, a, b, epsabs=epsabs, epsrel=epsrel,
                            limit=limit, full_output=1)
    if len(result) > 3:
        raise NumericalNonConvergence(
            'quad did not converge on [{}, {}]: {}'.format(a, b, result[3]))
    return result[0], result[1]


def quad(func, a, b, epsabs=EPSABS, epsrel=EPSREL, limit=LIMIT):
    """1-D adaptive quadrature of func over [a, b]."""
    value, abserr = _quad(func, a, b, epsabs, epsrel, limit)
    log.debug('quad -> %.10g (abs. error estimate %.2e)', value, abserr)
    return value


def dblquad(func, a, b, c, d, epsabs=EPSABS, epsrel=EPSREL, limit=LIMIT):
    """
    2-D adaptive quadrature over the rectangle [a, b] x [c, d].

    func is called as func(x, y) with x in [a, b] the outer variable. Both
    the inner and the outer integrals are checked for convergence.
    """
    def inner(x):
        return _quad(lambda y: func(x, y), c, d, epsabs, epsrel, limit)[0]

    value, abserr = _quad(inner, a, b, epsabs, epsrel, limit)
    log.debug('dblquad -> %.10g (abs. error estimate %.2e)', value, abserr)
    return value


def entrapped_energy(provider, D, halfSize, trap, psfOrOtf='psf',
                     epsabs=EPSABS, epsrel=EPSREL):
    """
    Compute the energy entrapped in a circle or a square.

    The energy is integrated either directly from the PSF over the trap, or
    from the OTF multiplied by the Fourier transform of the trap's indicator
    function. In the OTF domain the radial integration stops at D, beyond
    which the OTF is zero.

    Parameters
    ----------
    provider : OpticalResponseProvider
        Object with psf(r) and otf(r) methods.
    D : float
        Aperture diameter, upper bound of the OTF radial integration.
    halfSize : float
        Radius of the circle, or half-width of the square.
    trap : 'circle' or 'square'
        Shape of the integration region (case-insensitive).
    psfOrOtf : 'psf' or 'otf'
        Which function is integrated (case-insensitive).
    epsabs, epsrel : float
        Absolute and relative tolerances of the adaptive quadrature.

    Returns
    -------
    float
        Entrapped energy, in the normalization of the provider's PSF/OTF.
    """
    trap = check.one_of(trap, _VALID_TRAPS, 'trap', InvalidArgument)
    psfOrOtf = check.one_of(psfOrOtf, _VALID_DOMAINS, 'psfOrOtf',
                            InvalidArgument)
    check.real_nonnegative_scalar(halfSize, 'halfSize', InvalidArgument)
    check.real_positive_scalar(D, 'D', InvalidArgument)
    tol = {'epsabs': epsabs, 'epsrel': epsrel}

    if psfOrOtf == 'otf':
        if trap == 'circle':
            out = quad(
                lambda r: r*provider.otf(r)*jinc(2*np.pi*halfSize*r),
                0., D, **tol)*2*np.pi*np.pi*halfSize**2
        else:
            a = 2*halfSize
            out = dblquad(
                lambda o, r: r*provider.otf(r) *
                sinc(np.pi*r*np.cos(o)*a)*sinc(np.pi*r*np.sin(o)*a),
                0., 2*np.pi, 0., D, **tol)*a*a
    else:
        if trap == 'circle':
            out = quad(lambda x: x*provider.psf(x), 0., halfSize, **tol)*2*np.pi
        else:
            out = dblquad(lambda x, y: provider.psf(np.hypot(x, y)),
                          0., halfSize, 0., halfSize, **tol)*4

    return float(out)
