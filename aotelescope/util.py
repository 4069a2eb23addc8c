"""aotelescope utilities."""
import numpy as np
from scipy.special import j1

from . import check


def broadcast(axis):
    """
    Use numpy array broadcasting in two dimensions.

    Use numpy array broadcasting to return two views of the input axis that
    behave like a row vector (x) and a column vector (y), and which can be used
    to build memory-efficient coordinate grids without using meshgrid.

    Parameters
    ----------
    axis : array_like
        1D coordinate axis

    Returns
    -------
    array_like, array_like
        Two views into axis that behave like a row and column vector,
        respectively.

    """
    x = axis[None, :]
    y = axis[:, None]
    return x, y


def radial_grid(axis, xStretch=1., yStretch=1.):
    """
    Compute a memory-efficient radial grid using array broadcasting.

    Parameters
    ----------
    axis : array_like
        1D coordinate axis

    Returns
    -------
    array_like
        2D grid with radial coordinates generated by axis
    """
    check.oneD_array(axis, 'axis', TypeError)
    check.real_scalar(xStretch, 'xStretch', TypeError)
    check.real_scalar(yStretch, 'yStretch', TypeError)

    x, y = broadcast(axis)
    return np.sqrt((x/xStretch)**2 + (y/yStretch)**2)


def create_axis(N, step, centering='pixel'):
    """
    Create a one-dimensional coordinate axis with a given size and step size.

    Can be constructed to follow either the FFT (pixel-centered) or the
    interpixel-centered convention, which differ by half a pixel for
    even-sized arrays. For odd-sized arrays, both values of centering put the
    center on the center pixel.

    Parameters
    ----------
    N : int
        Number of pixels in output axis
    step : float
        Physical step size between axis elements
    centering : 'pixel' or 'interpixel'
        Centering of the coordinates in the array.

    Returns
    -------
    array_like
        The output coordinate axis
    """
    check.positive_scalar_integer(N, 'N', TypeError)
    check.real_positive_scalar(step, 'step', TypeError)
    check.centering(centering)

    if centering == 'pixel':
        axis = (np.arange(N, dtype=np.float64) - N//2) * step
    else:
        axis = (np.arange(N, dtype=np.float64) - (N - 1)/2.) * step

    return axis


def sinc(x):
    """
    Unnormalized cardinal sine, sin(x)/x, with sinc(0) = 1.

    Parameters
    ----------
    x : float or numpy.ndarray
        Argument in radians

    Returns
    -------
    float or numpy.ndarray
        sin(x)/x evaluated elementwise
    """
    # numpy's sinc is the normalized one: sin(pi*x)/(pi*x)
    return np.sinc(np.asarray(x, dtype=float)/np.pi)


def jinc(x):
    """
    Circular analogue of sinc, 2*J1(x)/x, with jinc(0) = 1.

    Parameters
    ----------
    x : float or numpy.ndarray
        Argument in radians

    Returns
    -------
    float or numpy.ndarray
        2*J1(x)/x evaluated elementwise
    """
    x = np.asarray(x, dtype=float)
    out = np.ones_like(x)
    nonzero = x != 0
    out[nonzero] = 2.*j1(x[nonzero])/x[nonzero]
    if out.ndim == 0:
        return float(out)
    return out


def _spec_arg(k, kwargs, v):
    """
    Specify default argument for parameter-record constructors.

    Parameters
    ----------
    k : string
        Name of variable whose value will be assigned
    kwargs : dict
        Dictionary of keyword arguments, which may or may not specify a value
        for k.
    v : any
        Default value for the variable k.

    Returns
    -------
    The value to initialize the class with.
    """
    if k in kwargs:
        return kwargs[k]
    else:
        return v
