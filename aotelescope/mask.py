"""Rasterized pupil masks and their FITS storage."""
import logging

import numpy as np
from astropy.io import fits

from . import check
from .util import create_axis, radial_grid

log = logging.getLogger(__name__)


def gen_piston(nPixDisk, nPixArray=None, xOffset=0., yOffset=0.):
    """
    Generate a filled disk (piston) inside a square frame.

    Pixels are kept when their center lies within the disk. The frame uses
    interpixel centering, so a disk without offset is exactly centered in
    the frame whatever the parity of the two sizes.

    Parameters
    ----------
    nPixDisk : int
        Disk diameter in pixels. Zero gives an empty mask.
    nPixArray : int, optional
        Number of points across the 2-D, NxN output array. Defaults to
        nPixDisk.
    xOffset, yOffset : float, optional
        Lateral shifts of the disk center in pixels.

    Returns
    -------
    piston : numpy ndarray
        2-D array of 0s and 1s (float64).
    """
    check.nonnegative_scalar_integer(nPixDisk, 'nPixDisk', TypeError)
    if nPixArray is None:
        nPixArray = nPixDisk
    check.positive_scalar_integer(nPixArray, 'nPixArray', TypeError)
    check.real_scalar(xOffset, 'xOffset', TypeError)
    check.real_scalar(yOffset, 'yOffset', TypeError)

    if nPixDisk == 0:
        return np.zeros((nPixArray, nPixArray))

    x = create_axis(nPixArray, 1., centering='interpixel')
    if xOffset == 0 and yOffset == 0:
        RHO = radial_grid(x)
    else:
        RHO = np.hypot(x[None, :] - xOffset, x[:, None] - yOffset)

    return (RHO <= nPixDisk/2.).astype(np.float64)


def gen_annular_pupil(resolution, obstructionRatio):
    """
    Generate the sampled pupil of a centrally obstructed circular aperture.

    The central hole has a diameter of round(resolution*obstructionRatio)
    pixels and is centered in the resolution x resolution frame.

    Parameters
    ----------
    resolution : int
        Pupil diameter in pixels, also the width of the output array.
    obstructionRatio : float
        Central obstruction diameter as a fraction of the pupil diameter.

    Returns
    -------
    pupil : numpy ndarray
        2-D array of 0s and 1s.
    """
    check.positive_scalar_integer(resolution, 'resolution', TypeError)
    check.real_nonnegative_scalar(obstructionRatio, 'obstructionRatio',
                                  TypeError)
    if obstructionRatio >= 1:
        raise ValueError('obstructionRatio must be smaller than 1')

    pupil = gen_piston(resolution)
    if obstructionRatio > 0:
        nPixHole = int(round(resolution*obstructionRatio))
        pupil = pupil - gen_piston(nPixHole, resolution)
    log.debug('Rasterized %dx%d pupil with a %.3f obstruction',
              resolution, resolution, obstructionRatio)

    return pupil


def write_pupil_fits(filename, pupil, overwrite=False):
    """
    Save a pupil mask to a FITS file.

    Parameters
    ----------
    filename : str or path-like
        Output file name.
    pupil : array_like
        2-D real pupil mask.
    overwrite : bool
        Whether to replace an existing file.
    """
    pupil = check.twoD_real_array(pupil, 'pupil', TypeError)
    fits.writeto(filename, np.asarray(pupil, dtype=np.float64),
                 overwrite=overwrite)


def read_pupil_fits(filename, ext=0):
    """
    Read a pupil mask, e.g. a measured or apodized one, from a FITS file.

    Returns
    -------
    pupil : numpy ndarray
        2-D float64 array, ready to be given to a telescope's setPupil.
    """
    pupil = fits.getdata(filename, ext=ext)
    return check.twoD_real_array(np.asarray(pupil, dtype=np.float64),
                                 'pupil', ValueError)
