"""Quick-look plots of a telescope."""
import numpy as np
import matplotlib.pyplot as plt

from . import check


def plot_pupil(tel, fignum=None):
    """
    Show the telescope pupil mask.

    Parameters
    ----------
    tel : TelescopeAbstract
        Telescope with a resolution or a user-defined pupil.
    fignum : int, optional
        Matplotlib figure number.

    Returns
    -------
    fig : matplotlib.figure.Figure
    """
    pupil = tel.pupil
    if pupil is None:
        raise ValueError('The telescope has no sampled pupil: set its '
                         'resolution or a pupil mask.')

    fig, ax = plt.subplots(num=fignum)
    extent = [-tel.R, tel.R, -tel.R, tel.R]
    im = ax.imshow(pupil, cmap='gray', interpolation='none', origin='lower',
                   extent=extent)
    ax.set_xlabel('x [m]')
    ax.set_ylabel('y [m]')
    ax.set_title('Pupil, D=%.2fm, obstruction %.0f%%' % (
        tel.D, 100*tel.obstructionRatio))
    fig.colorbar(im, ax=ax)

    return fig


def plot_radial_profiles(tel, rMax=None, nPoints=256, fignum=None):
    """
    Plot the radial PSF and OTF of a telescope.

    Parameters
    ----------
    tel : TelescopeAbstract
        Concrete telescope providing psf() and otf().
    rMax : float, optional
        Largest PSF radius. Defaults to 5 first-dark-ring radii (6.1/D).
    nPoints : int
        Number of samples of each curve.
    fignum : int, optional
        Matplotlib figure number.

    Returns
    -------
    fig : matplotlib.figure.Figure
    """
    check.positive_scalar_integer(nPoints, 'nPoints', TypeError)
    if rMax is None:
        rMax = 6.1/tel.D
    check.real_positive_scalar(rMax, 'rMax', TypeError)

    r = np.linspace(0, rMax, nPoints)
    f = np.linspace(0, tel.D, nPoints)
    psf = np.asarray(tel.psf(r))

    fig, (ax1, ax2) = plt.subplots(1, 2, num=fignum, figsize=(10, 4))
    ax1.semilogy(r, psf/psf[0])
    ax1.set_xlabel('angular radius [wavelength units]')
    ax1.set_ylabel('normalized PSF')
    ax1.set_title('PSF')

    ax2.plot(f, tel.otf(f))
    ax2.set_xlabel('spatial frequency')
    ax2.set_ylabel('OTF')
    ax2.set_title('OTF')
    fig.tight_layout()

    return fig


def plot_entrapped_energy(tel, halfSizes, trap='circle', psfOrOtf='psf',
                          fignum=None):
    """
    Plot the entrapped energy against the trap half-size.

    Returns
    -------
    fig : matplotlib.figure.Figure
    energy : numpy ndarray
        Entrapped energy at each half-size.
    """
    halfSizes = check.oneD_array(halfSizes, 'halfSizes', TypeError)
    energy = np.array([tel.entrappedEnergy(float(h), trap, psfOrOtf)
                       for h in halfSizes])

    fig, ax = plt.subplots(num=fignum)
    ax.plot(halfSizes, energy, '-o')
    ax.set_xlabel('%s half-size' % trap)
    ax.set_ylabel('entrapped energy')
    ax.grid(True)

    return fig, energy
