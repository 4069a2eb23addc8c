"""
Telescope pupil model.

A telescope is defined by its diameter D and by optional parameters (central
obstruction, conjugation altitude, focalisation distance, field-of-view and
pupil sampling). Concrete telescope families provide the optical response
(PSF, OTF and PSF full width at half maximum) used by the diffraction
computations.
"""
from abc import ABC, abstractmethod
from enum import Enum
import logging

import numpy as np

from . import check
from . import diffraction
from .config import TelescopeParameters, read_telescope_yaml
from .constants import DEFAULT_UNITS
from .errors import InvalidParameter
from .mask import gen_annular_pupil

log = logging.getLogger(__name__)


class OpticalResponseProvider(ABC):
    """Optical response of an aperture family."""

    @abstractmethod
    def otf(self, r):
        """Optical transfer function at radial frequency r, 1 at r = 0."""
        pass

    @abstractmethod
    def psf(self, f):
        """Point spread function at angular radius f."""
        pass

    @abstractmethod
    def fullWidthHalfMax(self):
        """Full width at half maximum of the PSF."""
        pass


class PupilState(Enum):
    """Where the pupil mask of a telescope comes from."""

    UNSET = 'unset'  # computed from resolution and obstructionRatio
    OVERRIDDEN = 'overridden'  # given by the user


class TelescopeAbstract(OpticalResponseProvider):
    """
    Create a telescope object.

    tel = TelescopeAbstract(D) creates a telescope from the diameter D.

    tel = TelescopeAbstract(D, obstructionRatio=..., ...) creates a telescope
    from the diameter D and from optional keyword parameters, or from a
    TelescopeParameters object given as params. The parameters are
    obstructionRatio, conjugationHeight, focalDistance, fieldOfViewInArcsec
    or fieldOfViewInArcmin, and resolution.

    Parameters
    ----------
    D : float
        Telescope diameter.
    params : TelescopeParameters, optional
        Optional parameters. Cannot be combined with keyword parameters.
    units : aotelescope.constants.AngularUnits, optional
        Conversion factors used for the field-of-view.
    """

    def __init__(self, D, params=None, units=DEFAULT_UNITS, **kwargs):
        check.real_positive_scalar(D, 'D', InvalidParameter)
        if params is None:
            params = TelescopeParameters(**kwargs)
        elif kwargs:
            raise InvalidParameter('Give the telescope parameters either as '
                                   'a TelescopeParameters object or as '
                                   'keywords, not both.')
        elif not isinstance(params, TelescopeParameters):
            raise InvalidParameter('params must be a TelescopeParameters '
                                   'object')
        else:
            # Fields may have been edited since the record was created
            params.validate()

        self._D = float(D)
        self._obstructionRatio = float(params.obstructionRatio)
        self._conjugationHeight = float(params.conjugationHeight)
        self._focalDistance = float(params.focalDistance)
        self._fieldOfView = float(params.fieldOfView(units))
        self._resolution = params.resolution
        self._units = units

        self._pupilState = PupilState.UNSET
        self._pupilOverride = None

    @classmethod
    def from_yaml(cls, yaml_str, units=DEFAULT_UNITS):
        """Create a telescope from a YAML description, see read_telescope_yaml."""
        D, params = read_telescope_yaml(yaml_str)
        return cls(D, params=params, units=units)

    # Geometry
    @property
    def D(self):
        """Diameter."""
        return self._D

    @property
    def obstructionRatio(self):
        """Central obstruction ratio."""
        return self._obstructionRatio

    @property
    def conjugationHeight(self):
        """Conjugation altitude."""
        return self._conjugationHeight

    @property
    def focalDistance(self):
        """Focalisation distance."""
        return self._focalDistance

    @property
    def fieldOfView(self):
        """Field-of-view in radians."""
        return self._fieldOfView

    @property
    def resolution(self):
        """Diameter resolution in pixel, or None."""
        return self._resolution

    @property
    def units(self):
        return self._units

    @property
    def R(self):
        """Radius."""
        return self._D/2

    @property
    def area(self):
        """Light collecting area."""
        return np.pi*self.R**2*(1 - self._obstructionRatio**2)

    def diameterAt(self, height):
        """
        Compute the diameter of the beam footprint at a given altitude.

        The footprint grows with the field-of-view away from the reference
        plane.

        Parameters
        ----------
        height : float or array_like
            Altitude(s) relative to the reference plane.
        """
        return self._D + 2.*np.asarray(height)*np.tan(self._fieldOfView/2)

    # Pupil
    @property
    def pupilState(self):
        return self._pupilState

    @property
    def pupil(self):
        """
        Telescope pupil mask.

        The user-defined mask when one was set, otherwise a rasterized
        annulus when the resolution is set, otherwise None.
        """
        if self._pupilState is PupilState.OVERRIDDEN:
            return self._pupilOverride
        if self._resolution is None:
            return None
        return gen_annular_pupil(self._resolution, self._obstructionRatio)

    @pupil.setter
    def pupil(self, val):
        self.setPupil(val)

    def setPupil(self, mask):
        """Replace the computed pupil by the given 2-D mask."""
        mask = check.twoD_real_array(mask, 'mask', InvalidParameter)
        self._pupilOverride = mask
        self._pupilState = PupilState.OVERRIDDEN
        log.debug('Pupil overridden by a %dx%d mask', *mask.shape)

    def clearPupil(self):
        """Go back to the pupil computed from the resolution."""
        self._pupilOverride = None
        self._pupilState = PupilState.UNSET
        log.debug('Pupil override cleared')

    @property
    def pupilLogical(self):
        """Boolean pupil mask, or None."""
        pupil = self.pupil
        if pupil is None:
            return None
        return np.asarray(pupil) > 0

    # Diffraction
    def FT(self, f):
        """
        Fourier transform of the telescope pupil.

        out = FT(f) computes the Fourier transform of the telescope pupil,
        normalized to 1 at f = 0.
        """
        return diffraction.fourier_transform(self._D, self._obstructionRatio,
                                             f)

    def symFT(self, f=None):
        """
        Symbolic Fourier transform of the telescope pupil.

        Returns a sympy expression of the frequency f (a positive symbol
        named f by default) with the telescope geometry substituted.
        """
        return diffraction.symbolic_fourier_transform(
            f, self._D, self._obstructionRatio)

    def entrappedEnergy(self, eHalfSize, trap, psfOrOtf='psf', **kwargs):
        """
        Encircled or ensquared energy.

        out = entrappedEnergy(eHalfSize, trap) computes the entrapped energy
        in a circle of radius eHalfSize if trap is set to 'circle' or in a
        square of half length eHalfSize if trap is set to 'square'. The
        energy is integrated from the PSF, or from the OTF if psfOrOtf is
        'otf'. Keyword arguments are passed to
        aotelescope.diffraction.entrapped_energy.
        """
        return diffraction.entrapped_energy(self, self._D, eHalfSize, trap,
                                            psfOrOtf, **kwargs)

    # Display
    def describe(self):
        """Return a one-line summary of the telescope."""
        if self._obstructionRatio == 0:
            s = ' %4.2fm diameter full aperture' % self._D
        else:
            s = ' %4.2fm diameter with a %4.2f%% central obstruction' % (
                self._D, self._obstructionRatio*100)
        s += ' with %5.2fm^2 of light collecting area;' % self.area
        if self._fieldOfView != 0:
            s += ' the field-of-view is %4.2farcmin;' % (
                self._fieldOfView*self._units.radian2arcmin)
        if self._resolution is not None:
            s += ' the pupil is sampled with %dX%d pixels' % (
                self._resolution, self._resolution)
        return s

    def display(self):
        """Print information about the telescope."""
        print(self.describe())

    def __repr__(self):
        return '%s:%s' % (self.__class__.__name__, self.describe())
