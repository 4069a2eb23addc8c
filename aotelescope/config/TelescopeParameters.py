"""Optional telescope construction parameters."""
import numpy as np
import yaml

from aotelescope import check
from aotelescope.config.yaml_loader import load_from_str
from aotelescope.errors import InvalidParameter
from aotelescope.util import _spec_arg


class TelescopeParameters:
    """
    Optional parameters of a telescope, validated when created.

    Attributes
    ----------
    obstructionRatio : float
        Central obstruction diameter as a fraction of the telescope diameter.
    conjugationHeight : float
        Conjugation altitude of the pupil.
    focalDistance : float
        Focalisation distance; inf for an afocal (collimated) system.
    fieldOfViewInArcsec, fieldOfViewInArcmin : float or None
        Field-of-view, in one unit at most.
    resolution : int or None
        Pupil diameter in pixels; None when the pupil is not sampled.
    """

    KEYS = ('obstructionRatio', 'conjugationHeight', 'focalDistance',
            'fieldOfViewInArcsec', 'fieldOfViewInArcmin', 'resolution')

    def __init__(self, **kwargs):
        unknown = sorted(set(kwargs) - set(self.KEYS))
        if unknown:
            raise InvalidParameter('Unknown telescope parameter(s): '
                                   '{}. Options: {}'.format(unknown, self.KEYS))

        self.obstructionRatio = _spec_arg("obstructionRatio", kwargs, 0.)
        self.conjugationHeight = _spec_arg("conjugationHeight", kwargs, 0.)
        self.focalDistance = _spec_arg("focalDistance", kwargs, np.inf)
        self.fieldOfViewInArcsec = _spec_arg("fieldOfViewInArcsec", kwargs, None)
        self.fieldOfViewInArcmin = _spec_arg("fieldOfViewInArcmin", kwargs, None)
        self.resolution = _spec_arg("resolution", kwargs, None)

        self.validate()

    def validate(self):
        """Check every field and the exclusive field-of-view units."""
        check.real_nonnegative_scalar(self.obstructionRatio,
                                      'obstructionRatio', InvalidParameter)
        if not self.obstructionRatio < 1:
            raise InvalidParameter('obstructionRatio must be smaller than 1')
        check.real_scalar(self.conjugationHeight, 'conjugationHeight',
                          InvalidParameter)
        check.real_scalar(self.focalDistance, 'focalDistance',
                          InvalidParameter)

        if self.fieldOfViewInArcsec is not None:
            check.real_nonnegative_scalar(self.fieldOfViewInArcsec,
                                          'fieldOfViewInArcsec',
                                          InvalidParameter)
        if self.fieldOfViewInArcmin is not None:
            check.real_nonnegative_scalar(self.fieldOfViewInArcmin,
                                          'fieldOfViewInArcmin',
                                          InvalidParameter)
        if (self.fieldOfViewInArcsec is not None and
                self.fieldOfViewInArcmin is not None):
            raise InvalidParameter('Give the field-of-view either in arcsec '
                                   'or in arcmin, not both.')

        if self.resolution is not None:
            check.positive_scalar_integer(self.resolution, 'resolution',
                                          InvalidParameter)

    def fieldOfView(self, units):
        """
        Return the field-of-view in radians.

        Parameters
        ----------
        units : aotelescope.constants.AngularUnits
            Conversion factors from radians.
        """
        if self.fieldOfViewInArcsec is not None:
            return self.fieldOfViewInArcsec/units.radian2arcsec
        elif self.fieldOfViewInArcmin is not None:
            return self.fieldOfViewInArcmin/units.radian2arcmin
        else:
            return 0.

    def to_dict(self):
        """Return the parameters as a dictionary."""
        return {k: getattr(self, k) for k in self.KEYS}

    def show(self):
        print(self.to_dict())

    def __eq__(self, other):
        if not isinstance(other, TelescopeParameters):
            return False
        return self.to_dict() == other.to_dict()

    @classmethod
    def from_yaml(cls, yaml_str):
        """Parse parameters from a YAML mapping; see read_telescope_yaml."""
        return cls(**_read_mapping(yaml_str))


def _read_mapping(yaml_str):
    try:
        values = load_from_str(yaml_str)
    except (yaml.YAMLError, ValueError) as exc:
        raise InvalidParameter('Invalid telescope description: {}'.format(
            exc)) from exc
    badKeys = [key for key in values if not isinstance(key, str)]
    if badKeys:
        raise InvalidParameter('Telescope parameter names must be strings: '
                               '{}'.format(badKeys))
    return values


def read_telescope_yaml(yaml_str):
    """
    Read a telescope description from YAML.

    The mapping holds the diameter under `D` and any of the
    TelescopeParameters keys, e.g.

        D: 8.0
        obstructionRatio: 0.14
        fieldOfViewInArcmin: 2.0

    Returns
    -------
    D : float
        Telescope diameter.
    params : TelescopeParameters
        The other parameters.
    """
    values = _read_mapping(yaml_str)
    if 'D' not in values:
        raise InvalidParameter("The telescope diameter 'D' is missing.")
    D = values.pop('D')
    return D, TelescopeParameters(**values)
