"""Angular unit conversions consumed at telescope construction."""
from collections import namedtuple

import numpy as np

radian2arcsec = 180. / np.pi * 3600.  # radians to arcseconds
radian2arcmin = 180. / np.pi * 60.  # radians to arcminutes
radian2mas = radian2arcsec * 1e3  # radians to milliarcseconds

AngularUnits = namedtuple('AngularUnits', ['radian2arcsec', 'radian2arcmin'])
AngularUnits.__doc__ = """
Conversion factors from radians handed to a telescope at construction.

Pass a different instance to work in another unit system, e.g. in tests.
"""

DEFAULT_UNITS = AngularUnits(radian2arcsec=radian2arcsec,
                             radian2arcmin=radian2arcmin)
