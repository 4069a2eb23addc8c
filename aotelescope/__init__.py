from . import check
from . import errors
from . import constants
from . import util
from . import mask
from . import config
from . import diffraction

from .errors import *
from .mask import *
from .diffraction import (fourier_transform, symbolic_fourier_transform,
                          entrapped_energy)
from .telescope import *
from .airy import *
from .plot import *
