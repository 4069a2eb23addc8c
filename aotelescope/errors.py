"""Exceptions raised by the telescope model and the diffraction engine."""


class TelescopeError(Exception):
    """Base class of all aotelescope errors."""

    pass


class InvalidParameter(TelescopeError, ValueError):
    """Bad telescope construction parameter or configuration entry."""

    pass


class InvalidArgument(TelescopeError, ValueError):
    """Bad argument given to a diffraction computation."""

    pass


class NumericalNonConvergence(TelescopeError, ArithmeticError):
    """Adaptive quadrature did not reach its tolerance."""

    pass
