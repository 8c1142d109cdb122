"""Exception classes for root finding module."""


class RootFindingError(Exception):
    """Base exception for root finding errors."""

    pass


class BracketError(RootFindingError):
    """Raised when no sign change can be found or a bracket is invalid."""

    pass


class ConvergenceError(RootFindingError):
    """Raised when a root is not located within the iteration limit.

    This occurs when:
    - Brent's method exhausts ``maxiter`` before the bracket shrinks
      below tolerance
    - A caller requires every element of a batch to converge
    """

    pass
