"""Probability module exceptions."""

__all__ = [
    "ProbabilityError",
    "DomainError",
    "ParameterError",
    "UnboundedDensityError",
]


class ProbabilityError(ValueError):
    """Base exception for probability module errors."""

    pass


class ParameterError(ProbabilityError):
    """Raised when a distribution parameter is invalid.

    This occurs when:
    - A shape parameter is not strictly positive (or is NaN)
    - The inverse cumulative accuracy is not strictly positive
    """

    pass


class DomainError(ProbabilityError):
    """Raised when input is outside the valid domain.

    For example a probability outside [0, 1] passed to a quantile function.
    """

    pass


class UnboundedDensityError(ProbabilityError):
    """Raised when a density is requested where it is unbounded.

    The beta density at ``x = 0`` is infinite when ``alpha < 1``, and at
    ``x = 1`` when ``beta < 1``.
    """

    pass
