import hypothesis.strategies

from ._positive_real_numbers import positive_real_numbers


def shape_parameters(
    min_value: float = 0.05,
    max_value: float = 50.0,
) -> hypothesis.strategies.SearchStrategy[float]:
    """Strategy for beta shape parameters.

    The default range covers U-shaped (< 1), flat and strongly peaked
    densities while keeping quantiles away from underflow.
    """
    return positive_real_numbers(min_value=min_value, max_value=max_value)
