"""Hypothesis strategies for beta distribution testing."""

from ._positive_real_numbers import positive_real_numbers
from ._probabilities import probabilities
from ._shape_parameters import shape_parameters
from ._unit_interval_pairs import unit_interval_pairs

__all__ = [
    "positive_real_numbers",
    "probabilities",
    "shape_parameters",
    "unit_interval_pairs",
]
