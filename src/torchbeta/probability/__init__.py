"""Beta distribution with CDF, PDF, quantile, and moments.

This module provides the Beta distribution both as a model object with a
cached normalization constant and as functional operators:
- PDF and log PDF computed in log-space
- CDF and survival function via the regularized incomplete beta function
- Quantile (inverse CDF) via bracketing and Brent's method

Example
-------
>>> import torch
>>> from torchbeta.probability import BetaDistribution
>>>
>>> dist = BetaDistribution(2.0, 3.0)
>>> dist.cumulative_distribution(torch.tensor([0.25, 0.5]))
tensor([0.2617, 0.6875], dtype=torch.float64)
>>>
>>> # Quantiles
>>> dist.quantile(torch.tensor([0.0, 0.6875, 1.0], dtype=torch.float64))
tensor([0.0000, 0.5000, 1.0000], dtype=torch.float64)
"""

from ._beta import (
    DEFAULT_INVERSE_ABSOLUTE_ACCURACY,
    BetaDistribution,
    beta_cumulative_distribution,
    beta_log_probability_density,
    beta_probability_density,
    beta_quantile,
    beta_survival,
)
from ._exceptions import (
    DomainError,
    ParameterError,
    ProbabilityError,
    UnboundedDensityError,
)
from ._inverse_cumulative_distribution import inverse_cumulative_distribution

__all__ = [
    "DomainError",
    "ParameterError",
    "ProbabilityError",
    "UnboundedDensityError",
    "inverse_cumulative_distribution",
    # Beta distribution
    "DEFAULT_INVERSE_ABSOLUTE_ACCURACY",
    "BetaDistribution",
    "beta_cumulative_distribution",
    "beta_log_probability_density",
    "beta_probability_density",
    "beta_quantile",
    "beta_survival",
]
