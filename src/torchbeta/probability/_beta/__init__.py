from ._beta_cumulative_distribution import beta_cumulative_distribution
from ._beta_distribution import (
    DEFAULT_INVERSE_ABSOLUTE_ACCURACY,
    BetaDistribution,
)
from ._beta_log_probability_density import beta_log_probability_density
from ._beta_probability_density import beta_probability_density
from ._beta_quantile import beta_quantile
from ._beta_survival import beta_survival

__all__ = [
    "DEFAULT_INVERSE_ABSOLUTE_ACCURACY",
    "BetaDistribution",
    "beta_cumulative_distribution",
    "beta_log_probability_density",
    "beta_probability_density",
    "beta_quantile",
    "beta_survival",
]
