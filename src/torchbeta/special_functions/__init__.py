from ._incomplete_beta import (
    IncompleteBetaConvergenceWarning,
    incomplete_beta,
)
from ._log_beta import log_beta
from ._log_gamma import log_gamma

__all__ = [
    "IncompleteBetaConvergenceWarning",
    "incomplete_beta",
    "log_beta",
    "log_gamma",
]
