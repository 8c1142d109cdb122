"""Beta quantile function."""

from torch import Tensor

from torchbeta.special_functions._promote import promote_inputs

from ._beta_distribution import (
    DEFAULT_INVERSE_ABSOLUTE_ACCURACY,
    BetaDistribution,
)


def beta_quantile(
    p: Tensor | float,
    a: Tensor | float,
    b: Tensor | float,
    *,
    inverse_absolute_accuracy: float = DEFAULT_INVERSE_ABSOLUTE_ACCURACY,
) -> Tensor:
    r"""Quantile function (inverse CDF) of the beta distribution.

    Parameters
    ----------
    p : Tensor or float
        Probabilities in [0, 1].
    a : Tensor or float
        First shape parameter. Must be positive.
    b : Tensor or float
        Second shape parameter. Must be positive.
    inverse_absolute_accuracy : float, default=1e-9
        Absolute accuracy of the returned quantiles.

    Returns
    -------
    Tensor
        Quantiles. Exactly 0 for ``p == 0`` and exactly 1 for ``p == 1``.

    Raises
    ------
    DomainError
        If ``p`` is outside [0, 1].
    ConvergenceError
        If the root finder does not converge.

    Examples
    --------
    >>> p = torch.tensor([0.0, 0.6875, 1.0], dtype=torch.float64)
    >>> beta_quantile(p, 2.0, 3.0)
    tensor([0.0000, 0.5000, 1.0000], dtype=torch.float64)
    """
    p, a, b = promote_inputs(p, a, b)
    return BetaDistribution(a, b, inverse_absolute_accuracy).quantile(p)
