"""Beta cumulative distribution function."""

from torch import Tensor

from torchbeta.special_functions._promote import promote_inputs

from ._beta_distribution import BetaDistribution


def beta_cumulative_distribution(
    x: Tensor | float, a: Tensor | float, b: Tensor | float
) -> Tensor:
    r"""Cumulative distribution function of the beta distribution.

    .. math::
        F(x; a, b) = I_x(a, b)

    where :math:`I_x` is the regularized incomplete beta function.

    Parameters
    ----------
    x : Tensor or float
        Quantiles. Values at or below 0 give exactly 0, values at or above
        1 give exactly 1.
    a : Tensor or float
        First shape parameter. Must be positive.
    b : Tensor or float
        Second shape parameter. Must be positive.

    Returns
    -------
    Tensor
        CDF values.

    Examples
    --------
    >>> x = torch.tensor([0.25, 0.5, 0.75])
    >>> beta_cumulative_distribution(x, 2.0, 5.0)
    tensor([0.4661, 0.8906, 0.9954])
    """
    x, a, b = promote_inputs(x, a, b)
    return BetaDistribution(a, b).cumulative_distribution(x)
