"""Beta survival function."""

from torch import Tensor

from torchbeta.special_functions._promote import promote_inputs

from ._beta_distribution import BetaDistribution


def beta_survival(
    x: Tensor | float, a: Tensor | float, b: Tensor | float
) -> Tensor:
    r"""Survival function (1 - CDF) of the beta distribution.

    .. math::
        S(x; a, b) = 1 - F(x) = I_{1-x}(b, a)

    where :math:`I_z(p, q)` is the regularized incomplete beta function.

    More numerically stable than ``1 - beta_cumulative_distribution(x)`` for
    values of x close to 1.

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate the survival function.
    a : Tensor or float
        First shape parameter. Must be positive.
    b : Tensor or float
        Second shape parameter. Must be positive.

    Returns
    -------
    Tensor
        Survival function values.

    Examples
    --------
    >>> x = torch.tensor([0.25, 0.5, 0.75])
    >>> beta_survival(x, 2.0, 5.0)
    tensor([0.5339, 0.1094, 0.0046])

    See Also
    --------
    beta_cumulative_distribution : CDF = 1 - SF
    """
    x, a, b = promote_inputs(x, a, b)
    return BetaDistribution(a, b).survival(x)
