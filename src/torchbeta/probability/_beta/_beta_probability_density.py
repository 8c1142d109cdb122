"""Beta probability density function."""

from torch import Tensor

from torchbeta.special_functions._promote import promote_inputs

from ._beta_distribution import BetaDistribution


def beta_probability_density(
    x: Tensor | float, a: Tensor | float, b: Tensor | float
) -> Tensor:
    r"""Probability density function of the beta distribution.

    .. math::
        f(x; a, b) = \frac{x^{a-1} (1-x)^{b-1}}{B(a, b)}

    where :math:`B(a, b)` is the beta function.

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate. The density is 0 outside [0, 1].
    a : Tensor or float
        First shape parameter. Must be positive.
    b : Tensor or float
        Second shape parameter. Must be positive.

    Returns
    -------
    Tensor
        PDF values.

    Raises
    ------
    ParameterError
        If ``a`` or ``b`` is not positive.
    UnboundedDensityError
        If ``x == 0`` with ``a < 1`` or ``x == 1`` with ``b < 1``.

    Examples
    --------
    >>> x = torch.tensor([0.2, 0.5, 0.8])
    >>> beta_probability_density(x, 2.0, 5.0)
    tensor([2.4576, 0.9375, 0.0384])

    See Also
    --------
    BetaDistribution.probability_density : Same operator on a model with a
        cached normalization constant.
    """
    x, a, b = promote_inputs(x, a, b)
    return BetaDistribution(a, b).probability_density(x)
