"""Beta log probability density function."""

from torch import Tensor

from torchbeta.special_functions._promote import promote_inputs

from ._beta_distribution import BetaDistribution


def beta_log_probability_density(
    x: Tensor | float, a: Tensor | float, b: Tensor | float
) -> Tensor:
    r"""Log probability density function of the beta distribution.

    Computed directly for numerical stability (not as log(pdf)).

    .. math::
        \log f(x; a, b) = (a-1) \log x + (b-1) \log(1-x) - \log B(a, b)

    where :math:`B(a, b)` is the beta function.

    Parameters
    ----------
    x : Tensor or float
        Points at which to evaluate. ``-inf`` outside (0, 1), and at the
        boundaries where the density is bounded.
    a : Tensor or float
        First shape parameter. Must be positive.
    b : Tensor or float
        Second shape parameter. Must be positive.

    Returns
    -------
    Tensor
        Log PDF values.

    Raises
    ------
    UnboundedDensityError
        If ``x == 0`` with ``a < 1`` or ``x == 1`` with ``b < 1``.

    Examples
    --------
    >>> x = torch.tensor([0.2, 0.5, 0.8])
    >>> beta_log_probability_density(x, 2.0, 5.0)
    tensor([ 0.8991, -0.0645, -3.2597])

    See Also
    --------
    beta_probability_density : Exp of log PDF
    """
    x, a, b = promote_inputs(x, a, b)
    return BetaDistribution(a, b).log_probability_density(x)
