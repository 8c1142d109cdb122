"""Natural logarithm of the beta function."""

from torch import Tensor

from ._log_gamma import log_gamma
from ._promote import promote_inputs


def log_beta(a: Tensor | float, b: Tensor | float) -> Tensor:
    r"""Log of the beta function.

    .. math::
        \log B(a, b) = \log \Gamma(a) + \log \Gamma(b) - \log \Gamma(a + b)

    Parameters
    ----------
    a : Tensor or float
        First parameter. Must be positive.
    b : Tensor or float
        Second parameter. Must be positive.

    Returns
    -------
    Tensor
        Values of :math:`\log B(a, b)`, broadcast shape of ``a`` and ``b``.

    Examples
    --------
    >>> log_beta(2.0, 3.0)  # log(1/12)
    tensor(-2.4849, dtype=torch.float64)
    """
    a, b = promote_inputs(a, b)
    return log_gamma(a) + log_gamma(b) - log_gamma(a + b)
