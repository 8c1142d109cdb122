"""Natural logarithm of the absolute value of the gamma function."""

import torch
from torch import Tensor

from ._promote import promote_inputs


def log_gamma(z: Tensor | float) -> Tensor:
    r"""Log-gamma function.

    .. math::
        \log |\Gamma(z)|

    Evaluated directly rather than as ``log(gamma(z))``, so it stays finite
    for arguments where :math:`\Gamma(z)` itself overflows.

    Parameters
    ----------
    z : Tensor or float
        Input values.

    Returns
    -------
    Tensor
        Log-gamma values. ``+inf`` at non-positive integers.

    Examples
    --------
    >>> log_gamma(torch.tensor([1.0, 2.0, 5.0]))
    tensor([0.0000, 0.0000, 3.1781])
    """
    (z,) = promote_inputs(z)
    return torch.special.gammaln(z)
