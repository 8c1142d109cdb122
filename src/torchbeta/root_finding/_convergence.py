"""Convergence utilities for root finding."""

import torch
from torch import Tensor


def default_tolerances(dtype: torch.dtype) -> dict[str, float]:
    """Return dtype-appropriate default tolerances.

    Parameters
    ----------
    dtype : torch.dtype
        The tensor dtype.

    Returns
    -------
    dict[str, float]
        Dictionary with keys 'xtol', 'rtol', 'ftol'.
    """
    if dtype in (torch.float16, torch.bfloat16):
        return {"xtol": 1e-3, "rtol": 1e-2, "ftol": 1e-3}
    elif dtype == torch.float32:
        return {"xtol": 1e-6, "rtol": 1e-5, "ftol": 1e-6}
    else:  # float64 and others
        return {"xtol": 1e-12, "rtol": 1e-9, "ftol": 1e-12}


def bracket_converged(
    x: Tensor,
    half_width: Tensor,
    fx: Tensor,
    xtol: float,
    rtol: float,
    ftol: float,
) -> Tensor:
    """Check convergence of a bracketing method for each element.

    Convergence is achieved when ANY of:
    - ``|half_width| <= 2 * eps * |x| + (xtol + rtol * |x|) / 2``
      (bracket converged, floored at machine resolution)
    - ``|f(x)| < ftol`` (residual converged)
    - ``f(x) == 0`` (exact root)

    Parameters
    ----------
    x : Tensor
        Current best estimates.
    half_width : Tensor
        Half the signed distance from ``x`` to the opposite bracket end.
    fx : Tensor
        Function values at ``x``.
    xtol : float
        Absolute tolerance on x.
    rtol : float
        Relative tolerance on x.
    ftol : float
        Tolerance on function value.

    Returns
    -------
    Tensor
        Boolean mask where True indicates convergence.
    """
    eps = torch.finfo(x.dtype).eps
    tol = 2.0 * eps * torch.abs(x) + 0.5 * (xtol + rtol * torch.abs(x))
    x_converged = torch.abs(half_width) <= tol
    f_converged = torch.abs(fx) < ftol
    return x_converged | f_converged | (fx == 0)
