"""Brent's bracketed root-finding method."""

from typing import Callable

import torch
from torch import Tensor

from ._convergence import bracket_converged, default_tolerances
from ._exceptions import BracketError


def _safe_divide(numerator: Tensor, denominator: Tensor) -> Tensor:
    return numerator / torch.where(
        denominator == 0, torch.ones_like(denominator), denominator
    )


def brent(
    f: Callable[[Tensor], Tensor],
    a: Tensor,
    b: Tensor,
    *,
    xtol: float | None = None,
    rtol: float | None = None,
    ftol: float | None = None,
    maxiter: int = 100,
) -> tuple[Tensor, Tensor]:
    """
    Find roots of f(x) = 0 using Brent's method.

    Brent's method keeps a bracket ``[b, c]`` with ``f(b) * f(c) <= 0`` and
    at every step chooses between inverse quadratic interpolation, the
    secant step and bisection. Interpolated steps are only accepted when
    they shrink the bracket fast enough, so convergence is never slower
    than bisection.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Vectorized function. Takes tensor of shape ``(N,)``, returns ``(N,)``.
        The function must be continuous on the interval [a, b].
    a, b : Tensor
        Bracket endpoints. Must have the same shape and satisfy
        ``f(a) * f(b) <= 0`` for each element.
    xtol : float, optional
        Absolute tolerance on the bracket width.
        Default: dtype-aware (1e-3 for float16/bfloat16, 1e-6 for float32,
        1e-12 for float64).
    rtol : float, optional
        Relative tolerance on the bracket width.
        Default: dtype-aware (1e-2 for float16/bfloat16, 1e-5 for float32,
        1e-9 for float64).
    ftol : float, optional
        Tolerance on residual. An element converges as soon as
        ``|f(x)| < ftol``.
        Default: dtype-aware (same as xtol).
    maxiter : int, default=100
        Maximum iterations. Non-converged elements will have converged=False.

    Returns
    -------
    tuple[Tensor, Tensor]
        - **root** -- Roots with the same shape as input ``a`` and ``b``.
          For non-converged elements, this is the best estimate.
        - **converged** -- Boolean tensor with the same shape indicating
          which elements converged within maxiter iterations.

    Raises
    ------
    ValueError
        If ``a`` and ``b`` have different shapes, contain NaN/Inf, or if
        ``f`` returns NaN/Inf at the endpoints.
    BracketError
        If ``f(a)`` and ``f(b)`` have the same (nonzero) sign.
    RuntimeError
        If the function returns NaN during iteration.

    Examples
    --------
    Find the square root of 2 (solve x^2 - 2 = 0):

    >>> import torch
    >>> from torchbeta.root_finding import brent
    >>> f = lambda x: x**2 - 2
    >>> a, b = torch.tensor([1.0]), torch.tensor([2.0])
    >>> root, converged = brent(f, a, b)
    >>> float(root)  # doctest: +ELLIPSIS
    1.414...
    >>> converged.all()
    tensor(True)

    Batched root-finding:

    >>> c = torch.tensor([2.0, 3.0, 4.0])
    >>> f = lambda x: x**2 - c
    >>> roots, converged = brent(f, torch.ones(3), torch.full((3,), 10.0))
    >>> [f"{v:.4f}" for v in roots.tolist()]
    ['1.4142', '1.7321', '2.0000']

    Notes
    -----
    **Convergence Criterion**: An element converges when the bracket
    half-width falls below ``2 * eps * |x| + (xtol + rtol * |x|) / 2``, or
    when ``|f(x)| < ftol``, or when ``f(x) == 0``. The machine-epsilon
    floor keeps the criterion reachable when ``xtol`` is below the spacing
    of floating point numbers around the root.

    **Algorithm**: Follows the formulation in Brent (1973), "Algorithms for
    Minimization without Derivatives", chapter 4, applied elementwise with
    masks so every element of the batch advances independently.

    See Also
    --------
    scipy.optimize.brentq : SciPy's scalar Brent implementation
    bracket : Finds a sign-changing interval to start from
    """
    if a.shape != b.shape:
        raise ValueError(
            f"a and b must have same shape, got {a.shape} and {b.shape}"
        )

    orig_shape = a.shape

    if a.numel() == 0:
        empty_converged = torch.ones(
            a.shape, dtype=torch.bool, device=a.device
        )
        return a.clone(), empty_converged

    a = a.flatten().clone()
    b = b.flatten().clone()

    if torch.any(~torch.isfinite(a)) or torch.any(~torch.isfinite(b)):
        raise ValueError("a and b must not contain NaN or Inf")

    defaults = default_tolerances(a.dtype)
    if xtol is None:
        xtol = defaults["xtol"]
    if rtol is None:
        rtol = defaults["rtol"]
    if ftol is None:
        ftol = defaults["ftol"]

    fa = f(a)
    fb = f(b)

    if torch.any(~torch.isfinite(fa)) or torch.any(~torch.isfinite(fb)):
        raise ValueError("Function returned NaN or Inf at bracket endpoints")

    if torch.any(fa * fb > 0):
        invalid = fa * fb > 0
        invalid_indices = torch.where(invalid)[0].tolist()
        raise BracketError(
            f"Invalid bracket: f(a) and f(b) must have opposite signs. "
            f"{invalid.sum().item()} of {invalid.numel()} brackets are invalid "
            f"at indices {invalid_indices}."
        )

    eps = torch.finfo(a.dtype).eps

    # c is the contrapoint: f(b) and f(c) always have opposite signs
    c = a.clone()
    fc = fa.clone()
    d = b - a
    e = d.clone()

    converged = torch.zeros(a.shape, dtype=torch.bool, device=a.device)

    for iteration in range(maxiter + 1):
        # Restore the contrapoint after b crossed the root
        same_side = ((fb > 0) & (fc > 0)) | ((fb < 0) & (fc < 0))
        c = torch.where(same_side, a, c)
        fc = torch.where(same_side, fa, fc)
        d = torch.where(same_side, b - a, d)
        e = torch.where(same_side, b - a, e)

        # Keep b as the end with the smaller residual
        swap = torch.abs(fc) < torch.abs(fb)
        a = torch.where(swap, b, a)
        fa = torch.where(swap, fb, fa)
        b, c = torch.where(swap, c, b), torch.where(swap, b, c)
        fb, fc = torch.where(swap, fc, fb), torch.where(swap, fb, fc)

        xm = 0.5 * (c - b)
        tol1 = 2.0 * eps * torch.abs(b) + 0.5 * (
            xtol + rtol * torch.abs(b)
        )

        converged = converged | bracket_converged(
            b, xm, fb, xtol, rtol, ftol
        )

        if torch.all(converged) or iteration == maxiter:
            break

        active = ~converged

        # Secant when only two distinct points are known, otherwise
        # inverse quadratic interpolation
        s = _safe_divide(fb, fa)
        q_ratio = _safe_divide(fa, fc)
        r_ratio = _safe_divide(fb, fc)
        is_secant = a == c
        p = torch.where(
            is_secant,
            2.0 * xm * s,
            s
            * (
                2.0 * xm * q_ratio * (q_ratio - r_ratio)
                - (b - a) * (r_ratio - 1.0)
            ),
        )
        q = torch.where(
            is_secant,
            1.0 - s,
            (q_ratio - 1.0) * (r_ratio - 1.0) * (s - 1.0),
        )
        q = torch.where(p > 0, -q, q)
        p = torch.abs(p)

        try_interpolation = (torch.abs(e) >= tol1) & (
            torch.abs(fa) > torch.abs(fb)
        )
        bound = torch.minimum(
            3.0 * xm * q - torch.abs(tol1 * q), torch.abs(e * q)
        )
        accept = try_interpolation & (2.0 * p < bound)

        e = torch.where(active, torch.where(accept, d, xm), e)
        d = torch.where(active, torch.where(accept, _safe_divide(p, q), xm), d)

        a = torch.where(active, b, a)
        fa = torch.where(active, fb, fa)

        # Never step by less than the tolerance
        step = torch.where(
            torch.abs(d) > tol1,
            d,
            torch.where(xm >= 0, tol1, -tol1),
        )
        b = torch.where(active, b + step, b)

        f_new = f(b)

        if torch.any(torch.isnan(f_new) & active):
            raise RuntimeError("Function returned NaN during iteration")

        fb = torch.where(active, f_new, fb)

    return b.reshape(orig_shape), converged.reshape(orig_shape)
