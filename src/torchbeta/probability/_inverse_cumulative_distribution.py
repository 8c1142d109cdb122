"""Inversion of a cumulative distribution function by root finding."""

from typing import Callable

import torch
from torch import Tensor

from torchbeta.root_finding import (
    BracketError,
    ConvergenceError,
    bracket,
    brent,
)

from ._exceptions import DomainError


def inverse_cumulative_distribution(
    cumulative_distribution: Callable[[Tensor], Tensor],
    p: Tensor,
    *,
    initial: Tensor,
    lower: Tensor,
    upper: Tensor,
    absolute_accuracy: float,
    maxiter: int = 100,
) -> Tensor:
    r"""Solve :math:`F(x) = p` for a continuous, non-decreasing CDF.

    The root of :math:`F(x) - p` is first bracketed by expanding outwards
    from ``initial`` inside ``[lower, upper]``, then refined with Brent's
    method.

    Parameters
    ----------
    cumulative_distribution : Callable[[Tensor], Tensor]
        Vectorized CDF. Takes tensor of shape ``(N,)`` where element ``i``
        belongs to ``p[i]``, returns ``(N,)``.
    p : Tensor
        Probabilities in [0, 1], shape ``(N,)``.
    initial : Tensor
        Starting points of the bracket search, shape ``(N,)``.
    lower, upper : Tensor
        Domain bounds of the search, shape ``(N,)``.
    absolute_accuracy : float
        Absolute accuracy of the returned quantiles. Also used as the
        residual tolerance of the solver.
    maxiter : int, default=100
        Iteration limit of the bracket search and of the solver.

    Returns
    -------
    Tensor
        Quantiles, shape ``(N,)``.

    Raises
    ------
    DomainError
        If any ``p`` is outside [0, 1] or NaN. Raised before the solver is
        invoked.
    BracketError
        If some element shows no sign change and neither of its domain
        bounds already satisfies the accuracy. Elements resolved by a
        bound do not affect the rest of the batch.
    ConvergenceError
        If the solver exhausts ``maxiter`` for any element.
    """
    if torch.any(~((p >= 0) & (p <= 1))):
        bad = p[~((p >= 0) & (p <= 1))]
        raise DomainError(
            f"Probability must be in [0, 1], got {bad.tolist()}"
        )

    if p.numel() == 0:
        return p.clone()

    def f(x: Tensor) -> Tensor:
        return cumulative_distribution(x) - p

    a, b = bracket(
        f, initial, lower, upper, maxiter=maxiter, raise_on_failure=False
    )
    found = f(a) * f(b) <= 0

    g = f
    if not torch.all(found):
        # Accept a domain bound that is already accurate enough
        at_lower = torch.abs(f(lower)) < absolute_accuracy
        at_upper = torch.abs(f(upper)) < absolute_accuracy
        unresolved = ~found & ~(at_lower | at_upper)
        if torch.any(unresolved):
            raise BracketError(
                f"Unable to bracket a root: {unresolved.sum().item()} of "
                f"{p.numel()} elements show no sign change in "
                f"[lower, upper] for p = {p[unresolved].tolist()}"
            )

        # Elements resolved by a bound solve x - bound = 0 on [lower, upper]
        fallback = torch.where(at_lower, lower, upper)
        a = torch.where(found, a, lower)
        b = torch.where(found, b, upper)

        def g(x: Tensor) -> Tensor:
            return torch.where(found, f(x), x - fallback)

    root, converged = brent(
        g,
        a,
        b,
        xtol=absolute_accuracy,
        rtol=0.0,
        ftol=absolute_accuracy,
        maxiter=maxiter,
    )

    if not torch.all(converged):
        failed = p[~converged]
        raise ConvergenceError(
            f"Inverse cumulative probability did not converge within "
            f"{maxiter} iterations for p = {failed.tolist()}"
        )

    return root
