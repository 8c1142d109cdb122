"""Outward search for a sign-changing bracket."""

from typing import Callable

import torch
from torch import Tensor

from ._exceptions import BracketError


def bracket(
    f: Callable[[Tensor], Tensor],
    initial: Tensor,
    lower: Tensor,
    upper: Tensor,
    *,
    step: float = 1.0,
    maxiter: int = 100,
    raise_on_failure: bool = True,
) -> tuple[Tensor, Tensor]:
    """
    Find intervals ``[a, b]`` on which ``f`` changes sign.

    Starting from ``a = b = initial``, each iteration moves ``a`` down and
    ``b`` up by ``step``, clipped to ``[lower, upper]``, until
    ``f(a) * f(b) <= 0``, the whole domain is covered, or ``maxiter``
    iterations have been spent.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Vectorized function. Takes tensor of shape ``(N,)``, returns ``(N,)``.
    initial : Tensor
        Starting points. Must lie in ``[lower, upper]``.
    lower, upper : Tensor
        Domain bounds. Broadcast with ``initial``.
    step : float, default=1.0
        Amount by which each end of the interval moves per iteration.
    maxiter : int, default=100
        Maximum number of expansions.
    raise_on_failure : bool, default=True
        If False, elements without a sign change are returned with the
        widest interval reached instead of raising. Callers detect them
        with ``f(a) * f(b) > 0``.

    Returns
    -------
    tuple[Tensor, Tensor]
        - **a** -- Lower ends of the brackets, broadcast shape of the inputs.
        - **b** -- Upper ends of the brackets.

    Raises
    ------
    ValueError
        If ``step`` is not positive, or ``initial`` lies outside
        ``[lower, upper]``.
    BracketError
        If some element has no sign change after the search and
        ``raise_on_failure`` is True.

    Examples
    --------
    >>> import torch
    >>> from torchbeta.root_finding import bracket
    >>> f = lambda x: x - 0.3
    >>> a, b = bracket(
    ...     f, torch.tensor([0.5]), torch.tensor([0.0]), torch.tensor([1.0])
    ... )
    >>> a, b
    (tensor([0.]), tensor([1.]))

    Notes
    -----
    ``f`` is always called on the full batch, so it may close over
    per-element data (for example a target probability per element).
    Elements that already bracket a root keep their interval.

    See Also
    --------
    brent : Refines a bracket found by this function.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    initial, lower, upper = torch.broadcast_tensors(initial, lower, upper)
    orig_shape = initial.shape

    if torch.any(initial < lower) or torch.any(initial > upper):
        raise ValueError("initial must lie within [lower, upper]")

    a = initial.flatten().clone()
    b = initial.flatten().clone()
    lower = lower.flatten()
    upper = upper.flatten()

    found = torch.zeros(a.shape, dtype=torch.bool, device=a.device)

    for _ in range(maxiter):
        active = ~found
        a = torch.where(active, torch.maximum(a - step, lower), a)
        b = torch.where(active, torch.minimum(b + step, upper), b)

        fa = f(a)
        fb = f(b)

        found = fa * fb <= 0
        exhausted = (a <= lower) & (b >= upper)

        if torch.all(found | exhausted):
            break

    if raise_on_failure and not torch.all(found):
        missing = (~found).sum().item()
        raise BracketError(
            f"Unable to bracket a root: {missing} of {found.numel()} "
            f"elements show no sign change in [lower, upper]."
        )

    return a.reshape(orig_shape), b.reshape(orig_shape)
