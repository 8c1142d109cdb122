"""Beta distribution model."""

from __future__ import annotations

from typing import Optional, Union

import torch
from torch import Tensor

from torchbeta.special_functions import incomplete_beta, log_beta
from torchbeta.special_functions._promote import promote_inputs

from .._exceptions import DomainError, ParameterError, UnboundedDensityError
from .._inverse_cumulative_distribution import inverse_cumulative_distribution

DEFAULT_INVERSE_ABSOLUTE_ACCURACY = 1e-9

TensorLike = Union[Tensor, float]


def _describe(values: Tensor) -> str:
    if values.numel() == 1:
        return f"{values.reshape(()).item():g}"
    return str(values.tolist())


def _cumulative(x: Tensor, a: Tensor, b: Tensor) -> Tensor:
    return torch.where(
        x <= 0,
        torch.zeros_like(x),
        torch.where(x >= 1, torch.ones_like(x), incomplete_beta(x, a, b)),
    )


class BetaDistribution:
    r"""Beta distribution on [0, 1] with shape parameters alpha and beta.

    .. math::
        f(x; \alpha, \beta) = \frac{x^{\alpha-1} (1-x)^{\beta-1}}{B(\alpha, \beta)}

    The model is immutable. The log-normalization :math:`\log B(\alpha,
    \beta)` is computed once, in the constructor, and reused by every
    density evaluation. Use :meth:`replace` to derive a model with other
    parameters.

    Parameters
    ----------
    alpha : Tensor or float
        First shape parameter. Must be positive and finite.
    beta : Tensor or float
        Second shape parameter. Must be positive and finite. Broadcasts
        with ``alpha``, so one model can hold a batch of distributions.
    inverse_absolute_accuracy : float, default=1e-9
        Absolute accuracy of :meth:`quantile`.

    Raises
    ------
    ParameterError
        If any shape parameter is not positive and finite, or if
        ``inverse_absolute_accuracy`` is not positive.

    Examples
    --------
    >>> import torch
    >>> from torchbeta.probability import BetaDistribution
    >>> dist = BetaDistribution(2.0, 3.0)
    >>> dist.mean
    tensor(0.4000, dtype=torch.float64)
    >>> dist.cumulative_distribution(torch.tensor([0.25, 0.5]))
    tensor([0.2617, 0.6875], dtype=torch.float64)
    >>> dist.quantile(0.6875)
    tensor(0.5000, dtype=torch.float64)
    """

    def __init__(
        self,
        alpha: TensorLike,
        beta: TensorLike,
        inverse_absolute_accuracy: float = DEFAULT_INVERSE_ABSOLUTE_ACCURACY,
    ):
        alpha, beta = promote_inputs(alpha, beta)

        for name, value in (("alpha", alpha), ("beta", beta)):
            invalid = ~((value > 0) & torch.isfinite(value))
            if torch.any(invalid):
                raise ParameterError(
                    f"{name} must be positive and finite, "
                    f"got {_describe(value[invalid])}"
                )

        if not inverse_absolute_accuracy > 0:
            raise ParameterError(
                f"inverse_absolute_accuracy must be positive, "
                f"got {inverse_absolute_accuracy}"
            )

        self._alpha = alpha
        self._beta = beta
        self._inverse_absolute_accuracy = float(inverse_absolute_accuracy)
        self._log_normalization = log_beta(alpha, beta)

    def __repr__(self) -> str:
        return (
            f"BetaDistribution(alpha={_describe(self._alpha)}, "
            f"beta={_describe(self._beta)})"
        )

    @property
    def alpha(self) -> Tensor:
        """First shape parameter."""
        return self._alpha

    @property
    def beta(self) -> Tensor:
        """Second shape parameter."""
        return self._beta

    @property
    def inverse_absolute_accuracy(self) -> float:
        """Absolute accuracy of :meth:`quantile`."""
        return self._inverse_absolute_accuracy

    @property
    def log_normalization(self) -> Tensor:
        r"""Log of the beta function, :math:`\log B(\alpha, \beta)`."""
        return self._log_normalization

    @property
    def support_lower_bound(self) -> float:
        """Lower bound of the support, always 0."""
        return 0.0

    @property
    def support_upper_bound(self) -> float:
        """Upper bound of the support, always 1."""
        return 1.0

    @property
    def mean(self) -> Tensor:
        r""":math:`\alpha / (\alpha + \beta)`."""
        return self._alpha / (self._alpha + self._beta)

    @property
    def variance(self) -> Tensor:
        r""":math:`\alpha \beta / ((\alpha + \beta)^2 (\alpha + \beta + 1))`."""
        total = self._alpha + self._beta
        return (self._alpha * self._beta) / ((total * total) * (total + 1))

    def replace(
        self,
        *,
        alpha: Optional[TensorLike] = None,
        beta: Optional[TensorLike] = None,
        inverse_absolute_accuracy: Optional[float] = None,
    ) -> BetaDistribution:
        """Return a new model with some parameters replaced.

        Parameters left as ``None`` are taken from this model, which is not
        modified.

        Examples
        --------
        >>> dist = BetaDistribution(2.0, 3.0)
        >>> dist.replace(beta=5.0)
        BetaDistribution(alpha=2, beta=5)
        """
        return BetaDistribution(
            self._alpha if alpha is None else alpha,
            self._beta if beta is None else beta,
            (
                self._inverse_absolute_accuracy
                if inverse_absolute_accuracy is None
                else inverse_absolute_accuracy
            ),
        )

    def log_probability_density(self, x: TensorLike) -> Tensor:
        r"""Log probability density, computed directly in log-space.

        .. math::
            \log f(x) = (\alpha - 1) \log x + (\beta - 1) \log(1 - x)
                - \log B(\alpha, \beta)

        with :math:`\log(1 - x)` evaluated by ``log1p``. Outside (0, 1),
        and at a boundary where the density is bounded, the result is
        ``-inf``.

        Parameters
        ----------
        x : Tensor or float
            Points at which to evaluate. Broadcasts with the parameters.

        Returns
        -------
        Tensor
            Log density values.

        Raises
        ------
        UnboundedDensityError
            If any ``x == 0`` with ``alpha < 1``, or ``x == 1`` with
            ``beta < 1``.
        """
        x, alpha, beta, log_normalization = promote_inputs(
            x, self._alpha, self._beta, self._log_normalization
        )

        at_zero = (x == 0) & (alpha < 1)
        if torch.any(at_zero):
            raise UnboundedDensityError(
                f"Cannot compute beta density at 0 when "
                f"alpha = {_describe(alpha[at_zero])} (alpha < 1)"
            )
        at_one = (x == 1) & (beta < 1)
        if torch.any(at_one):
            raise UnboundedDensityError(
                f"Cannot compute beta density at 1 when "
                f"beta = {_describe(beta[at_one])} (beta < 1)"
            )

        interior = (x > 0) & (x < 1)
        x_safe = torch.where(interior, x, torch.full_like(x, 0.5))

        value = (
            (alpha - 1) * torch.log(x_safe)
            + (beta - 1) * torch.log1p(-x_safe)
            - log_normalization
        )
        value = torch.where(
            interior, value, torch.full_like(value, float("-inf"))
        )
        return torch.where(torch.isnan(x), x, value)

    def probability_density(self, x: TensorLike) -> Tensor:
        """Probability density.

        Zero outside [0, 1], and zero at ``x == 0`` (``alpha >= 1``) and
        ``x == 1`` (``beta >= 1``).

        Raises
        ------
        UnboundedDensityError
            If any ``x == 0`` with ``alpha < 1``, or ``x == 1`` with
            ``beta < 1``. The density is infinite there.
        """
        return torch.exp(self.log_probability_density(x))

    def cumulative_distribution(self, x: TensorLike) -> Tensor:
        """Cumulative distribution function, ``P(X <= x)``.

        Exactly 0 for ``x <= 0`` and exactly 1 for ``x >= 1``; the
        regularized incomplete beta function in between.
        """
        x, alpha, beta = promote_inputs(x, self._alpha, self._beta)
        return _cumulative(x, alpha, beta)

    def interval_probability(self, x0: TensorLike, x1: TensorLike) -> Tensor:
        """Probability mass in ``(x0, x1]``.

        Computed as ``cumulative_distribution(x1) -
        cumulative_distribution(x0)``. There is no check that
        ``x0 <= x1``: for ``x0 > x1`` the result is the negated mass of
        ``(x1, x0]``.
        """
        return self.cumulative_distribution(
            x1
        ) - self.cumulative_distribution(x0)

    def survival(self, x: TensorLike) -> Tensor:
        r"""Survival function, ``P(X > x) = 1 - F(x)``.

        Evaluated as :math:`I_{1-x}(\beta, \alpha)`, which keeps its
        relative precision where the CDF is close to 1.
        """
        x, alpha, beta = promote_inputs(x, self._alpha, self._beta)
        return torch.where(
            x <= 0,
            torch.ones_like(x),
            torch.where(
                x >= 1,
                torch.zeros_like(x),
                incomplete_beta(1 - x, beta, alpha),
            ),
        )

    def quantile(self, p: TensorLike) -> Tensor:
        """Inverse cumulative distribution function.

        Returns exactly 0 for ``p == 0`` and exactly 1 for ``p == 1``.
        Other probabilities are inverted numerically, starting the bracket
        search at ``p`` inside the support [0, 1].

        Parameters
        ----------
        p : Tensor or float
            Probabilities in [0, 1]. Broadcasts with the parameters.

        Returns
        -------
        Tensor
            Quantiles, within ``inverse_absolute_accuracy`` of the exact
            values.

        Raises
        ------
        DomainError
            If any ``p`` is outside [0, 1] or NaN.
        ConvergenceError
            If the solver does not converge for some element.
        """
        p, alpha, beta = promote_inputs(p, self._alpha, self._beta)

        in_range = (p >= 0) & (p <= 1)
        if not torch.all(in_range):
            raise DomainError(
                f"Probability must be in [0, 1], "
                f"got {_describe(p[~in_range])}"
            )

        shape = p.shape
        p = p.flatten()
        alpha = alpha.flatten()
        beta = beta.flatten()

        # p == 0 and p == 1 map to themselves
        result = p.clone()

        interior = (p > 0) & (p < 1)
        if torch.any(interior):
            p_in = p[interior]
            a_in = alpha[interior]
            b_in = beta[interior]

            result[interior] = inverse_cumulative_distribution(
                lambda x: _cumulative(x, a_in, b_in),
                p_in,
                initial=p_in,
                lower=torch.zeros_like(p_in),
                upper=torch.ones_like(p_in),
                absolute_accuracy=self._inverse_absolute_accuracy,
            )

        return result.reshape(shape)
