from unittest import mock

import pytest
import torch

from torchbeta.probability import (
    DomainError,
    inverse_cumulative_distribution,
)
from torchbeta.root_finding import BracketError, ConvergenceError


def _uniform_cdf(x):
    return torch.clamp(x, 0.0, 1.0)


def _logistic_cdf(x):
    return torch.sigmoid(x)


class TestInverseCumulativeDistribution:
    """Tests for the generic CDF inversion procedure."""

    def test_uniform(self):
        """Inverting the uniform CDF returns p."""
        p = torch.tensor([0.1, 0.5, 0.9], dtype=torch.float64)
        result = inverse_cumulative_distribution(
            _uniform_cdf,
            p,
            initial=p,
            lower=torch.zeros_like(p),
            upper=torch.ones_like(p),
            absolute_accuracy=1e-12,
        )
        torch.testing.assert_close(result, p, rtol=0, atol=1e-12)

    def test_unbounded_domain(self):
        """Works for any continuous CDF, here the logistic on [-50, 50]."""
        p = torch.tensor([0.05, 0.5, 0.95], dtype=torch.float64)
        result = inverse_cumulative_distribution(
            _logistic_cdf,
            p,
            initial=torch.zeros_like(p),
            lower=torch.full_like(p, -50.0),
            upper=torch.full_like(p, 50.0),
            absolute_accuracy=1e-12,
        )
        torch.testing.assert_close(
            result, torch.logit(p), rtol=0, atol=1e-9
        )

    @pytest.mark.parametrize("bad", [-0.1, 1.5, float("nan")])
    def test_out_of_range_raises_before_solving(self, bad):
        """p outside [0, 1] is rejected before any CDF evaluation."""
        cdf = mock.Mock(side_effect=_uniform_cdf)
        p = torch.tensor([0.5, bad], dtype=torch.float64)

        with pytest.raises(DomainError, match=r"\[0, 1\]"):
            inverse_cumulative_distribution(
                cdf,
                p,
                initial=torch.full_like(p, 0.5),
                lower=torch.zeros_like(p),
                upper=torch.ones_like(p),
                absolute_accuracy=1e-9,
            )

        cdf.assert_not_called()

    def test_non_convergence_raises(self):
        """A solver that runs out of iterations is an error."""
        p = torch.tensor([0.3], dtype=torch.float64)
        not_converged = (p.clone(), torch.zeros(1, dtype=torch.bool))

        with mock.patch(
            "torchbeta.probability._inverse_cumulative_distribution.brent",
            return_value=not_converged,
        ):
            with pytest.raises(ConvergenceError, match="did not converge"):
                inverse_cumulative_distribution(
                    _uniform_cdf,
                    p,
                    initial=p,
                    lower=torch.zeros_like(p),
                    upper=torch.ones_like(p),
                    absolute_accuracy=1e-9,
                )

    def test_bracket_failure_falls_back_to_accurate_bound(self):
        """A domain bound within accuracy is accepted when bracketing fails."""
        # CDF that never reaches p = 1 - 1e-12 inside the domain
        cdf = lambda x: torch.clamp(x, 0.0, 1.0) * (1 - 1e-11)
        p = torch.tensor([1 - 1e-12], dtype=torch.float64)

        result = inverse_cumulative_distribution(
            cdf,
            p,
            initial=torch.tensor([0.5], dtype=torch.float64),
            lower=torch.zeros_like(p),
            upper=torch.ones_like(p),
            absolute_accuracy=1e-9,
        )

        assert result.tolist() == [1.0]

    def test_bound_fallback_in_mixed_batch(self):
        """A bound accepted for one element leaves the others to the solver."""
        cdf = lambda x: torch.clamp(x, 0.0, 1.0) * (1 - 1e-11)
        p = torch.tensor([0.5, 1 - 1e-12], dtype=torch.float64)

        result = inverse_cumulative_distribution(
            cdf,
            p,
            initial=p,
            lower=torch.zeros_like(p),
            upper=torch.ones_like(p),
            absolute_accuracy=1e-9,
        )

        assert result[1].item() == 1.0
        assert abs(result[0].item() - 0.5) < 1e-8

    def test_bracket_failure_in_mixed_batch_names_element(self):
        """Only the element without an accurate bound is reported."""
        cdf = lambda x: torch.clamp(x, 0.0, 1.0) * 0.5
        p = torch.tensor([0.25, 0.9], dtype=torch.float64)

        with pytest.raises(BracketError, match=r"1 of 2.*0\.9"):
            inverse_cumulative_distribution(
                cdf,
                p,
                initial=p,
                lower=torch.zeros_like(p),
                upper=torch.ones_like(p),
                absolute_accuracy=1e-9,
            )

    def test_bracket_failure_propagates(self):
        """Without an accurate bound the BracketError is surfaced."""
        cdf = lambda x: torch.clamp(x, 0.0, 1.0) * 0.5
        p = torch.tensor([0.9], dtype=torch.float64)

        with pytest.raises(BracketError):
            inverse_cumulative_distribution(
                cdf,
                p,
                initial=torch.tensor([0.5], dtype=torch.float64),
                lower=torch.zeros_like(p),
                upper=torch.ones_like(p),
                absolute_accuracy=1e-9,
            )

    def test_empty(self):
        """Empty input returns empty output."""
        p = torch.empty(0, dtype=torch.float64)
        result = inverse_cumulative_distribution(
            _uniform_cdf,
            p,
            initial=p,
            lower=p,
            upper=p,
            absolute_accuracy=1e-9,
        )
        assert result.shape == (0,)
