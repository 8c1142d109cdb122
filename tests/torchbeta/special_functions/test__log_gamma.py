import math

import pytest
import scipy.special
import torch

from torchbeta.special_functions import log_beta, log_gamma


class TestLogGamma:
    """Tests for log_gamma."""

    def test_integers(self):
        """log Gamma(n) = log((n-1)!)."""
        z = torch.tensor([1.0, 2.0, 3.0, 5.0, 10.0], dtype=torch.float64)
        expected = torch.tensor(
            [math.lgamma(v) for v in z.tolist()], dtype=torch.float64
        )
        torch.testing.assert_close(log_gamma(z), expected)

    def test_half_integer(self):
        """Gamma(1/2) = sqrt(pi)."""
        result = log_gamma(0.5)
        assert result.dtype == torch.float64
        assert result.item() == pytest.approx(0.5 * math.log(math.pi))

    def test_large_argument_finite(self):
        """Stays finite where Gamma itself overflows."""
        result = log_gamma(torch.tensor([200.0, 1e5], dtype=torch.float64))
        assert torch.isfinite(result).all()

    def test_preserves_float32(self):
        """Tensor inputs keep their dtype."""
        assert log_gamma(torch.tensor([2.5])).dtype == torch.float32


class TestLogBeta:
    """Tests for log_beta."""

    def test_known_value(self):
        """B(2, 3) = 1/12."""
        assert log_beta(2.0, 3.0).item() == pytest.approx(math.log(1 / 12))

    def test_symmetric(self):
        """B(a, b) = B(b, a)."""
        a = torch.tensor([0.1, 0.5, 2.0, 30.0], dtype=torch.float64)
        b = torch.tensor([3.0, 0.2, 7.0, 0.9], dtype=torch.float64)
        torch.testing.assert_close(log_beta(a, b), log_beta(b, a))

    @pytest.mark.parametrize(
        "a,b", [(0.1, 0.1), (0.5, 0.5), (1, 1), (2, 5), (100, 300)]
    )
    def test_scipy_comparison(self, a, b):
        """Compare against scipy.special.betaln."""
        expected = scipy.special.betaln(a, b)
        assert log_beta(float(a), float(b)).item() == pytest.approx(
            expected, rel=1e-12, abs=1e-12
        )

    def test_broadcasting(self):
        """Parameters broadcast together."""
        a = torch.tensor([[1.0], [2.0]], dtype=torch.float64)
        b = torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64)
        assert log_beta(a, b).shape == (2, 3)
