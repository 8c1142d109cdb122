import pytest

from torchbeta.probability import (
    DomainError,
    ParameterError,
    ProbabilityError,
    UnboundedDensityError,
)
from torchbeta.root_finding import RootFindingError


class TestExceptions:
    """Tests for the probability exception taxonomy."""

    def test_probability_error_is_value_error(self):
        """ProbabilityError is a ValueError."""
        assert issubclass(ProbabilityError, ValueError)

    @pytest.mark.parametrize(
        "error", [ParameterError, DomainError, UnboundedDensityError]
    )
    def test_inherits_from_probability_error(self, error):
        """Every kind is a ProbabilityError."""
        assert issubclass(error, ProbabilityError)

    def test_kinds_are_distinct(self):
        """Callers can tell invalid input from an unbounded density."""
        assert not issubclass(UnboundedDensityError, DomainError)
        assert not issubclass(DomainError, UnboundedDensityError)
        assert not issubclass(ParameterError, DomainError)

    def test_solver_failures_are_separate(self):
        """Numerical failures do not masquerade as bad input."""
        assert not issubclass(RootFindingError, ProbabilityError)
