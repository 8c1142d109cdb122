"""Testing helpers for torchbeta.

Example usage:

    import hypothesis

    from torchbeta.probability import BetaDistribution
    from torchbeta.testing.strategies import (
        probabilities,
        shape_parameters,
    )

    @hypothesis.given(
        alpha=shape_parameters(),
        beta=shape_parameters(),
        p=probabilities(exclude_endpoints=True),
    )
    def test_quantile_within_accuracy(alpha, beta, p):
        q = BetaDistribution(alpha, beta).quantile(p)
        assert 0.0 <= q.item() <= 1.0
"""
