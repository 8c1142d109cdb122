import hypothesis.strategies

from ._probabilities import probabilities


@hypothesis.strategies.composite
def unit_interval_pairs(draw) -> tuple[float, float]:
    """Strategy for ordered pairs ``x1 <= x2`` in [0, 1]."""
    x1 = draw(probabilities())
    x2 = draw(probabilities())
    return (x1, x2) if x1 <= x2 else (x2, x1)
