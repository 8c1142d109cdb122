from ._bracket import bracket
from ._brent import brent
from ._convergence import bracket_converged, default_tolerances
from ._exceptions import BracketError, ConvergenceError, RootFindingError

__all__ = [
    "bracket",
    "bracket_converged",
    "brent",
    "default_tolerances",
    "BracketError",
    "ConvergenceError",
    "RootFindingError",
]
