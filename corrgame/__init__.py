"""Correlation guessing game: correlated samples, correlation statistics and round checking."""

from importlib import metadata as _metadata

from .models import GuessTriple, Round, Sample, StatisticTriple, Verdict
from .services.game_service import RoundController, check_guess
from .stats import CorrelationEngine, SampleGenerator

try:
    __version__ = _metadata.version("corrgame")
except _metadata.PackageNotFoundError:  # pragma: no cover - during local usage
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "CorrelationEngine",
    "GuessTriple",
    "Round",
    "RoundController",
    "Sample",
    "SampleGenerator",
    "StatisticTriple",
    "Verdict",
    "check_guess",
]
