from .game import (
    GuessTriple,
    Round,
    Sample,
    StatisticTriple,
    StatisticVerdict,
    Verdict,
)

__all__ = [
    "GuessTriple",
    "Round",
    "Sample",
    "StatisticTriple",
    "StatisticVerdict",
    "Verdict",
]
