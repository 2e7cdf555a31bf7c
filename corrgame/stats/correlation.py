"""Correlation Engine - Pearson, Spearman and Kendall for paired samples."""

from typing import Tuple
import numpy as np
from numpy.typing import ArrayLike
from scipy import stats

from corrgame.models.game import StatisticTriple


def _validate_pair(x: ArrayLike, y: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    xa = np.asarray(x, dtype=float).ravel()
    ya = np.asarray(y, dtype=float).ravel()
    if len(xa) != len(ya):
        raise ValueError(f"x and y must have equal length (got {len(xa)} and {len(ya)})")
    if len(xa) < 2:
        raise ValueError("Need at least 2 observations for correlation")
    return xa, ya


def _is_constant(a: np.ndarray) -> bool:
    # Exact comparison on the raw values; deviations from a float mean are not reliable
    return bool(np.all(a == a[0]))


class CorrelationEngine:
    """
    Statistics covered:
    1. Pearson's r (n-1 divisor, two-pass)
    2. Mid-rank transform
    3. Spearman's rho (Pearson on mid-ranks)
    4. Kendall's tau-a (ties excluded from the numerator, full pair count as denominator)

    Zero variance in either input yields nan for every statistic.
    """

    @staticmethod
    def pearson(x: ArrayLike, y: ArrayLike) -> float:
        """Covariance over the product of sample standard deviations."""
        xa, ya = _validate_pair(x, y)
        if _is_constant(xa) or _is_constant(ya):
            return float("nan")
        n = len(xa)

        # Means first, then deviations
        dx = xa - xa.mean()
        dy = ya - ya.mean()

        sx = np.sqrt(np.sum(dx * dx) / (n - 1))
        sy = np.sqrt(np.sum(dy * dy) / (n - 1))
        cov = np.sum(dx * dy) / (n - 1)
        return float(cov / (sx * sy))

    @staticmethod
    def rank(values: ArrayLike) -> np.ndarray:
        """1-based ranks; exact ties all get the average of the ranks they span."""
        return stats.rankdata(np.asarray(values, dtype=float).ravel(), method="average")

    @staticmethod
    def spearman(x: ArrayLike, y: ArrayLike) -> float:
        xa, ya = _validate_pair(x, y)
        return CorrelationEngine.pearson(CorrelationEngine.rank(xa), CorrelationEngine.rank(ya))

    @staticmethod
    def concordance(x: ArrayLike, y: ArrayLike) -> Tuple[int, int, int]:
        """
        Count (concordant, discordant, tied) over all unordered pairs.

        A pair is tied when its x- or y-difference is exactly zero.
        """
        xa, ya = _validate_pair(x, y)
        n = len(xa)
        # Sign of dx*dy for every pair i<j; the full matrix is fine for n <= ~1000.
        iu = np.triu_indices(n, k=1)
        dx = (xa[:, None] - xa[None, :])[iu]
        dy = (ya[:, None] - ya[None, :])[iu]
        signs = np.sign(dx) * np.sign(dy)
        concordant = int(np.count_nonzero(signs > 0))
        discordant = int(np.count_nonzero(signs < 0))
        tied = int(signs.size - concordant - discordant)
        return concordant, discordant, tied

    @staticmethod
    def kendall(x: ArrayLike, y: ArrayLike) -> float:
        """Kendall's tau-a: (concordant - discordant) / (n(n-1)/2)."""
        xa, ya = _validate_pair(x, y)
        if _is_constant(xa) or _is_constant(ya):
            return float("nan")
        n = len(xa)
        concordant, discordant, _ = CorrelationEngine.concordance(xa, ya)
        return (concordant - discordant) / (n * (n - 1) / 2)

    @staticmethod
    def compute(x: ArrayLike, y: ArrayLike) -> StatisticTriple:
        """All three statistics for one sample."""
        xa, ya = _validate_pair(x, y)
        return StatisticTriple(
            pearson=CorrelationEngine.pearson(xa, ya),
            spearman=CorrelationEngine.spearman(xa, ya),
            kendall=CorrelationEngine.kendall(xa, ya),
        )
