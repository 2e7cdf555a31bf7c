"""Sample Generator - bivariate normal samples with a prescribed correlation."""

from typing import Any, Optional
import numpy as np

from corrgame.config import settings
from corrgame.models.game import Sample


class SampleGenerator:
    """
    Draws (x, y) with population correlation rho:

        x = z1,  y = rho * z1 + sqrt(1 - rho^2) * z2

    where z1, z2 are independent standard normals. The sample correlation
    scatters around rho; that spread is what makes rounds non-memorizable.

    `rng` only needs a `random(size)` method returning uniform [0, 1) floats,
    so tests can inject a scripted source.
    """

    def __init__(self, rng: Optional[Any] = None, seed: Optional[int] = None,
                 rho_limit: Optional[float] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.rho_limit = abs(rho_limit) if rho_limit is not None else settings.generation_rho_limit

    def _uniform_nonzero(self, size: int) -> np.ndarray:
        """Uniform draws on (0, 1); exact zeros are re-drawn so log(u) stays finite."""
        u = np.asarray(self.rng.random(size), dtype=float)
        zeros = u == 0
        while np.any(zeros):
            u[zeros] = self.rng.random(int(np.count_nonzero(zeros)))
            zeros = u == 0
        return u

    def standard_normal(self, size: int) -> np.ndarray:
        """Box-Muller (trigonometric form) from two independent uniform arrays."""
        u = self._uniform_nonzero(size)
        v = self._uniform_nonzero(size)
        return np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)

    def clamp_rho(self, rho: float) -> float:
        return float(np.clip(rho, -self.rho_limit, self.rho_limit))

    def generate(self, n: int, rho: float) -> Sample:
        rho = self.clamp_rho(rho)
        x = self.standard_normal(n)
        noise = self.standard_normal(n)
        y = rho * x + np.sqrt(1.0 - rho * rho) * noise
        return Sample(x=x.tolist(), y=y.tolist())
