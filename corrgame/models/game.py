from __future__ import annotations

import math
import uuid
from typing import Any, Dict, List, Literal, Optional, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

STATISTIC_NAMES: Tuple[str, str, str] = ("pearson", "spearman", "kendall")


class Sample(BaseModel):
    """Paired observations: (x[i], y[i]) is one point of the scatter plot."""

    model_config = ConfigDict(frozen=True)

    x: Tuple[float, ...]
    y: Tuple[float, ...]

    @model_validator(mode="after")
    def _check_paired(self) -> "Sample":
        if len(self.x) != len(self.y):
            raise ValueError(f"x and y must have equal length (got {len(self.x)} and {len(self.y)})")
        if len(self.x) < 2:
            raise ValueError("A sample needs at least 2 observations")
        return self

    @property
    def n(self) -> int:
        return len(self.x)

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        return np.asarray(self.x, dtype=float), np.asarray(self.y, dtype=float)

    def points(self) -> List[Dict[str, float]]:
        """Scatter points in the {x, y} shape chart front ends expect."""
        return [{"x": xi, "y": yi} for xi, yi in zip(self.x, self.y)]


class StatisticTriple(BaseModel):
    model_config = ConfigDict(frozen=True)

    pearson: float
    spearman: float
    kendall: float

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.pearson, self.spearman, self.kendall))

    def as_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in STATISTIC_NAMES}


def coerce_number(value: Any) -> Optional[float]:
    """Best-effort number parsing for raw form input; anything unusable becomes None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class GuessTriple(BaseModel):
    """
    The player's three estimates. Fields are untrusted: raw strings are accepted
    and anything non-numeric is stored as None rather than rejected.
    """

    model_config = ConfigDict(frozen=True)

    pearson: Optional[float] = None
    spearman: Optional[float] = None
    kendall: Optional[float] = None

    @field_validator("pearson", "spearman", "kendall", mode="before")
    @classmethod
    def _parse(cls, value: Any) -> Optional[float]:
        return coerce_number(value)

    def is_complete(self) -> bool:
        return all(getattr(self, name) is not None for name in STATISTIC_NAMES)


class Round(BaseModel):
    """One round: the plotted sample plus its hidden ground-truth statistics."""

    model_config = ConfigDict(frozen=True)

    round_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    sample: Sample
    statistics: StatisticTriple
    sample_size: int
    target_r: float  # clamped player target, before jitter
    rho: float  # jittered value actually used for generation
    attempts: int = 1


class StatisticVerdict(BaseModel):
    name: Literal["pearson", "spearman", "kendall"]
    guess: float
    actual: float
    diff: float
    passed: bool


class Verdict(BaseModel):
    status: Literal["checked", "incomplete"]
    tolerance: float
    actual: Optional[StatisticTriple] = None
    results: List[StatisticVerdict] = Field(default_factory=list)
    overall_pass: bool = False
    message: str

    def result(self, name: str) -> StatisticVerdict:
        for r in self.results:
            if r.name == name:
                return r
        raise KeyError(name)
