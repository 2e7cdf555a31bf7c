"""
Round controller: clamps player configuration, starts rounds and checks guesses.

Rounds are explicit immutable values. The caller holds the current Round and
passes it back into submit_guess; starting a new round simply replaces it.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from corrgame.config import Settings, settings as default_settings
from corrgame.errors import DegenerateSampleError
from corrgame.logging import get_logger
from corrgame.models.game import (
    STATISTIC_NAMES,
    GuessTriple,
    Round,
    StatisticTriple,
    StatisticVerdict,
    Verdict,
    coerce_number,
)
from corrgame.stats.correlation import CorrelationEngine
from corrgame.stats.sampling import SampleGenerator

logger = get_logger(__name__)

INCOMPLETE_MESSAGE = "Please fill all three guesses with numeric values."
WIN_MESSAGE = "You win! All estimates are within tolerance."
RETRY_MESSAGE = "Not yet. Try another estimate or generate a new plot."


def check_guess(actual: StatisticTriple, guess: GuessTriple, tolerance: float) -> Verdict:
    """
    Compare a complete guess against the ground truth.
    Each statistic passes when |guess - actual| <= tolerance; the round is won
    only when all three pass.
    """
    if not guess.is_complete():
        return Verdict(status="incomplete", tolerance=tolerance, message=INCOMPLETE_MESSAGE)

    results = []
    for name in STATISTIC_NAMES:
        g = getattr(guess, name)
        a = getattr(actual, name)
        diff = abs(g - a)
        results.append(StatisticVerdict(name=name, guess=g, actual=a, diff=diff, passed=diff <= tolerance))

    overall = all(r.passed for r in results)
    return Verdict(
        status="checked",
        tolerance=tolerance,
        actual=actual,
        results=results,
        overall_pass=overall,
        message=WIN_MESSAGE if overall else RETRY_MESSAGE,
    )


class RoundController:
    """Consumer contract for front ends: new_round() then submit_guess()."""

    def __init__(
        self,
        generator: Optional[SampleGenerator] = None,
        settings: Optional[Settings] = None,
        rng: Optional[np.random.Generator] = None,
        jitter: bool = True,
    ):
        self.settings = settings or default_settings
        self.jitter_enabled = jitter
        # Jitter and sample draws share one seeded stream unless a generator is injected
        self.rng = rng if rng is not None else np.random.default_rng(self.settings.seed)
        self.generator = generator or SampleGenerator(
            rng=self.rng, rho_limit=self.settings.generation_rho_limit
        )

    # ------------------------------------------------------------------
    # Input clamping: out-of-range configuration is corrected, never rejected
    # ------------------------------------------------------------------

    def clamp_sample_size(self, value: Any = None) -> int:
        number = coerce_number(value)
        if number is None:
            number = self.settings.default_sample_size
        n = int(number)
        clamped = max(self.settings.min_sample_size, min(self.settings.max_sample_size, n))
        if clamped != n:
            logger.debug("sample_size_clamped", requested=n, used=clamped)
        return clamped

    def clamp_target(self, value: Any = None) -> float:
        number = coerce_number(value)
        if number is None:
            number = self.settings.default_target_r
        limit = self.settings.target_r_limit
        clamped = max(-limit, min(limit, number))
        if clamped != number:
            logger.debug("target_clamped", requested=number, used=clamped)
        return clamped

    def clamp_tolerance(self, value: Any = None) -> float:
        number = coerce_number(value)
        if number is None:
            return self.settings.default_tolerance
        return abs(number)

    def jitter(self, target: float) -> float:
        """Perturb the target so the realized correlation can't be memorized."""
        rho = target
        if self.jitter_enabled:
            spread = self.settings.target_jitter
            rho += float(self.rng.uniform(-spread, spread))
        limit = self.settings.generation_rho_limit
        return max(-limit, min(limit, rho))

    # ------------------------------------------------------------------
    # Round lifecycle
    # ------------------------------------------------------------------

    def new_round(self, sample_size: Any = None, target_r: Any = None) -> Round:
        n = self.clamp_sample_size(sample_size)
        target = self.clamp_target(target_r)
        rho = self.jitter(target)

        max_attempts = max(1, self.settings.max_generation_attempts)
        for attempt in range(1, max_attempts + 1):
            sample = self.generator.generate(n, rho)
            statistics = CorrelationEngine.compute(sample.x, sample.y)
            if statistics.is_finite():
                logger.info("round_generated", n=n, target_r=target, rho=rho, attempts=attempt)
                return Round(
                    sample=sample,
                    statistics=statistics,
                    sample_size=n,
                    target_r=target,
                    rho=rho,
                    attempts=attempt,
                )
            logger.warning("degenerate_sample", n=n, rho=rho, attempt=attempt)

        raise DegenerateSampleError(max_attempts)

    def submit_guess(self, round_: Round, guess: GuessTriple, tolerance: Any = None) -> Verdict:
        tol = self.clamp_tolerance(tolerance)
        verdict = check_guess(round_.statistics, guess, tol)
        if verdict.status == "incomplete":
            logger.info("guess_incomplete", round_id=round_.round_id)
            return verdict

        logger.info(
            "guess_checked",
            round_id=round_.round_id,
            tolerance=tol,
            overall_pass=verdict.overall_pass,
        )
        return verdict
