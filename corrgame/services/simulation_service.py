"""
Repeated-round simulation.

Generates many samples for one configuration and tabulates how the realized
statistics spread around the target. Useful for choosing a tolerance that is
fair for a given sample size.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from corrgame.config import Settings, settings as default_settings
from corrgame.logging import get_logger
from corrgame.models.game import STATISTIC_NAMES
from corrgame.services.game_service import RoundController

logger = get_logger(__name__)


def simulate_rounds(
    sample_size: Any,
    target_r: Any,
    repetitions: int,
    seed: Optional[int] = None,
    jitter: bool = False,
    settings: Optional[Settings] = None,
) -> pd.DataFrame:
    """
    One row per generated round with columns rho, pearson, spearman, kendall.
    With jitter=False every round is generated at exactly the clamped target.
    """
    if repetitions < 1:
        raise ValueError("repetitions must be at least 1")

    controller = RoundController(
        settings=settings or default_settings,
        rng=np.random.default_rng(seed),
        jitter=jitter,
    )
    n = controller.clamp_sample_size(sample_size)
    target = controller.clamp_target(target_r)

    rows = []
    for _ in range(repetitions):
        rnd = controller.new_round(n, target)
        rows.append({"rho": rnd.rho, **rnd.statistics.as_dict()})

    frame = pd.DataFrame(rows, columns=["rho", *STATISTIC_NAMES])
    frame.attrs.update({"sample_size": n, "target_r": target, "jitter": jitter})
    logger.info("simulation_finished", n=n, target_r=target, repetitions=repetitions)
    return frame


def summarize(frame: pd.DataFrame) -> Dict[str, Any]:
    """Per-statistic mean/std/min/max, JSON-serializable."""
    described = frame[list(STATISTIC_NAMES)].describe()
    out: Dict[str, Any] = {
        "repetitions": int(len(frame)),
        "sample_size": frame.attrs.get("sample_size"),
        "target_r": frame.attrs.get("target_r"),
        "jitter": frame.attrs.get("jitter"),
    }
    for name in STATISTIC_NAMES:
        col = described[name]
        out[name] = {
            "mean": float(col["mean"]),
            "std": float(col["std"]) if len(frame) > 1 else 0.0,
            "min": float(col["min"]),
            "max": float(col["max"]),
        }
    return out
