"""Text rendering for the terminal front end."""

from __future__ import annotations

import math
from typing import List

import numpy as np

from corrgame.models.game import Round, Sample, Verdict

LABELS = {
    "pearson": "Pearson r",
    "spearman": "Spearman ρ",
    "kendall": "Kendall τ",
}


def fmt(value: float) -> str:
    """Three decimals; NaN/inf print as 'NaN'."""
    if value is None or not math.isfinite(value):
        return "NaN"
    return f"{value:.3f}"


def round_banner(round_: Round) -> str:
    return f"New plot generated (n={round_.sample_size}). Enter your estimates."


def format_verdict(verdict: Verdict) -> str:
    if verdict.status == "incomplete":
        return verdict.message

    actual = verdict.actual
    lines: List[str] = [
        "Actual values: "
        f"{LABELS['pearson']} = {fmt(actual.pearson)}, "
        f"{LABELS['spearman']} = {fmt(actual.spearman)}, "
        f"{LABELS['kendall']} = {fmt(actual.kendall)}."
    ]
    for r in verdict.results:
        name = LABELS[r.name].split()[0]
        lines.append(
            f"  {name} guess: {fmt(r.guess)} (diff {fmt(r.diff)}) - {'OK' if r.passed else 'Wrong'}"
        )
    lines.append(verdict.message)
    return "\n".join(lines)


def render_scatter(sample: Sample, width: int = 60, height: int = 20) -> str:
    """
    Occupancy-grid scatter plot. Cells holding one point print '.', more
    points print 'o' or '@'. Row 0 of the output is the top of the y range.
    """
    x, y = sample.as_arrays()
    counts, _, _ = np.histogram2d(x, y, bins=[width, height])
    # histogram2d indexes [x_bin, y_bin]; flip to rows of y, highest first
    grid = counts.T[::-1]

    rows = []
    for row in grid:
        chars = []
        for c in row:
            if c == 0:
                chars.append(" ")
            elif c == 1:
                chars.append(".")
            elif c <= 3:
                chars.append("o")
            else:
                chars.append("@")
        rows.append("|" + "".join(chars))
    rows.append("+" + "-" * width)
    rows.append(f" x: [{fmt(float(x.min()))}, {fmt(float(x.max()))}]  y: [{fmt(float(y.min()))}, {fmt(float(y.max()))}]")
    return "\n".join(rows)
