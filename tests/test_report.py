"""Tests for terminal rendering."""

import math

from corrgame.models.game import GuessTriple, Sample, StatisticTriple, Verdict
from corrgame.services.game_service import INCOMPLETE_MESSAGE, WIN_MESSAGE, check_guess
from corrgame.services.report import fmt, format_verdict, render_scatter, round_banner


ACTUAL = StatisticTriple(pearson=0.50, spearman=0.48, kendall=0.33)


class TestFmt:
    """Tests for number formatting."""

    def test_three_decimals(self) -> None:
        assert fmt(0.5) == "0.500"
        assert fmt(-0.12345) == "-0.123"

    def test_non_finite(self) -> None:
        assert fmt(math.nan) == "NaN"
        assert fmt(math.inf) == "NaN"


class TestFormatVerdict:
    """Tests for verdict text."""

    def test_winning_verdict(self) -> None:
        """Actual values, per-statistic lines and the win message."""
        verdict = check_guess(ACTUAL, GuessTriple(pearson=0.55, spearman=0.40, kendall=0.25), 0.1)

        text = format_verdict(verdict)

        assert "Pearson r = 0.500" in text
        assert "Spearman ρ = 0.480" in text
        assert "Kendall τ = 0.330" in text
        assert "Pearson guess: 0.550 (diff 0.050) - OK" in text
        assert "Spearman guess: 0.400 (diff 0.080) - OK" in text
        assert "Kendall guess: 0.250 (diff 0.080) - OK" in text
        assert text.endswith(WIN_MESSAGE)

    def test_losing_verdict_marks_wrong(self) -> None:
        """Failed statistics print 'Wrong'."""
        verdict = check_guess(ACTUAL, GuessTriple(pearson=0.70, spearman=0.40, kendall=0.25), 0.1)

        text = format_verdict(verdict)

        assert "Pearson guess: 0.700 (diff 0.200) - Wrong" in text

    def test_incomplete_verdict_is_just_the_message(self) -> None:
        verdict = Verdict(status="incomplete", tolerance=0.1, message=INCOMPLETE_MESSAGE)

        assert format_verdict(verdict) == INCOMPLETE_MESSAGE


class TestRenderScatter:
    """Tests for the text scatter plot."""

    def test_dimensions(self, generator) -> None:
        """height grid rows plus axis and range lines."""
        sample = generator.generate(100, 0.7)

        lines = render_scatter(sample, width=40, height=12).splitlines()

        assert len(lines) == 14
        assert all(len(line) == 41 for line in lines[:13])
        assert lines[12] == "+" + "-" * 40

    def test_increasing_points_run_bottom_left_to_top_right(self) -> None:
        """Row 0 is the top of the y range."""
        sample = Sample(x=[0.0, 1.0], y=[0.0, 1.0])

        lines = render_scatter(sample, width=4, height=2).splitlines()

        assert lines[0] == "|   ."
        assert lines[1] == "|.   "

    def test_banner(self, controller) -> None:
        rnd = controller.new_round(50, 0.5)

        assert round_banner(rnd) == "New plot generated (n=50). Enter your estimates."
