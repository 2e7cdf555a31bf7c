"""Tests for the command line front end."""

import io
import json

import pytest

from corrgame.cli import main


@pytest.fixture
def stdin(monkeypatch):
    def _feed(text: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _feed


class TestEntrypoint:
    """Tests for subcommand dispatch."""

    def test_no_arguments_prints_usage(self, capsys) -> None:
        assert main([]) == 2
        assert "Usage" in capsys.readouterr().err

    def test_unknown_subcommand(self, capsys) -> None:
        assert main(["bogus"]) == 2
        assert "unknown subcommand" in capsys.readouterr().err


class TestPlay:
    """Tests for the play subcommand."""

    def test_single_round(self, stdin, capsys) -> None:
        """Three guesses produce a verdict and the session ends."""
        stdin("0.5\n0.5\n0.3\n")

        assert main(["play", "--seed", "1", "--rounds", "1", "--n", "30"]) == 0

        out = capsys.readouterr().out
        assert "New plot generated (n=30)" in out
        assert "Actual values:" in out
        assert "Rounds played: 1" in out

    def test_incomplete_guess_reprompts(self, stdin, capsys) -> None:
        """A blank field asks again within the same round."""
        stdin("\n0.5\n0.3\n0.5\n0.5\n0.3\n")

        assert main(["play", "--seed", "1", "--rounds", "1"]) == 0

        out = capsys.readouterr().out
        assert "Please fill all three guesses with numeric values." in out
        assert out.count("New plot generated") == 1
        assert "Rounds played: 1" in out

    def test_eof_ends_session(self, stdin, capsys) -> None:
        stdin("")

        assert main(["play", "--seed", "1"]) == 0
        assert "Rounds played: 0, won: 0" in capsys.readouterr().out

    def test_quit_word_ends_session(self, stdin, capsys) -> None:
        stdin("0.5\n0.5\n0.3\nq\n")

        assert main(["play", "--seed", "1"]) == 0
        assert "Rounds played: 1" in capsys.readouterr().out


class TestSimulate:
    """Tests for the simulate subcommand."""

    def test_prints_json_summary(self, capsys) -> None:
        assert main(["simulate", "--n", "40", "--target", "0.5", "--repetitions", "12", "--seed", "3"]) == 0

        summary = json.loads(capsys.readouterr().out)
        assert summary["repetitions"] == 12
        assert summary["sample_size"] == 40
        assert set(summary) >= {"pearson", "spearman", "kendall"}
