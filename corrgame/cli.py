"""
corrgame CLI

Subcommands:
  - play        Interactive rounds in the terminal: scatter plot, three guesses, verdict
  - simulate    Repeat rounds for one configuration and summarize the realized statistics

Examples:
  corrgame play --n 80 --target 0.6 --tolerance 0.1
  corrgame play --seed 7 --rounds 3
  python -m corrgame simulate --n 500 --target 0.9 --repetitions 200 --seed 1
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

import numpy as np

from corrgame.config import settings
from corrgame.logging import setup_logging
from corrgame.models.game import GuessTriple
from corrgame.services.game_service import RoundController
from corrgame.services.report import format_verdict, render_scatter, round_banner
from corrgame.services.simulation_service import simulate_rounds, summarize

PROMPTS = (
    ("pearson", "Pearson r"),
    ("spearman", "Spearman rho"),
    ("kendall", "Kendall tau"),
)

QUIT_WORDS = {"q", "quit", "exit"}


class _Quit(Exception):
    pass


def _ask(label: str) -> str:
    sys.stdout.write(f"{label}: ")
    sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        raise _Quit()
    value = line.strip()
    if value.lower() in QUIT_WORDS:
        raise _Quit()
    return value


def _read_guess() -> GuessTriple:
    raw = {name: _ask(label) for name, label in PROMPTS}
    return GuessTriple(**raw)


# -----------------------------------------------------------------------------
# Subcommands
# -----------------------------------------------------------------------------

def _cmd_play(argv: List[str]) -> int:
    p = argparse.ArgumentParser(
        prog="corrgame play",
        description="Guess Pearson, Spearman and Kendall correlations from a scatter plot."
    )
    p.add_argument("--n", default=None, help=f"Sample size, clamped to [{settings.min_sample_size}, {settings.max_sample_size}]")
    p.add_argument("--target", default=None, help=f"Target correlation, clamped to +/-{settings.target_r_limit}")
    p.add_argument("--tolerance", default=None, help=f"Allowed absolute error per statistic (default {settings.default_tolerance})")
    p.add_argument("--seed", type=int, default=settings.seed, help="Seed for reproducible rounds")
    p.add_argument("--rounds", type=int, default=0, help="Stop after this many rounds (0 = until EOF or 'q')")
    p.add_argument("--width", type=int, default=60, help="Scatter plot width in characters")
    p.add_argument("--height", type=int, default=20, help="Scatter plot height in characters")
    args = p.parse_args(argv)

    controller = RoundController(rng=np.random.default_rng(args.seed))
    tolerance = controller.clamp_tolerance(args.tolerance)

    played = 0
    wins = 0
    try:
        while args.rounds <= 0 or played < args.rounds:
            rnd = controller.new_round(args.n, args.target)
            print(render_scatter(rnd.sample, width=args.width, height=args.height))
            print(round_banner(rnd))

            while True:
                verdict = controller.submit_guess(rnd, _read_guess(), tolerance)
                print(format_verdict(verdict))
                if verdict.status == "checked":
                    break

            played += 1
            wins += int(verdict.overall_pass)
            print()
    except _Quit:
        print()

    print(f"Rounds played: {played}, won: {wins}")
    return 0


def _cmd_simulate(argv: List[str]) -> int:
    p = argparse.ArgumentParser(
        prog="corrgame simulate",
        description="Generate many rounds for one configuration and summarize the realized statistics."
    )
    p.add_argument("--n", default=None, help="Sample size (clamped like in play)")
    p.add_argument("--target", default=None, help="Target correlation (clamped like in play)")
    p.add_argument("--repetitions", type=int, default=100, help="Number of rounds to generate")
    p.add_argument("--seed", type=int, default=settings.seed, help="Seed for reproducible output")
    p.add_argument("--jitter", action="store_true", help="Apply the per-round target jitter used in play")
    args = p.parse_args(argv)

    frame = simulate_rounds(args.n, args.target, args.repetitions, seed=args.seed, jitter=args.jitter)
    print(json.dumps(summarize(frame), indent=2))
    return 0


# -----------------------------------------------------------------------------
# Entrypoint
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        print("Usage: corrgame {play|simulate} ...", file=sys.stderr)
        return 2

    setup_logging(settings)

    cmd, rest = argv[0], argv[1:]
    if cmd == "play":
        return _cmd_play(rest)
    if cmd == "simulate":
        return _cmd_simulate(rest)

    print(f"unknown subcommand: {cmd}", file=sys.stderr)
    return 2


if __name__ == "__main__":
    sys.exit(main())
