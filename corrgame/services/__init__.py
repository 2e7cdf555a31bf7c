"""
Service layer for the correlation game
"""

from .game_service import RoundController, check_guess
from .report import format_verdict, render_scatter, round_banner
from .simulation_service import simulate_rounds, summarize

__all__ = [
    'RoundController',
    'check_guess',
    'format_verdict',
    'render_scatter',
    'round_banner',
    'simulate_rounds',
    'summarize',
]
