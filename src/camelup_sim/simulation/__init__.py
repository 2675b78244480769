"""Batch simulation of many games."""

from .runner import (
    GameResult,
    SeatSummary,
    game_log_path,
    run_simulations,
    simulate_game,
    summarize_results,
)

__all__ = [
    "GameResult",
    "SeatSummary",
    "game_log_path",
    "run_simulations",
    "simulate_game",
    "summarize_results",
]
