"""Game engine: turn loop, camel movement and bet scoring."""

from .game_engine import GameEngine, TurnPhase, TurnResult
from .movement import MoveOutcome, resolve_camel_move
from .scoring import resolve_game_bets, resolve_round_bets

__all__ = [
    "GameEngine",
    "TurnPhase",
    "TurnResult",
    "MoveOutcome",
    "resolve_camel_move",
    "resolve_game_bets",
    "resolve_round_bets",
]
