"""Core game state representation and rules."""

from .actions import (
    ACTION_TYPES,
    Action,
    GameBet,
    GameBetType,
    MoveCamel,
    PlaceOrMoveTrap,
    RoundBet,
    TrapType,
    action_sort_key,
)
from .config import GameConfig, TrapStackPolicy
from .errors import (
    GameOverError,
    GameSimulationError,
    IllegalMoveError,
    MalformedActionError,
    TurnLimitExceededError,
)
from .game_state import (
    Camel,
    GameBetRecord,
    GameState,
    Player,
    RoundBetRecord,
    Trap,
)
from .rules import (
    create_starting_state,
    is_game_over,
    is_round_over,
    legal_actions,
    validate_action,
)

__all__ = [
    "ACTION_TYPES",
    "Action",
    "GameBet",
    "GameBetType",
    "MoveCamel",
    "PlaceOrMoveTrap",
    "RoundBet",
    "TrapType",
    "action_sort_key",
    "GameConfig",
    "TrapStackPolicy",
    "GameOverError",
    "GameSimulationError",
    "IllegalMoveError",
    "MalformedActionError",
    "TurnLimitExceededError",
    "Camel",
    "GameBetRecord",
    "GameState",
    "Player",
    "RoundBetRecord",
    "Trap",
    "create_starting_state",
    "is_game_over",
    "is_round_over",
    "legal_actions",
    "validate_action",
]
