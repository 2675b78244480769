"""
Player actions.

A turn consists of exactly one of four actions:
- Move a camel (roll the pyramid die)
- Place or move a trap tile
- Take a round betting tile for a camel
- Place a secret game bet on the overall winner or loser

Actions are frozen dataclasses so they can be collected in sets and
compared against the rules engine's legal set.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class TrapType(Enum):
    """Trap tile side."""

    FORWARD = "+"
    BACKWARD = "-"


class GameBetType(Enum):
    """Game bet prediction."""

    WINNER = "winner"
    LOSER = "loser"


@dataclass(frozen=True)
class MoveCamel:
    """Move a random camel that has not moved this round."""

    kind = "move_camel"


@dataclass(frozen=True)
class PlaceOrMoveTrap:
    """Place a trap, or move the player's existing trap, onto a cell."""

    trap_type: TrapType
    location: int

    kind = "trap"


@dataclass(frozen=True)
class RoundBet:
    """Bet that a camel leads at the end of the current round."""

    camel: int

    kind = "round_bet"


@dataclass(frozen=True)
class GameBet:
    """Bet that a camel wins (or loses) the whole race."""

    bet_type: GameBetType
    camel: int

    kind = "game_bet"


Action = Union[MoveCamel, PlaceOrMoveTrap, RoundBet, GameBet]

ACTION_TYPES: Tuple[type, ...] = (MoveCamel, PlaceOrMoveTrap, RoundBet, GameBet)

_KIND_ORDER = {cls: i for i, cls in enumerate(ACTION_TYPES)}


def action_sort_key(action: Action) -> Tuple:
    """Stable ordering key so seeded bots pick reproducibly from a set."""
    order = _KIND_ORDER[type(action)]
    if isinstance(action, PlaceOrMoveTrap):
        return (order, action.location, action.trap_type.value)
    if isinstance(action, RoundBet):
        return (order, action.camel, "")
    if isinstance(action, GameBet):
        return (order, action.camel, action.bet_type.value)
    return (order, 0, "")
