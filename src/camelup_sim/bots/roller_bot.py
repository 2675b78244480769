"""Bot that only ever moves camels."""

from typing import FrozenSet, Optional

from ..core import Action, GameState, MoveCamel, action_sort_key
from .base import PlayerBot


class RollerBot(PlayerBot):
    """Always rolls, collecting the move fee every turn."""

    name = "roller"

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed

    def decide(
        self, player_id: int, state: GameState, legal_actions: FrozenSet[Action]
    ) -> Action:
        if MoveCamel() in legal_actions:
            return MoveCamel()
        return min(legal_actions, key=action_sort_key)
