"""Bot that plays uniformly at random."""

import random
from typing import Dict, FrozenSet, List, Optional

from ..core import Action, GameState, action_sort_key
from .base import PlayerBot


class RandomBot(PlayerBot):
    """
    Picks an action kind uniformly, then a member of that kind.

    Choosing the kind first keeps the many trap placements from drowning
    out camel moves, so games still finish in a reasonable number of turns.
    """

    name = "random"

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def decide(
        self, player_id: int, state: GameState, legal_actions: FrozenSet[Action]
    ) -> Action:
        by_kind: Dict[str, List[Action]] = {}
        for action in sorted(legal_actions, key=action_sort_key):
            by_kind.setdefault(action.kind, []).append(action)

        kind = self.rng.choice(list(by_kind))
        return self.rng.choice(by_kind[kind])
