"""Abstract base class for player bots."""

from abc import ABC, abstractmethod
from typing import FrozenSet

from ..core import Action, GameState


class PlayerBot(ABC):
    """
    Decision maker for one seat.

    The engine hands a bot a redacted copy of the game state together with
    the legal actions. Changing the copy has no effect on the game.
    """

    name = "bot"

    @abstractmethod
    def decide(
        self, player_id: int, state: GameState, legal_actions: FrozenSet[Action]
    ) -> Action:
        """
        Choose an action.

        Args:
            player_id: Seat the bot is playing
            state: Redacted copy of the game state
            legal_actions: Actions the rules allow right now

        Returns:
            Exactly one member of legal_actions
        """
        pass
