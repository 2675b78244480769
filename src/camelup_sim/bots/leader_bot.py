"""Bot that backs the current race leader each round."""

import logging
from typing import FrozenSet, Optional

from ..core import Action, GameState, MoveCamel, RoundBet, action_sort_key
from .base import PlayerBot

logger = logging.getLogger(__name__)


class LeaderBot(PlayerBot):
    """
    Takes a round bet on the leading camel while a good tile remains.

    Otherwise it moves a camel. min_payout is the smallest tile value
    worth taking.
    """

    name = "leader"

    def __init__(self, seed: Optional[int] = None, min_payout: int = 3):
        self.seed = seed
        self.min_payout = min_payout

    def decide(
        self, player_id: int, state: GameState, legal_actions: FrozenSet[Action]
    ) -> Action:
        leader = state.leader()
        bet = RoundBet(camel=leader)
        if bet in legal_actions:
            payouts = state.config.round_bet_payouts
            next_tile = payouts[len(state.round_bets_on(leader))]
            if next_tile >= self.min_payout:
                logger.debug(f"Player {player_id} backs leader {leader} for {next_tile}")
                return bet

        if MoveCamel() in legal_actions:
            return MoveCamel()
        return min(legal_actions, key=action_sort_key)
