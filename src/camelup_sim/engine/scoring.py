"""
Bet resolution.

Round bets are scored when a round ends; game bets when the race ends.
Both are order sensitive: earlier correct bets earn more.
"""

import logging
from typing import Dict

from ..core import GameBetType, GameState

logger = logging.getLogger(__name__)


def resolve_round_bets(state: GameState) -> Dict[int, int]:
    """
    Pay out and clear the current round's bets.

    Walking the bets in insertion order, the k-th bet on the round leader
    earns round_bet_payouts[k], a bet on the runner-up earns the second
    place payout and any other bet loses the penalty.

    Args:
        state: Game state, mutated in place

    Returns:
        Net coin change per player (before any zero clamp)
    """
    config = state.config
    rankings = state.rankings()
    first, second = rankings[0], rankings[1]

    deltas = {p.player_id: 0 for p in state.players}
    winners_paid = 0

    for bet in state.round_bets:
        if bet.camel == first:
            amount = config.round_bet_payouts[winners_paid]
            winners_paid += 1
        elif bet.camel == second:
            amount = config.round_bet_second_place_payout
        else:
            amount = -config.round_bet_penalty

        state.credit(bet.player, amount)
        deltas[bet.player] += amount

    logger.debug(
        f"Round {state.round_number} scored: leader={first}, runner-up={second}, "
        f"{len(state.round_bets)} bets, deltas={deltas}"
    )
    state.round_bets.clear()
    return deltas


def resolve_game_bets(state: GameState) -> Dict[int, int]:
    """
    Pay out the game bet ledger at the end of the race.

    Winner and loser bets are scored independently. The k-th correct bet of
    a kind earns game_bet_payouts[k] (the last entry once the table runs
    out); wrong bets lose the penalty.

    Args:
        state: Game state, mutated in place

    Returns:
        Net coin change per player (before any zero clamp)
    """
    config = state.config
    rankings = state.rankings()
    targets = {GameBetType.WINNER: rankings[0], GameBetType.LOSER: rankings[-1]}
    table = config.game_bet_payouts

    deltas = {p.player_id: 0 for p in state.players}
    correct = {GameBetType.WINNER: 0, GameBetType.LOSER: 0}

    for bet in state.game_bets:
        if bet.camel == targets[bet.bet_type]:
            amount = table[min(correct[bet.bet_type], len(table) - 1)]
            correct[bet.bet_type] += 1
        else:
            amount = -config.game_bet_penalty

        state.credit(bet.player, amount)
        deltas[bet.player] += amount

    logger.debug(
        f"Game bets scored: winner={targets[GameBetType.WINNER]}, "
        f"loser={targets[GameBetType.LOSER]}, deltas={deltas}"
    )
    return deltas
