"""
Camel Up rules implementation.

Implements the legal action set for a player:
- A camel may be moved while any camel has not moved this round
- A trap may go on any cell without another player's trap, except the
  player's own current trap cell
- A round bet is available while the camel's round tiles last
- A game bet is available while the player still holds a card for the camel

legal_actions is the only authority on legality. It never mutates state.
"""

import random
from typing import FrozenSet, List, Optional, Sequence

from .actions import (
    ACTION_TYPES,
    Action,
    GameBet,
    GameBetType,
    MoveCamel,
    PlaceOrMoveTrap,
    RoundBet,
    TrapType,
)
from .config import GameConfig
from .errors import IllegalMoveError, MalformedActionError
from .game_state import Camel, GameState, Player


def create_starting_state(
    config: GameConfig,
    num_players: int,
    rng: Optional[random.Random] = None,
    player_names: Optional[Sequence[str]] = None,
) -> GameState:
    """
    Create the initial game state.

    With config.random_start each camel, in random order, rolls the die and
    is placed on top of cell roll - 1. Otherwise all camels start stacked on
    cell 0 in id order.

    Args:
        config: Game configuration
        num_players: Number of players
        rng: Random source (a fresh unseeded one if omitted)
        player_names: Optional display names, one per player

    Returns:
        Starting GameState
    """
    rng = rng or random.Random()
    if player_names is None:
        player_names = [f"player_{i}" for i in range(num_players)]
    if len(player_names) != num_players:
        raise ValueError(
            f"Got {len(player_names)} player names for {num_players} players"
        )

    order = list(range(config.num_camels))
    if config.random_start:
        rng.shuffle(order)

    heights = {}
    camels = {}
    for camel_id in order:
        cell = rng.choice(config.dice_values) - 1 if config.random_start else 0
        cell = min(cell, config.final_cell)
        height = heights.get(cell, 0)
        camels[camel_id] = Camel(camel_id=camel_id, position=cell, stack=height)
        heights[cell] = height + 1

    players = [
        Player(player_id=i, name=name, coins=config.starting_coins)
        for i, name in enumerate(player_names)
    ]

    return GameState(
        config=config,
        camels=[camels[i] for i in range(config.num_camels)],
        players=players,
    )


def is_round_over(state: GameState) -> bool:
    """
    Check if the current round has ended.

    A round ends exactly when every camel has moved once.
    """
    return len(state.moved_this_round) >= state.config.num_camels


def is_game_over(state: GameState) -> bool:
    """
    Check if the race has ended.

    The race ends when any camel has passed the final cell.
    """
    return any(c.position > state.config.final_cell for c in state.camels)


def _trap_actions(state: GameState, player: int) -> List[PlaceOrMoveTrap]:
    own = state.trap_of(player)
    blocked = {
        trap.location for owner, trap in state.traps.items() if owner != player
    }
    if own is not None:
        blocked.add(own.location)

    actions = []
    for cell in range(state.config.board_size):
        if cell in blocked:
            continue
        for trap_type in TrapType:
            actions.append(PlaceOrMoveTrap(trap_type=trap_type, location=cell))
    return actions


def _game_bets_on(state: GameState, player: int, camel_id: int) -> int:
    return sum(
        1 for b in state.game_bets if b.player == player and b.camel == camel_id
    )


def legal_actions(state: GameState, player: int) -> FrozenSet[Action]:
    """
    Generate all legal actions for a player.

    Args:
        state: Current game state (not modified)
        player: Acting player

    Returns:
        Frozen set of legal actions; empty once the game is over
    """
    if not state.game_active or is_game_over(state):
        return frozenset()

    actions: List[Action] = []

    if state.unmoved_camels():
        actions.append(MoveCamel())

    actions.extend(_trap_actions(state, player))

    supply = state.config.round_bet_supply
    for camel in state.camels:
        if len(state.round_bets_on(camel.camel_id)) < supply:
            actions.append(RoundBet(camel=camel.camel_id))

    limit = state.config.game_bets_per_camel
    for camel in state.camels:
        if limit is not None and _game_bets_on(state, player, camel.camel_id) >= limit:
            continue
        for bet_type in GameBetType:
            actions.append(GameBet(bet_type=bet_type, camel=camel.camel_id))

    return frozenset(actions)


def validate_action(state: GameState, player: int, action: object) -> Action:
    """
    Check a bot's chosen action against the current legal set.

    The legal set is recomputed here, against the state as it stands
    before the action is applied.

    Args:
        state: Current game state (not modified)
        player: Acting player
        action: Value returned by the bot

    Returns:
        The action, once validated

    Raises:
        MalformedActionError: If the value is not a recognised action
        IllegalMoveError: If the action is not currently legal
    """
    if not isinstance(action, ACTION_TYPES):
        raise MalformedActionError(player, action)

    try:
        legal = action in legal_actions(state, player)
    except TypeError:
        # Unhashable field values cannot belong to any action shape
        raise MalformedActionError(player, action) from None

    if not legal:
        raise IllegalMoveError(player, action)

    return action
