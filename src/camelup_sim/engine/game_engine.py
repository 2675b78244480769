"""
Turn loop for a single simulated game.

Each turn moves through these phases:

    AWAITING_ACTION -> VALIDATING -> APPLYING -> CHECK_ROUND_END
        -> CHECK_GAME_END -> AWAITING_ACTION (next player) | TERMINAL

The bot sees only a redacted copy of the state. Whatever it returns is
checked against a freshly computed legal set before anything is mutated;
a bad answer abandons the game.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from ..bots.base import PlayerBot
from ..core import (
    Action,
    GameBet,
    GameBetRecord,
    GameConfig,
    GameOverError,
    MoveCamel,
    PlaceOrMoveTrap,
    RoundBet,
    RoundBetRecord,
    Trap,
    TurnLimitExceededError,
    create_starting_state,
    is_game_over,
    is_round_over,
    legal_actions,
    validate_action,
)
from ..storage import GameLogBackend, build_record
from .movement import MoveOutcome, resolve_camel_move
from .scoring import resolve_game_bets, resolve_round_bets

logger = logging.getLogger(__name__)


class TurnPhase(Enum):
    """Where the engine is within a turn."""

    AWAITING_ACTION = "awaiting_action"
    VALIDATING = "validating"
    APPLYING = "applying"
    CHECK_ROUND_END = "check_round_end"
    CHECK_GAME_END = "check_game_end"
    TERMINAL = "terminal"


@dataclass
class TurnResult:
    """What happened during one turn."""

    action_index: int
    round_number: int
    player: int
    action: Action
    move: Optional[MoveOutcome] = None
    trap_event: Optional[Trap] = None
    trap_moved: bool = False  # True when an existing trap was relocated
    round_ended: bool = False
    game_ended: bool = False


class GameEngine:
    """
    Runs one game of Camel Up between a list of bots.

    The engine owns the only real GameState. Bots are seated in list order
    and player 0 acts first.
    """

    def __init__(
        self,
        config: GameConfig,
        bots: Sequence[PlayerBot],
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        game_log: Optional[GameLogBackend] = None,
    ):
        """
        Initialize game engine.

        Args:
            config: Game configuration
            bots: One bot per seat (at least two)
            rng: Random source for setup, camel choice and dice
            seed: Seed for a fresh random source when rng is omitted
            game_log: Optional log receiving one row per action
        """
        if len(bots) < 2:
            raise ValueError(f"Need at least 2 bots, got {len(bots)}")

        self.config = config
        self.bots = list(bots)
        self.rng = rng or random.Random(seed)
        self.game_log = game_log
        self.state = create_starting_state(
            config,
            num_players=len(self.bots),
            rng=self.rng,
            player_names=[f"p{i}:{bot.name}" for i, bot in enumerate(self.bots)],
        )
        self.phase = TurnPhase.AWAITING_ACTION
        self.turns_played = 0

    @property
    def is_terminal(self) -> bool:
        return self.phase is TurnPhase.TERMINAL

    def play_turn(self) -> TurnResult:
        """
        Play one turn for the current player.

        Returns:
            TurnResult for the action taken

        Raises:
            GameOverError: If the game has already ended
            TurnLimitExceededError: If config.max_turns turns were played
            MalformedActionError: If the bot's answer is not an action
            IllegalMoveError: If the bot's action is not legal
        """
        if self.is_terminal:
            raise GameOverError("Game is over, no further actions accepted")

        max_turns = self.config.max_turns
        if max_turns is not None and self.turns_played >= max_turns:
            raise TurnLimitExceededError(f"Game did not finish within {max_turns} turns")

        state = self.state
        player = state.current_player
        round_number = state.round_number

        self.phase = TurnPhase.AWAITING_ACTION
        menu = legal_actions(state, player)
        view = state.redacted_copy(player)
        choice = self.bots[player].decide(player, view, menu)

        self.phase = TurnPhase.VALIDATING
        action = validate_action(state, player, choice)

        self.phase = TurnPhase.APPLYING
        result = self.apply_action(player, action)
        result.round_number = round_number
        self.turns_played += 1

        self.phase = TurnPhase.CHECK_ROUND_END
        if is_round_over(state):
            self._end_round()
            result.round_ended = True

        self.phase = TurnPhase.CHECK_GAME_END
        if is_game_over(state):
            self._end_game()
            result.game_ended = True
        else:
            state.current_player = (player + 1) % state.num_players
            self.phase = TurnPhase.AWAITING_ACTION

        if self.game_log is not None:
            self.game_log.record(
                build_record(
                    state,
                    round_number,
                    player,
                    action,
                    move=result.move,
                    trap_event=result.trap_event,
                )
            )
            if result.game_ended:
                self.game_log.flush()

        return result

    def run(self) -> List[int]:
        """
        Play until the race ends.

        Returns:
            Final coin totals, one per seat
        """
        while not self.is_terminal:
            self.play_turn()

        logger.debug(
            f"Game finished after {self.turns_played} turns, "
            f"{self.state.round_number} rounds: coins={self.state.coins()}"
        )
        return self.state.coins()

    def apply_action(self, player: int, action: Action) -> TurnResult:
        """
        Apply an already validated action.

        Args:
            player: Acting player
            action: Legal action

        Returns:
            TurnResult (round/game end flags not yet set)
        """
        result = TurnResult(
            action_index=0,
            round_number=self.state.round_number,
            player=player,
            action=action,
        )

        if isinstance(action, MoveCamel):
            result.move = self.move_camel(player)
            result.trap_event = result.move.triggered_trap
        elif isinstance(action, PlaceOrMoveTrap):
            result.trap_moved = self.move_trap(player, action)
            result.trap_event = self.state.trap_of(player)
        elif isinstance(action, RoundBet):
            self.place_round_bet(player, action)
        elif isinstance(action, GameBet):
            self.place_game_bet(player, action)
        else:
            raise TypeError(f"Unsupported action type: {type(action).__name__}")

        self.state.action_index += 1
        result.action_index = self.state.action_index
        return result

    def move_camel(self, player: int) -> MoveOutcome:
        """
        Roll for a random camel that has not moved this round.

        Pays the acting player the move fee.

        Args:
            player: Acting player

        Returns:
            MoveOutcome of the move
        """
        camel_id = self.rng.choice(self.state.unmoved_camels())
        roll = self.rng.choice(self.config.dice_values)
        outcome = resolve_camel_move(self.state, camel_id, roll)
        self.state.credit(player, self.config.move_fee)

        logger.debug(
            f"Player {player} rolled camel {camel_id}: {roll} -> cell "
            f"{outcome.destination} (net {outcome.net_distance})"
        )
        return outcome

    def move_trap(self, player: int, action: PlaceOrMoveTrap) -> bool:
        """
        Place the player's trap, or relocate it if already placed.

        Args:
            player: Acting player
            action: Target cell and trap side

        Returns:
            True if an existing trap was moved, False if newly placed
        """
        moved = self.state.traps.pop(player, None) is not None
        self.state.traps[player] = Trap(
            owner=player, trap_type=action.trap_type, location=action.location
        )
        return moved

    def place_round_bet(self, player: int, action: RoundBet) -> None:
        """Take the next round betting tile for a camel."""
        self.state.round_bets.append(RoundBetRecord(player=player, camel=action.camel))

    def place_game_bet(self, player: int, action: GameBet) -> None:
        """Add a secret game bet to the ledger."""
        self.state.game_bets.append(
            GameBetRecord(player=player, bet_type=action.bet_type, camel=action.camel)
        )

    def _end_round(self) -> None:
        state = self.state
        state.round_active = False
        resolve_round_bets(state)
        state.moved_this_round.clear()
        if self.config.clear_traps_on_round_end:
            state.traps.clear()

        logger.debug(f"Round {state.round_number} over: coins={state.coins()}")
        if not is_game_over(state):
            state.round_number += 1
            state.round_active = True

    def _end_game(self) -> None:
        state = self.state
        if state.round_bets:
            # The race ended mid-round; that round is scored too
            resolve_round_bets(state)
        resolve_game_bets(state)
        state.round_active = False
        state.game_active = False
        self.phase = TurnPhase.TERMINAL
