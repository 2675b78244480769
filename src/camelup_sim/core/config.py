"""
Game configuration.

Everything that stays fixed for the lifetime of a game lives here: board
size, camel count, dice, fees and payout tables. The mutable side of a game
is GameState.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class TrapStackPolicy(Enum):
    """
    Which camels a trap affects when a stack lands on it.

    SINGLE: only the camel whose move triggered the trap is displaced;
            camels riding on it stay on the trap cell.
    CARRY:  the whole moving unit is displaced together.
    """

    SINGLE = "single"
    CARRY = "carry"


@dataclass(frozen=True)
class GameConfig:
    """Immutable game configuration."""

    num_camels: int = 5
    board_size: int = 16  # Cells 0..board_size-1
    dice_values: Tuple[int, ...] = (1, 2, 3)
    starting_coins: int = 3

    move_fee: int = 1  # Paid to the player who moves a camel
    trap_fee: int = 1  # Paid to a trap's owner when a camel lands on it
    trap_forward_distance: int = 1
    trap_backward_distance: int = 1
    trap_stack_policy: TrapStackPolicy = TrapStackPolicy.SINGLE

    # One tile per entry, so the length is the per-camel supply each round
    round_bet_payouts: Tuple[int, ...] = (5, 3, 2)
    round_bet_second_place_payout: int = 1
    round_bet_penalty: int = 1

    game_bet_payouts: Tuple[int, ...] = (8, 5, 3, 2, 1)
    game_bet_penalty: int = 1
    game_bets_per_camel: Optional[int] = 1  # Per player; None = unlimited

    allow_negative_coins: bool = False
    clear_traps_on_round_end: bool = False
    random_start: bool = True
    max_turns: Optional[int] = 10_000

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.num_camels < 2:
            raise ValueError(f"Need at least 2 camels, got {self.num_camels}")
        if self.board_size < 2:
            raise ValueError(f"Board must have at least 2 cells, got {self.board_size}")
        if not self.dice_values or any(d < 1 for d in self.dice_values):
            raise ValueError(f"Dice values must be positive, got {self.dice_values}")
        if self.trap_forward_distance < 1 or self.trap_backward_distance < 1:
            raise ValueError("Trap distances must be at least 1")
        if not self.round_bet_payouts:
            raise ValueError("round_bet_payouts must not be empty")
        if any(a <= b for a, b in zip(self.round_bet_payouts, self.round_bet_payouts[1:])):
            raise ValueError(
                f"round_bet_payouts must be strictly decreasing, got {self.round_bet_payouts}"
            )
        if not self.game_bet_payouts:
            raise ValueError("game_bet_payouts must not be empty")
        if any(a < b for a, b in zip(self.game_bet_payouts, self.game_bet_payouts[1:])):
            raise ValueError(
                f"game_bet_payouts must be non-increasing, got {self.game_bet_payouts}"
            )
        if self.game_bets_per_camel is not None and self.game_bets_per_camel < 1:
            raise ValueError("game_bets_per_camel must be at least 1 or None")
        if self.max_turns is not None and self.max_turns < 1:
            raise ValueError("max_turns must be at least 1 or None")

    @property
    def final_cell(self) -> int:
        """Index of the last cell; a camel past it ends the game."""
        return self.board_size - 1

    @property
    def round_bet_supply(self) -> int:
        """Round betting tiles available per camel each round."""
        return len(self.round_bet_payouts)
