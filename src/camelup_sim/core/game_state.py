"""
Game state representation.

A Camel Up game state consists of:
- Camels, each with a board cell and a height within that cell's stack
- Players and their coin balances
- Traps (at most one per player, at most one per cell)
- The round bet list and the game bet ledger, both in placement order
- Round/game bookkeeping (which camels moved, active flags, turn counters)

Board layout for board_size=16:

    [0] [1] [2] ... [15] | finish

A stack is listed bottom to top. The camel on top of the furthest cell
leads the race.
"""

import copy
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Set

from .actions import GameBetType, TrapType
from .config import GameConfig


@dataclass
class Camel:
    """A camel's place on the board."""

    camel_id: int
    position: int  # Board cell
    stack: int  # Height in the cell, 0 = bottom


@dataclass
class Trap:
    """A player's trap tile."""

    owner: int
    trap_type: TrapType
    location: int


@dataclass
class Player:
    """A seat at the table."""

    player_id: int
    name: str
    coins: int


@dataclass
class RoundBetRecord:
    """A round betting tile taken by a player."""

    player: int
    camel: int


@dataclass
class GameBetRecord:
    """
    A game bet in the ledger.

    bet_type and camel are None in views handed to players who do not own
    the bet.
    """

    player: int
    bet_type: Optional[GameBetType]
    camel: Optional[int]


@dataclass
class GameState:
    """Mutable game state, aggregate root for one simulated game."""

    config: GameConfig
    camels: List[Camel]
    players: List[Player]
    traps: Dict[int, Trap] = field(default_factory=dict)  # owner -> trap
    round_bets: List[RoundBetRecord] = field(default_factory=list)
    game_bets: List[GameBetRecord] = field(default_factory=list)
    moved_this_round: Set[int] = field(default_factory=set)
    round_active: bool = True
    game_active: bool = True
    current_player: int = 0
    round_number: int = 1
    action_index: int = 0

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if len(self.camels) != self.config.num_camels:
            raise ValueError(
                f"Got {len(self.camels)} camels, config expects {self.config.num_camels}"
            )
        ids = [c.camel_id for c in self.camels]
        if ids != list(range(self.config.num_camels)):
            raise ValueError(
                f"Camels must be listed in id order 0..{self.config.num_camels - 1}, got {ids}"
            )
        if len(self.players) < 2:
            raise ValueError(f"Need at least 2 players, got {len(self.players)}")
        if any(c.position < 0 or c.stack < 0 for c in self.camels):
            raise ValueError("Negative camel position or stack height not allowed")

        cells: Dict[int, List[int]] = {}
        for camel in self.camels:
            cells.setdefault(camel.position, []).append(camel.stack)
        for position, heights in cells.items():
            if sorted(heights) != list(range(len(heights))):
                raise ValueError(
                    f"Stack heights at cell {position} must be 0..{len(heights) - 1}, "
                    f"got {sorted(heights)}"
                )

        locations = [t.location for t in self.traps.values()]
        if len(set(locations)) != len(locations):
            raise ValueError("Two traps cannot share a cell")
        for owner, trap in self.traps.items():
            if trap.owner != owner:
                raise ValueError(f"Trap keyed by player {owner} is owned by {trap.owner}")
            if not 0 <= trap.location <= self.config.final_cell:
                raise ValueError(f"Trap location {trap.location} is off the board")

    @classmethod
    def from_layout(
        cls,
        config: GameConfig,
        stacks: Mapping[int, Sequence[int]],
        num_players: int = 2,
        **kwargs,
    ) -> "GameState":
        """
        Build a state from an explicit board layout.

        Args:
            config: Game configuration
            stacks: Cell -> camel ids listed bottom to top
            num_players: Number of players, each starting with config coins
            **kwargs: Extra GameState fields (traps, bets, ...)

        Returns:
            New GameState
        """
        camels = [
            Camel(camel_id=camel_id, position=cell, stack=height)
            for cell, ids in stacks.items()
            for height, camel_id in enumerate(ids)
        ]
        camels.sort(key=lambda c: c.camel_id)
        players = [
            Player(player_id=i, name=f"player_{i}", coins=config.starting_coins)
            for i in range(num_players)
        ]
        return cls(config=config, camels=camels, players=players, **kwargs)

    @property
    def num_players(self) -> int:
        return len(self.players)

    def camel(self, camel_id: int) -> Camel:
        """Look up a camel by id."""
        return self.camels[camel_id]

    def stack_at(self, cell: int) -> List[Camel]:
        """Camels on a cell, bottom to top."""
        return sorted(
            (c for c in self.camels if c.position == cell), key=lambda c: c.stack
        )

    def trap_at(self, cell: int) -> Optional[Trap]:
        """Trap on a cell, if any."""
        for trap in self.traps.values():
            if trap.location == cell:
                return trap
        return None

    def trap_of(self, player: int) -> Optional[Trap]:
        """A player's current trap, if placed."""
        return self.traps.get(player)

    def unmoved_camels(self) -> List[int]:
        """Ids of camels that have not moved this round."""
        return [c.camel_id for c in self.camels if c.camel_id not in self.moved_this_round]

    def rankings(self) -> List[int]:
        """Camel ids ordered from first place to last place."""
        ordered = sorted(self.camels, key=lambda c: (c.position, c.stack), reverse=True)
        return [c.camel_id for c in ordered]

    def leader(self) -> int:
        """Camel currently in first place."""
        return self.rankings()[0]

    def round_bets_on(self, camel_id: int) -> List[RoundBetRecord]:
        return [b for b in self.round_bets if b.camel == camel_id]

    def bets_of(self, player: int) -> List[object]:
        """Round bets then game bets placed by a player, each in placement order."""
        return [b for b in self.round_bets if b.player == player] + [
            b for b in self.game_bets if b.player == player
        ]

    def credit(self, player: int, amount: int) -> None:
        """Adjust a player's coins, clamping at zero unless negatives are allowed."""
        seat = self.players[player]
        seat.coins += amount
        if not self.config.allow_negative_coins and seat.coins < 0:
            seat.coins = 0

    def coins(self) -> List[int]:
        return [p.coins for p in self.players]

    def redacted_copy(self, viewer: int) -> "GameState":
        """
        Copy of the state as seen by one player.

        Game bets owned by other players keep their owner but lose their
        camel and bet type. The copy shares nothing with this state, so
        changes to it never reach the real game.

        Args:
            viewer: Player the view is built for

        Returns:
            Redacted deep copy
        """
        view = copy.deepcopy(self)
        for bet in view.game_bets:
            if bet.player != viewer:
                bet.bet_type = None
                bet.camel = None
        return view

    def __str__(self) -> str:
        """Human-readable board representation."""
        lines = []
        top = max((c.position for c in self.camels), default=0)
        for cell in range(max(top, self.config.final_cell) + 1):
            stack = self.stack_at(cell)
            trap = self.trap_at(cell)
            if not stack and trap is None:
                continue
            trap_str = f" trap({trap.trap_type.value} p{trap.owner})" if trap else ""
            camels_str = " ".join(str(c.camel_id) for c in stack)
            lines.append(f"[{cell:>2}] {camels_str}{trap_str}")

        coins = " ".join(f"{p.name}={p.coins}" for p in self.players)
        return (
            "\n".join(lines)
            + f"\n\nRound {self.round_number}, player {self.current_player}'s turn\n"
            + f"Coins: {coins}\n"
        )
