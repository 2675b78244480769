"""
Game log row layout.

One row per action, written after the action (and any round or game
scoring it triggered) has been applied:

    action_index, round, active_player, action, bet_type, camel, roll,
    net_distance, trap_event_owner, trap_event_type, trap_event_location,
    camel_<i>_position, camel_<i>_stack        (per camel)
    player_<j>_coins, player_<j>_trap_location,
    player_<j>_trap_type                       (per player)

The trap_event_* columns repeat the trap involved in this action (the one
placed, or the one a camel landed on) so single events can be read without
diffing the per-player trap columns.
"""

from typing import TYPE_CHECKING, List, Optional

from ..core import Action, GameBet, GameState, PlaceOrMoveTrap, RoundBet, Trap
from .base import Row

if TYPE_CHECKING:
    from ..engine.movement import MoveOutcome

BASE_COLUMNS = [
    "action_index",
    "round",
    "active_player",
    "action",
    "bet_type",
    "camel",
    "roll",
    "net_distance",
    "trap_event_owner",
    "trap_event_type",
    "trap_event_location",
]


def log_columns(num_camels: int, num_players: int) -> List[str]:
    """
    Column names for a game with the given camel and player counts.

    Args:
        num_camels: Camels in the race
        num_players: Seats at the table

    Returns:
        Ordered column names
    """
    columns = list(BASE_COLUMNS)
    for i in range(num_camels):
        columns.extend([f"camel_{i}_position", f"camel_{i}_stack"])
    for j in range(num_players):
        columns.extend(
            [f"player_{j}_coins", f"player_{j}_trap_location", f"player_{j}_trap_type"]
        )
    return columns


def build_record(
    state: GameState,
    round_number: int,
    player: int,
    action: Action,
    move: Optional["MoveOutcome"] = None,
    trap_event: Optional[Trap] = None,
) -> Row:
    """
    Snapshot one action as a log row.

    Args:
        state: Game state after the action was applied
        round_number: Round the action was taken in
        player: Acting player
        action: Action taken
        move: Movement details for a camel move
        trap_event: Trap placed or triggered by this action

    Returns:
        Row keyed by log_columns()
    """
    row: Row = {
        "action_index": state.action_index,
        "round": round_number,
        "active_player": player,
        "action": action.kind,
        "bet_type": "",
        "camel": "",
        "roll": "",
        "net_distance": "",
        "trap_event_owner": "",
        "trap_event_type": "",
        "trap_event_location": "",
    }

    if isinstance(action, RoundBet):
        row["bet_type"] = "round"
        row["camel"] = action.camel
    elif isinstance(action, GameBet):
        row["bet_type"] = action.bet_type.value
        row["camel"] = action.camel
    elif isinstance(action, PlaceOrMoveTrap):
        trap_event = trap_event or state.trap_of(player)

    if move is not None:
        row["camel"] = move.camel_id
        row["roll"] = move.roll
        row["net_distance"] = move.net_distance
        trap_event = trap_event or move.triggered_trap

    if trap_event is not None:
        row["trap_event_owner"] = trap_event.owner
        row["trap_event_type"] = trap_event.trap_type.value
        row["trap_event_location"] = trap_event.location

    for camel in state.camels:
        row[f"camel_{camel.camel_id}_position"] = camel.position
        row[f"camel_{camel.camel_id}_stack"] = camel.stack

    for seat in state.players:
        trap = state.trap_of(seat.player_id)
        row[f"player_{seat.player_id}_coins"] = seat.coins
        row[f"player_{seat.player_id}_trap_location"] = trap.location if trap else ""
        row[f"player_{seat.player_id}_trap_type"] = trap.trap_type.value if trap else ""

    return row
