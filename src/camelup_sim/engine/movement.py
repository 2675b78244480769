"""
Camel movement.

A moving camel carries every camel stacked above it. The unit lands on top
of the landing cell's stack unless a trap is there:
- Forward trap: the camel continues extra cells and lands on top
- Backward trap: the camel goes back and lands at the bottom (stack 0)
Either way the trap's owner is paid. Traps do not chain.

Whether riders share the trap's effect is TrapStackPolicy.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..core import Camel, GameState, Trap, TrapStackPolicy, TrapType


@dataclass
class MoveOutcome:
    """Result of one camel move."""

    camel_id: int
    roll: int
    origin: int
    destination: int  # Final cell of the rolled camel
    net_distance: int  # Trap-adjusted, negative when sent backwards
    triggered_trap: Optional[Trap] = None
    carried: List[int] = field(default_factory=list)  # Riders at the start of the move


def _place_unit(state: GameState, unit: List[Camel], cell: int, on_top: bool) -> None:
    """Put a unit of camels onto a cell, keeping stack heights contiguous."""
    moving = {c.camel_id for c in unit}
    resting = [c for c in state.stack_at(cell) if c.camel_id not in moving]
    ordered = resting + unit if on_top else unit + resting
    for height, camel in enumerate(ordered):
        camel.position = cell
        camel.stack = height


def resolve_camel_move(state: GameState, camel_id: int, roll: int) -> MoveOutcome:
    """
    Move a camel (and its riders) by a die roll, applying any trap.

    Marks the camel as moved this round and pays the trap owner. Does not
    pay the acting player.

    Args:
        state: Game state, mutated in place
        camel_id: Camel that rolled
        roll: Distance rolled

    Returns:
        MoveOutcome describing the move
    """
    config = state.config
    camel = state.camel(camel_id)
    origin = camel.position

    stack = state.stack_at(origin)
    unit = stack[camel.stack:]
    riders = unit[1:]

    landing = origin + roll
    trap = state.trap_at(landing) if landing <= config.final_cell else None

    if trap is None:
        _place_unit(state, unit, landing, on_top=True)
    else:
        state.credit(trap.owner, config.trap_fee)

        if trap.trap_type is TrapType.FORWARD:
            final = landing + config.trap_forward_distance
            on_top = True
        else:
            final = max(0, landing - config.trap_backward_distance)
            on_top = False

        if config.trap_stack_policy is TrapStackPolicy.CARRY:
            _place_unit(state, unit, final, on_top=on_top)
        else:
            if riders:
                _place_unit(state, riders, landing, on_top=True)
            _place_unit(state, [camel], final, on_top=on_top)

    state.moved_this_round.add(camel_id)

    return MoveOutcome(
        camel_id=camel_id,
        roll=roll,
        origin=origin,
        destination=camel.position,
        net_distance=camel.position - origin,
        triggered_trap=trap,
        carried=[c.camel_id for c in riders],
    )
