"""Tests for camel movement."""

import pytest
from camelup_sim.core import (
    GameConfig,
    GameState,
    Trap,
    TrapStackPolicy,
    TrapType,
    is_game_over,
)
from camelup_sim.engine import resolve_camel_move


def _assert_stacks_contiguous(state):
    cells = {}
    for camel in state.camels:
        cells.setdefault(camel.position, []).append(camel.stack)
    for heights in cells.values():
        assert sorted(heights) == list(range(len(heights)))


def _placed(state, camel_id):
    camel = state.camel(camel_id)
    return camel.position, camel.stack


def test_move_without_trap_lands_on_top():
    """Test a plain move onto an occupied cell."""
    state = GameState.from_layout(GameConfig(num_camels=2), {0: [0], 2: [1]})

    outcome = resolve_camel_move(state, 0, 2)

    assert _placed(state, 0) == (2, 1)
    assert _placed(state, 1) == (2, 0)
    assert outcome.net_distance == 2
    assert outcome.triggered_trap is None
    assert state.moved_this_round == {0}
    _assert_stacks_contiguous(state)


def test_move_carries_camels_above():
    """Test that riders move with the rolled camel."""
    state = GameState.from_layout(GameConfig(num_camels=3), {0: [0, 1, 2]})

    outcome = resolve_camel_move(state, 1, 1)

    assert _placed(state, 0) == (0, 0)
    assert _placed(state, 1) == (1, 0)
    assert _placed(state, 2) == (1, 1)
    assert outcome.carried == [2]
    # Only the rolled camel counts as moved
    assert state.moved_this_round == {1}
    _assert_stacks_contiguous(state)


def test_forward_trap_lands_on_top():
    """Test forward trap: extra distance, top of the stack, owner paid."""
    config = GameConfig(num_camels=2)
    trap = Trap(owner=1, trap_type=TrapType.FORWARD, location=3)
    state = GameState.from_layout(config, {0: [0], 4: [1]}, traps={1: trap})

    outcome = resolve_camel_move(state, 0, 3)

    assert _placed(state, 0) == (4, 1)
    assert _placed(state, 1) == (4, 0)
    assert outcome.net_distance == 4
    assert outcome.triggered_trap == trap
    assert state.coins() == [3, 4]


def test_backward_trap_lands_at_bottom():
    """Test backward trap: sent back, stack position 0, owner paid."""
    config = GameConfig(num_camels=2)
    trap = Trap(owner=0, trap_type=TrapType.BACKWARD, location=3)
    state = GameState.from_layout(config, {0: [0], 2: [1]}, traps={0: trap})

    outcome = resolve_camel_move(state, 0, 3)

    assert _placed(state, 0) == (2, 0)
    assert _placed(state, 1) == (2, 1)
    assert outcome.net_distance == 2
    assert state.coins() == [4, 3]
    _assert_stacks_contiguous(state)


def test_backward_trap_onto_origin_cell():
    """Test a camel pushed back onto the cell it left."""
    config = GameConfig(num_camels=3)
    trap = Trap(owner=1, trap_type=TrapType.BACKWARD, location=5)
    state = GameState.from_layout(config, {4: [0, 1], 9: [2]}, traps={1: trap})

    outcome = resolve_camel_move(state, 1, 1)

    # Back under the camel it was riding
    assert _placed(state, 1) == (4, 0)
    assert _placed(state, 0) == (4, 1)
    assert outcome.net_distance == 0
    _assert_stacks_contiguous(state)


def test_backward_trap_clamps_at_start():
    """Test a backward trap next to the start cannot leave the board."""
    config = GameConfig(num_camels=2, trap_backward_distance=3)
    trap = Trap(owner=1, trap_type=TrapType.BACKWARD, location=1)
    state = GameState.from_layout(config, {0: [0, 1]}, traps={1: trap})

    resolve_camel_move(state, 1, 1)

    assert _placed(state, 1) == (0, 0)
    assert _placed(state, 0) == (0, 1)


@pytest.mark.parametrize(
    "policy,expected",
    [
        # Only the rolled camel is pushed on; its rider stays on the trap cell
        (TrapStackPolicy.SINGLE, {0: (3, 0), 1: (2, 0)}),
        # The whole unit is pushed on together
        (TrapStackPolicy.CARRY, {0: (3, 0), 1: (3, 1)}),
    ],
)
def test_forward_trap_stack_policy(policy, expected):
    """Test which camels a forward trap moves under each policy."""
    config = GameConfig(num_camels=3, trap_stack_policy=policy)
    trap = Trap(owner=1, trap_type=TrapType.FORWARD, location=2)
    state = GameState.from_layout(config, {0: [0, 1], 8: [2]}, traps={1: trap})

    resolve_camel_move(state, 0, 2)

    for camel_id, placed in expected.items():
        assert _placed(state, camel_id) == placed
    _assert_stacks_contiguous(state)


@pytest.mark.parametrize(
    "policy,expected",
    [
        (TrapStackPolicy.SINGLE, {0: (1, 0), 2: (1, 1), 1: (2, 0)}),
        # The unit keeps its order and goes under the resting camel
        (TrapStackPolicy.CARRY, {0: (1, 0), 1: (1, 1), 2: (1, 2)}),
    ],
)
def test_backward_trap_stack_policy(policy, expected):
    """Test which camels a backward trap moves under each policy."""
    config = GameConfig(num_camels=3, trap_stack_policy=policy)
    trap = Trap(owner=0, trap_type=TrapType.BACKWARD, location=2)
    state = GameState.from_layout(config, {0: [0, 1], 1: [2]}, traps={0: trap})

    resolve_camel_move(state, 0, 2)

    for camel_id, placed in expected.items():
        assert _placed(state, camel_id) == placed
    _assert_stacks_contiguous(state)


def test_traps_do_not_chain():
    """Test a trap's displacement ignores a trap on the new cell."""
    config = GameConfig(num_camels=2)
    traps = {
        0: Trap(owner=0, trap_type=TrapType.FORWARD, location=2),
        1: Trap(owner=1, trap_type=TrapType.FORWARD, location=3),
    }
    state = GameState.from_layout(config, {0: [0], 9: [1]}, traps=traps)

    resolve_camel_move(state, 0, 2)

    assert _placed(state, 0) == (3, 0)
    assert state.coins() == [4, 3]


@pytest.mark.parametrize(
    "board_size,start,roll,ends",
    [
        (16, 15, 2, True),
        (16, 15, 1, True),
        (16, 14, 1, False),
        (16, 13, 2, False),
        (10, 9, 1, True),
        (10, 8, 1, False),
    ],
)
def test_game_end_boundary(board_size, start, roll, ends):
    """Test the race ends exactly when a camel passes the final cell."""
    config = GameConfig(num_camels=2, board_size=board_size)
    state = GameState.from_layout(config, {start: [0], 0: [1]})

    resolve_camel_move(state, 0, roll)

    assert is_game_over(state) is ends
