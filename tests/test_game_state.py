"""Tests for game state representation."""

import random

import pytest
from camelup_sim.core import (
    Camel,
    GameBetRecord,
    GameBetType,
    GameConfig,
    GameState,
    Player,
    RoundBetRecord,
    Trap,
    TrapType,
    create_starting_state,
)


def _players(n=2):
    return [Player(player_id=i, name=f"p{i}", coins=3) for i in range(n)]


def test_create_game_state():
    """Test building a state from a board layout."""
    config = GameConfig(num_camels=3)
    state = GameState.from_layout(config, {0: [0, 1], 2: [2]}, num_players=3)

    assert state.num_players == 3
    assert state.camel(0).position == 0 and state.camel(0).stack == 0
    assert state.camel(1).position == 0 and state.camel(1).stack == 1
    assert state.camel(2).position == 2 and state.camel(2).stack == 0
    assert state.coins() == [3, 3, 3]
    assert state.round_active is True
    assert state.game_active is True


def test_rankings_use_position_then_stack():
    """Test that the camel on top of the furthest stack leads."""
    config = GameConfig(num_camels=4)
    state = GameState.from_layout(config, {1: [3], 4: [0, 2], 2: [1]})

    assert state.rankings() == [2, 0, 1, 3]
    assert state.leader() == 2


def test_stack_at_is_bottom_to_top():
    """Test stack listing order."""
    config = GameConfig(num_camels=3)
    state = GameState.from_layout(config, {5: [2, 0, 1]})

    assert [c.camel_id for c in state.stack_at(5)] == [2, 0, 1]
    assert state.stack_at(4) == []


def test_state_validation():
    """Test state validation catches errors."""
    config = GameConfig(num_camels=3)

    # Two camels share a board cell and stack height
    with pytest.raises(ValueError):
        GameState(
            config=config,
            camels=[Camel(0, 0, 0), Camel(1, 0, 0), Camel(2, 1, 0)],
            players=_players(),
        )

    # Gap in a stack
    with pytest.raises(ValueError):
        GameState(
            config=config,
            camels=[Camel(0, 0, 0), Camel(1, 0, 2), Camel(2, 1, 0)],
            players=_players(),
        )

    # Wrong camel count
    with pytest.raises(ValueError):
        GameState(config=config, camels=[Camel(0, 0, 0)], players=_players())

    # Single player
    with pytest.raises(ValueError):
        GameState.from_layout(config, {0: [0, 1, 2]}, num_players=1)


def test_traps_cannot_share_a_cell():
    """Test that two traps on one cell are rejected."""
    config = GameConfig(num_camels=3)
    traps = {
        0: Trap(owner=0, trap_type=TrapType.FORWARD, location=6),
        1: Trap(owner=1, trap_type=TrapType.BACKWARD, location=6),
    }
    with pytest.raises(ValueError):
        GameState.from_layout(config, {0: [0, 1, 2]}, traps=traps)


def test_trap_must_be_keyed_by_owner():
    """Test that the trap map is keyed by owner."""
    config = GameConfig(num_camels=3)
    traps = {0: Trap(owner=1, trap_type=TrapType.FORWARD, location=6)}
    with pytest.raises(ValueError):
        GameState.from_layout(config, {0: [0, 1, 2]}, traps=traps)


def test_trap_lookup():
    """Test finding traps by cell and by owner."""
    config = GameConfig(num_camels=3)
    trap = Trap(owner=1, trap_type=TrapType.BACKWARD, location=4)
    state = GameState.from_layout(config, {0: [0, 1, 2]}, traps={1: trap})

    assert state.trap_at(4) == trap
    assert state.trap_at(5) is None
    assert state.trap_of(1) == trap
    assert state.trap_of(0) is None


def test_redacted_copy_hides_other_players_game_bets():
    """Test that only the viewer's own game bets stay readable."""
    config = GameConfig(num_camels=3)
    state = GameState.from_layout(
        config,
        {0: [0, 1, 2]},
        game_bets=[
            GameBetRecord(player=0, bet_type=GameBetType.WINNER, camel=1),
            GameBetRecord(player=1, bet_type=GameBetType.LOSER, camel=2),
        ],
    )

    view = state.redacted_copy(0)

    assert view.game_bets[0] == GameBetRecord(0, GameBetType.WINNER, 1)
    assert view.game_bets[1].player == 1
    assert view.game_bets[1].bet_type is None
    assert view.game_bets[1].camel is None

    # The real ledger is untouched
    assert state.game_bets[1] == GameBetRecord(1, GameBetType.LOSER, 2)


def test_redacted_copy_is_independent():
    """Test that changing a view never reaches the real state."""
    config = GameConfig(num_camels=3)
    state = GameState.from_layout(config, {0: [0, 1, 2]})

    view = state.redacted_copy(1)
    view.camels[0].position = 12
    view.players[1].coins = 99
    view.moved_this_round.add(2)

    assert state.camel(0).position == 0
    assert state.players[1].coins == 3
    assert state.moved_this_round == set()


def test_bets_of_lists_round_then_game_bets():
    """Test collecting one player's bets in placement order."""
    config = GameConfig(num_camels=3)
    state = GameState.from_layout(
        config,
        {0: [0, 1, 2]},
        round_bets=[
            RoundBetRecord(player=1, camel=2),
            RoundBetRecord(player=0, camel=1),
            RoundBetRecord(player=1, camel=0),
        ],
        game_bets=[
            GameBetRecord(player=1, bet_type=GameBetType.LOSER, camel=1),
            GameBetRecord(player=0, bet_type=GameBetType.WINNER, camel=2),
        ],
    )

    assert state.bets_of(1) == [
        RoundBetRecord(1, 2),
        RoundBetRecord(1, 0),
        GameBetRecord(1, GameBetType.LOSER, 1),
    ]
    assert state.bets_of(0) == [
        RoundBetRecord(0, 1),
        GameBetRecord(0, GameBetType.WINNER, 2),
    ]


def test_credit_clamps_at_zero():
    """Test the default coin floor."""
    state = GameState.from_layout(GameConfig(num_camels=2), {0: [0, 1]})

    state.credit(0, -5)
    state.credit(1, 2)

    assert state.coins() == [0, 5]


def test_credit_allows_negative_when_configured():
    """Test negative balances when the policy allows them."""
    config = GameConfig(num_camels=2, allow_negative_coins=True)
    state = GameState.from_layout(config, {0: [0, 1]})

    state.credit(0, -5)

    assert state.coins()[0] == -2


def test_config_validation():
    """Test configuration validation catches errors."""
    with pytest.raises(ValueError):
        GameConfig(num_camels=1)
    with pytest.raises(ValueError):
        GameConfig(round_bet_payouts=(3, 3, 1))
    with pytest.raises(ValueError):
        GameConfig(round_bet_payouts=(2, 5))
    with pytest.raises(ValueError):
        GameConfig(game_bet_payouts=(1, 2))
    with pytest.raises(ValueError):
        GameConfig(dice_values=(0, 1))
    with pytest.raises(ValueError):
        GameConfig(game_bets_per_camel=0)

    config = GameConfig(board_size=16, round_bet_payouts=(5, 3, 2))
    assert config.final_cell == 15
    assert config.round_bet_supply == 3


def test_create_starting_state():
    """Test starting state creation with random placement."""
    config = GameConfig()
    state = create_starting_state(config, num_players=4, rng=random.Random(0))

    assert len(state.camels) == 5
    assert state.num_players == 4
    assert state.coins() == [3, 3, 3, 3]
    assert state.current_player == 0
    assert state.round_number == 1
    # Camels start on the cells a die can put them on
    assert all(0 <= c.position <= 2 for c in state.camels)


def test_create_starting_state_without_random_start():
    """Test all camels stacked on cell 0 in id order."""
    config = GameConfig(num_camels=4, random_start=False)
    state = create_starting_state(config, num_players=2, player_names=["a", "b"])

    assert [c.position for c in state.camels] == [0, 0, 0, 0]
    assert [c.stack for c in state.camels] == [0, 1, 2, 3]
    assert [p.name for p in state.players] == ["a", "b"]


def test_create_starting_state_is_reproducible():
    """Test that the same seed gives the same board."""
    config = GameConfig()
    a = create_starting_state(config, 3, rng=random.Random(42))
    b = create_starting_state(config, 3, rng=random.Random(42))

    assert a.camels == b.camels
