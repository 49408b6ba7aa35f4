"""Tests for the_goose.state (dict store and staging overlay)."""

from the_goose.state import DictState, PlayerState, StagedState


# ── DictState ────────────────────────────────────────────────────────

def test_dict_state_is_a_player_state():
    assert isinstance(DictState(), PlayerState)
    assert isinstance(StagedState(DictState()), PlayerState)


def test_roster_keeps_insertion_order():
    state = DictState()
    for name in ["Pluto", "Pippo", "Paperino"]:
        state.add_player(name, 0)
    assert state.players() == ["Pluto", "Pippo", "Paperino"]


def test_missing_player_has_no_position():
    assert DictState().get_position("Pippo") is None


def test_find_players_at():
    state = DictState(positions={"Pippo": 5, "Pluto": 7, "Paperino": 5})
    assert state.find_players_at(5) == ["Pippo", "Paperino"]
    assert state.find_players_at(9) == []


def test_set_position_ignores_unknown_player():
    state = DictState()
    state.set_position("Pippo", 10)
    assert state.players() == []


def test_remove_missing_player_is_noop():
    state = DictState(positions={"Pippo": 5})
    state.remove_player("Pluto")
    assert state.players() == ["Pippo"]


# ── StagedState ──────────────────────────────────────────────────────

def test_staged_writes_are_invisible_to_base():
    base = DictState(positions={"Pippo": 5})
    staged = StagedState(base)

    staged.set_position("Pippo", 9)

    assert staged.get_position("Pippo") == 9
    assert base.get_position("Pippo") == 5


def test_staged_commit_applies_writes():
    base = DictState(positions={"Pippo": 5, "Pluto": 9})
    staged = StagedState(base)

    staged.set_position("Pippo", 9)
    staged.set_position("Pluto", 5)
    staged.add_player("Paperino", 0)
    staged.commit()

    assert base.positions == {"Pippo": 9, "Pluto": 5, "Paperino": 0}


def test_staged_rollback_discards_writes():
    base = DictState(positions={"Pippo": 5})
    staged = StagedState(base)

    staged.set_position("Pippo", 9)
    staged.rollback()
    staged.commit()

    assert base.positions == {"Pippo": 5}


def test_staged_find_players_sees_pending_moves():
    base = DictState(positions={"Pippo": 5, "Pluto": 9})
    staged = StagedState(base)

    staged.set_position("Pippo", 9)

    assert staged.find_players_at(9) == ["Pippo", "Pluto"]
    assert staged.find_players_at(5) == []


def test_staged_remove_hides_player():
    base = DictState(positions={"Pippo": 5, "Pluto": 9})
    staged = StagedState(base)

    staged.remove_player("Pippo")

    assert staged.players() == ["Pluto"]
    assert staged.get_position("Pippo") is None
    assert staged.find_players_at(5) == []


def test_staged_set_position_ignores_unknown_player():
    staged = StagedState(DictState())
    staged.set_position("Pippo", 3)
    assert staged.get_position("Pippo") is None
