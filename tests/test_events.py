"""Tests for the_goose.events (event log and rendering)."""

import pytest

from the_goose.events import (
    Bounced,
    EventLog,
    EventSink,
    JumpedToBridgeTarget,
    Moved,
    MovedAgain,
    PlayersListed,
    Pranked,
    ReturnedTo,
    Rolled,
    Won,
    describe,
)


# ── EventLog ─────────────────────────────────────────────────────────

def test_event_log_starts_empty():
    log = EventLog()
    assert len(log) == 0
    assert log == []


def test_event_log_keeps_order():
    log = EventLog()
    log.notify(Rolled("Pippo", 1, 2))
    log.notify(Moved("Pippo", 0, 3))

    assert list(log) == [Rolled("Pippo", 1, 2), Moved("Pippo", 0, 3)]
    assert log[1] == Moved("Pippo", 0, 3)


def test_event_log_equality():
    a, b = EventLog(), EventLog()
    a.notify(Won("Pippo"))
    b.notify(Won("Pippo"))
    assert a == b
    assert a != EventLog()


def test_event_log_is_a_sink():
    assert isinstance(EventLog(), EventSink)


def test_events_are_immutable():
    event = Moved("Pippo", 0, 3)
    with pytest.raises(AttributeError):
        event.to_position = 4


def test_moved_and_moved_again_differ():
    assert Moved("Pippo", 5, 7) != MovedAgain("Pippo", 5, 7)


# ── describe ─────────────────────────────────────────────────────────

def test_describe_players():
    assert describe(PlayersListed(("Pippo", "Pluto"))) == "players: Pippo, Pluto"


def test_describe_roll_and_move_from_start():
    assert describe(Rolled("Pippo", 4, 2)) == "Pippo rolls 4, 2"
    assert describe(Moved("Pippo", 0, 6)) == "Pippo moves from Start to 6"


def test_describe_bridge():
    assert describe(JumpedToBridgeTarget("Pippo", 12)) == "Pippo jumps to 12"


def test_describe_goose():
    assert describe(MovedAgain("Pippo", 5, 7)) == "Pippo moves again and goes to 7"


def test_describe_bounce():
    assert describe(Bounced("Pippo")) == "Pippo bounces!"
    assert describe(ReturnedTo("Pippo", 62)) == "Pippo returns to 62"


def test_describe_prank():
    assert describe(Pranked("Pluto", 17, 15)) == "On 17 there is Pluto, who returns to 15"


def test_describe_win():
    assert describe(Won("Pippo")) == "Pippo Wins!!"


def test_describe_unknown_event():
    with pytest.raises(TypeError):
        describe("not an event")


def test_describe_custom_start_square():
    assert describe(Moved("Pippo", 1, 4), start=1) == "Pippo moves from Start to 4"
    assert describe(Moved("Pippo", 0, 4), start=1) == "Pippo moves from 0 to 4"
    assert describe(Pranked("Pluto", 9, 1), start=1) == "On 9 there is Pluto, who returns to Start"


def test_event_log_indexing():
    log = EventLog()
    log.notify(Won("Pippo"))
    assert log[0] == Won("Pippo")
    assert log[-1] is log.events[-1]
