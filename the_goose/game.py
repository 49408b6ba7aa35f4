"""Command dispatch and move resolution for The Goose."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterator

from loguru import logger

from the_goose import events as ev
from the_goose.board import DEFAULT_BOARD, Board, Bounced, SquareType
from the_goose.dice import DiceSource, RandomDice
from the_goose.errors import (
    DuplicatePlayer,
    GooseError,
    MoveChainError,
    PlayerNotFound,
    StateFailure,
)
from the_goose.events import EventSink, EventLog
from the_goose.state import DictState, PlayerState, StagedState


# ── Commands ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Add:
    player: Any


@dataclass(frozen=True)
class Remove:
    player: Any


@dataclass(frozen=True)
class Move:
    player: Any
    roll_a: int
    roll_b: int


@dataclass(frozen=True)
class RollAndMove:
    player: Any


Command = Add | Remove | Move | RollAndMove


@contextmanager
def _host_call() -> Iterator[None]:
    """Wrap anything the player state raises into StateFailure."""
    try:
        yield
    except GooseError:
        raise
    except Exception as exc:
        raise StateFailure(exc) from exc


# ── Engine ───────────────────────────────────────────────────────────

class TheGoose:
    """One game: a roster of players and their squares.

    Turn order is up to the host.
    Not thread-safe; serialize calls per instance.

    With *transactional* set, every command works on a staged copy of the
    state and commits only if it completes. Otherwise a failure midway
    through a goose chain leaves the positions written so far in place.
    """

    def __init__(
        self,
        state: PlayerState | None = None,
        dice: DiceSource | None = None,
        board: Board = DEFAULT_BOARD,
        events_factory: Callable[[], EventSink] = EventLog,
        transactional: bool = False,
    ):
        self.state = state if state is not None else DictState()
        self.dice = dice if dice is not None else RandomDice()
        self.board = board
        self.events_factory = events_factory
        self.transactional = transactional

    def execute(self, command: Command) -> EventSink:
        """Run one command and return the events it produced."""
        logger.debug(f"execute {command}")
        if not self.transactional:
            return self._dispatch(self.state, command)

        staged = StagedState(self.state)
        events = self._dispatch(staged, command)
        with _host_call():
            staged.commit()
        return events

    def _dispatch(self, state: PlayerState, command: Command) -> EventSink:
        if isinstance(command, Add):
            self._add_player(state, command.player)
            return self._roster(state)
        if isinstance(command, Remove):
            with _host_call():
                state.remove_player(command.player)
            return self._roster(state)
        if isinstance(command, Move):
            return self._move_player(state, command.player, command.roll_a, command.roll_b)
        if isinstance(command, RollAndMove):
            roll_a, roll_b = self.dice.roll(), self.dice.roll()
            return self._move_player(state, command.player, roll_a, roll_b)
        raise TypeError(f"Unknown command: {command!r}")

    # ── Public shortcuts ──

    def add_player(self, player: Hashable) -> EventSink:
        return self.execute(Add(player))

    def remove_player(self, player: Hashable) -> EventSink:
        return self.execute(Remove(player))

    def move_player(self, player: Hashable, roll_a: int, roll_b: int) -> EventSink:
        return self.execute(Move(player, roll_a, roll_b))

    def roll_and_move_player(self, player: Hashable) -> EventSink:
        return self.execute(RollAndMove(player))

    # ── Internals ──

    def _add_player(self, state: PlayerState, player: Hashable) -> None:
        with _host_call():
            if state.get_position(player) is not None:
                raise DuplicatePlayer(player)
            state.add_player(player, self.board.start)

    def _roster(self, state: PlayerState) -> EventSink:
        events = self.events_factory()
        with _host_call():
            roster = tuple(state.players())
        self._notify(events, ev.PlayersListed(roster))
        return events

    def _notify(self, events: EventSink, event: ev.Event) -> None:
        # Sink failures are best-effort: they never abort a command
        try:
            events.notify(event)
        except Exception as exc:
            logger.warning(f"Event sink rejected {event!r}: {exc}")

    def _move_player(
        self, state: PlayerState, player: Hashable, roll_a: int, roll_b: int,
    ) -> EventSink:
        """Resolve a full move chain for *player* rolling *roll_a* + *roll_b*."""
        board = self.board
        with _host_call():
            initial_position = state.get_position(player)
        if initial_position is None:
            raise PlayerNotFound(player)

        events = self.events_factory()
        self._notify(events, ev.Rolled(player, roll_a, roll_b))

        # Same distance for every hop of the chain
        distance = roll_a + roll_b
        start_position = initial_position
        again = False

        for _ in range(board.max_hops):
            moved = ev.MovedAgain if again else ev.Moved
            step = board.advance(start_position, distance)
            if isinstance(step, Bounced):
                self._notify(events, moved(player, start_position, step.touched))
                self._notify(events, ev.Bounced(player))
                self._notify(events, ev.ReturnedTo(player, step.position))
            else:
                self._notify(events, moved(player, start_position, step.position))
            end_position = step.position
            logger.debug(f"{player} hop {start_position} -> {end_position}")

            with _host_call():
                occupants = [
                    p for p in state.find_players_at(end_position) if p != player
                ]
                state.set_position(player, end_position)
                for occupant in occupants:
                    self._notify(events, ev.Pranked(occupant, end_position, initial_position))
                    state.set_position(occupant, initial_position)

            start_position = end_position
            square = board.classify(end_position)

            if square is SquareType.BRIDGE:
                start_position = board.bridge_target
                with _host_call():
                    state.set_position(player, start_position)
                self._notify(events, ev.JumpedToBridgeTarget(player, start_position))
                return events
            if square is SquareType.NORMAL:
                return events
            if square is SquareType.END:
                self._notify(events, ev.Won(player))
                logger.info(f"{player} wins")
                return events

            again = True

        raise MoveChainError(
            f"Move chain for {player!r} exceeded {board.max_hops} hops; "
            "check the board's goose squares."
        )
