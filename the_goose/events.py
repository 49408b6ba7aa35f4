"""Events emitted by the engine and the default list-backed sink."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Protocol, runtime_checkable


# ── Events ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PlayersListed:
    players: tuple[Any, ...]


@dataclass(frozen=True)
class Rolled:
    player: Any
    roll_a: int
    roll_b: int


@dataclass(frozen=True)
class Moved:
    player: Any
    from_position: int
    to_position: int


@dataclass(frozen=True)
class MovedAgain:
    """A further hop granted by a goose square."""

    player: Any
    from_position: int
    to_position: int


@dataclass(frozen=True)
class Bounced:
    player: Any


@dataclass(frozen=True)
class ReturnedTo:
    player: Any
    position: int


@dataclass(frozen=True)
class Pranked:
    """*player* was standing on *from_position* and got sent to *to_position*."""

    player: Any
    from_position: int
    to_position: int


@dataclass(frozen=True)
class JumpedToBridgeTarget:
    player: Any
    position: int


@dataclass(frozen=True)
class Won:
    player: Any


Event = (
    PlayersListed | Rolled | Moved | MovedAgain | Bounced
    | ReturnedTo | Pranked | JumpedToBridgeTarget | Won
)


# ── Sink interface ───────────────────────────────────────────────────

@runtime_checkable
class EventSink(Protocol):
    """Structural interface: any zero-arg constructible object with notify()."""

    def notify(self, event: Event) -> None: ...


@dataclass
class EventLog:
    """Default sink, collects events into a list."""

    events: list[Event] = field(default_factory=list)

    def notify(self, event: Event) -> None:
        self.events.append(event)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.events)

    def __len__(self) -> int:
        return len(self.events)

    def __getitem__(self, idx: int) -> Event:
        return self.events[idx]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EventLog):
            return self.events == other.events
        if isinstance(other, list):
            return self.events == other
        return NotImplemented


# ── Rendering ────────────────────────────────────────────────────────

def _square(position: int, start: int) -> str:
    return "Start" if position == start else str(position)


def describe(event: Event, start: int = 0) -> str:
    """Human-readable line for a single event.

    *start* is the board's start square, shown as "Start".
    """
    if isinstance(event, PlayersListed):
        return "players: " + ", ".join(str(p) for p in event.players)
    if isinstance(event, Rolled):
        return f"{event.player} rolls {event.roll_a}, {event.roll_b}"
    if isinstance(event, Moved):
        return (
            f"{event.player} moves from {_square(event.from_position, start)}"
            f" to {_square(event.to_position, start)}"
        )
    if isinstance(event, MovedAgain):
        return f"{event.player} moves again and goes to {_square(event.to_position, start)}"
    if isinstance(event, Bounced):
        return f"{event.player} bounces!"
    if isinstance(event, ReturnedTo):
        return f"{event.player} returns to {_square(event.position, start)}"
    if isinstance(event, Pranked):
        return (
            f"On {_square(event.from_position, start)} there is {event.player},"
            f" who returns to {_square(event.to_position, start)}"
        )
    if isinstance(event, JumpedToBridgeTarget):
        return f"{event.player} jumps to {_square(event.position, start)}"
    if isinstance(event, Won):
        return f"{event.player} Wins!!"
    raise TypeError(f"Unknown event: {event!r}")
