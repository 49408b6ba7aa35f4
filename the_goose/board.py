"""Track constants and movement arithmetic for The Goose."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from the_goose.errors import InvalidDistance

# fmt: off
START_SQUARE = 0
END_SQUARE = 63
BRIDGE_SQUARE = 6
BRIDGE_TARGET = 12
GOOSE_SQUARES: frozenset[int] = frozenset({5, 9, 14, 18, 23, 27})
# fmt: on


class SquareType(enum.Enum):
    BRIDGE = "bridge"
    GOOSE = "goose"
    NORMAL = "normal"
    END = "end"


@dataclass(frozen=True)
class Landed:
    """The move stopped inside the track."""

    position: int


@dataclass(frozen=True)
class Bounced:
    """The move overshot the end and came back.

    *touched* is the end square the pawn hit, *position* where it rests.
    """

    position: int
    touched: int


Advance = Landed | Bounced


@dataclass(frozen=True)
class Board:
    """Fixed layout of a linear track from ``start`` to ``end``."""

    end: int = END_SQUARE
    bridge: int = BRIDGE_SQUARE
    bridge_target: int = BRIDGE_TARGET
    goose_squares: frozenset[int] = GOOSE_SQUARES
    start: int = START_SQUARE

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError(f"End square {self.end} must come after start {self.start}.")
        # Accept any iterable of squares, store it frozen
        object.__setattr__(self, "goose_squares", frozenset(self.goose_squares))
        for sq in (self.bridge, self.bridge_target, *self.goose_squares):
            if not self.start <= sq <= self.end:
                raise ValueError(f"Square {sq} is outside the track {self.start}..{self.end}.")
        if self.bridge in self.goose_squares:
            raise ValueError(f"Square {self.bridge} cannot be both bridge and goose.")
        if self.end in self.goose_squares or self.end == self.bridge:
            raise ValueError(f"End square {self.end} cannot be a special square.")

    @property
    def max_hops(self) -> int:
        """Upper bound on hops in one move chain."""
        return len(self.goose_squares) + 1

    def advance(self, position: int, distance: int) -> Advance:
        """Move *distance* squares forward from *position*.

        Overshooting the end reflects the pawn back:
          resting = end * 2 - position - distance + 1
        Raises InvalidDistance when the reflection would leave the track.
        """
        if distance < 0:
            raise InvalidDistance(position, distance)
        target = position + distance
        if target > self.end:
            resting = self.end * 2 - position - distance + 1
            if resting < self.start:
                raise InvalidDistance(position, distance)
            return Bounced(position=resting, touched=self.end)
        return Landed(position=target)

    def classify(self, position: int) -> SquareType:
        if position == self.bridge:
            return SquareType.BRIDGE
        if position in self.goose_squares:
            return SquareType.GOOSE
        if position == self.end:
            return SquareType.END
        return SquareType.NORMAL


DEFAULT_BOARD = Board()
