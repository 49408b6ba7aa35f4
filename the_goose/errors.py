"""Exceptions raised by the engine."""

from __future__ import annotations

from typing import Any


class GooseError(Exception):
    """Base class for every error the engine raises."""


class DuplicatePlayer(GooseError):
    def __init__(self, player: Any):
        super().__init__(f"Player {player!r} is already in the game.")
        self.player = player


class PlayerNotFound(GooseError):
    def __init__(self, player: Any):
        super().__init__(f"Player {player!r} is not in the game.")
        self.player = player


class StateFailure(GooseError):
    """The host's player state raised; the original is kept in *inner*."""

    def __init__(self, inner: BaseException):
        super().__init__(f"Player state failed: {inner}")
        self.inner = inner


class InvalidDistance(GooseError, ValueError):
    def __init__(self, position: int, distance: int):
        super().__init__(
            f"Cannot move {distance} squares from {position}: the pawn would leave the track."
        )
        self.position = position
        self.distance = distance


class MoveChainError(GooseError, RuntimeError):
    """A move chain ran past the hop limit implied by the board."""


class DiceExhausted(GooseError):
    """A scripted dice source ran out of values."""
