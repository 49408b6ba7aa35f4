"""Dice sources the engine can draw rolls from."""

from __future__ import annotations

import itertools
import random
from typing import Iterable, Protocol, runtime_checkable

from the_goose.errors import DiceExhausted

FACES = 6


@runtime_checkable
class DiceSource(Protocol):
    def roll(self) -> int: ...


class RandomDice:
    """Fair six-sided die backed by its own seeded generator."""

    def __init__(self, seed: int | None = None, faces: int = FACES):
        self.faces = faces
        self._rng = random.Random(seed)

    def roll(self) -> int:
        return self._rng.randint(1, self.faces)


class ScriptedDice:
    """Plays back a fixed sequence of values, one per roll."""

    def __init__(self, values: Iterable[int]):
        self._values = iter(values)

    def roll(self) -> int:
        try:
            return next(self._values)
        except StopIteration:
            raise DiceExhausted("No more scripted rolls.") from None


class CyclingDice(ScriptedDice):
    """Repeats 1..faces forever, so it never runs out."""

    def __init__(self, faces: int = FACES):
        super().__init__(itertools.cycle(range(1, faces + 1)))
