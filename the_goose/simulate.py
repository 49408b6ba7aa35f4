"""Game runner: plays full games by issuing RollAndMove round-robin."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Hashable

from loguru import logger

from the_goose.dice import CyclingDice, DiceSource, RandomDice
from the_goose.events import Event, Won
from the_goose.game import Add, RollAndMove, TheGoose


DEFAULT_PLAYERS = ["Pippo", "Pluto", "Paperino"]


@dataclass
class GameResult:
    winner: Hashable | None  # None when max_turns ran out
    turns: int = 0
    events: list[Event] = field(default_factory=list)


class GameRunner:
    """Play one full game between *players* in the given order."""

    def __init__(
        self,
        players: list[Hashable],
        game: TheGoose | None = None,
        dice: DiceSource | None = None,
        max_turns: int = 1000,
    ):
        assert len(players) >= 1
        if game is not None and dice is not None:
            raise ValueError("Give dice to the game or to the runner, not both.")
        self.players = players
        self.game = game or TheGoose(dice=dice)
        self.max_turns = max_turns

    def play(self) -> GameResult:
        result = GameResult(winner=None)
        for player in self.players:
            result.events.extend(self.game.execute(Add(player)))

        while result.turns < self.max_turns:
            for player in self.players:
                turn_events = list(self.game.execute(RollAndMove(player)))
                result.events.extend(turn_events)
                result.turns += 1

                if any(isinstance(e, Won) for e in turn_events):
                    result.winner = player
                    return result

                if result.turns >= self.max_turns:
                    break

        logger.warning(f"No winner after {result.turns} turns")
        return result


def play_games(
    n: int,
    players: list[Hashable] | None = None,
    seed: int | None = None,
    max_turns: int = 1000,
) -> list[GameResult]:
    """Play *n* games. With a seed each game gets seed + i, else dice cycle 1..6."""
    players = players or DEFAULT_PLAYERS
    results = []
    for i in range(n):
        dice = RandomDice(seed + i) if seed is not None else CyclingDice()
        results.append(GameRunner(players, dice=dice, max_turns=max_turns).play())
    return results


@dataclass
class BenchStats:
    games: int
    seconds: float
    mean_turns: float

    @property
    def games_per_second(self) -> float:
        return self.games / self.seconds if self.seconds else float("inf")


def bench(
    n: int,
    players: list[Hashable] | None = None,
    seed: int | None = None,
) -> BenchStats:
    t0 = time.perf_counter()
    results = play_games(n, players=players, seed=seed)
    elapsed = time.perf_counter() - t0
    mean_turns = sum(r.turns for r in results) / len(results) if results else 0.0
    return BenchStats(games=n, seconds=elapsed, mean_turns=mean_turns)
