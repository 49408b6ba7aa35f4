"""CLI entry point: python -m the_goose {play,bench,chart}."""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from the_goose.chart import make_length_chart
from the_goose.dice import CyclingDice, RandomDice
from the_goose.events import describe
from the_goose.simulate import DEFAULT_PLAYERS, GameRunner, bench, play_games


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


# ── play ─────────────────────────────────────────────────────────────

def cmd_play(args: argparse.Namespace) -> None:
    """Play one game and print every event."""
    dice = RandomDice(args.seed) if args.seed is not None else CyclingDice()
    runner = GameRunner(args.players, dice=dice, max_turns=args.max_turns)
    result = runner.play()

    for event in result.events:
        print(describe(event, start=runner.game.board.start))

    if result.winner is None:
        print(f"\nNo winner after {result.turns} turns.")
    else:
        print(f"\n{result.winner} won in {result.turns} turns.")


# ── bench ────────────────────────────────────────────────────────────

def cmd_bench(args: argparse.Namespace) -> None:
    """Time a batch of games."""
    stats = bench(args.games, players=args.players, seed=args.seed)
    print(f"{stats.games} games in {stats.seconds:.3f}s")
    print(f"  {stats.games_per_second:10.1f} games/s")
    print(f"  {stats.mean_turns:10.1f} turns/game")


# ── chart ────────────────────────────────────────────────────────────

def cmd_chart(args: argparse.Namespace) -> None:
    """Chart the distribution of game lengths."""
    if args.games < 1:
        print("Need at least one game.", file=sys.stderr)
        sys.exit(1)

    seed = args.seed if args.seed is not None else 0
    results = play_games(args.games, players=args.players, seed=seed)
    turns = [r.turns for r in results if r.winner is not None]
    if not turns:
        print("No game produced a winner.", file=sys.stderr)
        sys.exit(1)

    out = args.output or "game_lengths.png"
    make_length_chart(turns, output_path=out)
    print(f"Chart saved to {out}")


# ── main ─────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="the_goose",
        description="The Goose rules engine",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    p_play = sub.add_parser("play", help="Play one game and print the events")
    p_play.add_argument("--seed", type=int, help="Dice seed (default: cycle 1..6)")
    p_play.add_argument("--max-turns", type=int, default=1000, help="Max turns per game")
    p_play.add_argument("--players", nargs="+", default=DEFAULT_PLAYERS, help="Player names")

    p_bench = sub.add_parser("bench", help="Time a batch of games")
    p_bench.add_argument("--games", type=int, default=1000, help="Number of games (default 1000)")
    p_bench.add_argument("--seed", type=int, help="Base dice seed (default: cycle 1..6)")
    p_bench.add_argument("--players", nargs="+", default=DEFAULT_PLAYERS, help="Player names")

    p_chart = sub.add_parser("chart", help="Histogram of game lengths")
    p_chart.add_argument("--games", type=int, default=500, help="Number of games (default 500)")
    p_chart.add_argument("--seed", type=int, help="Base dice seed (default 0)")
    p_chart.add_argument("--players", nargs="+", default=DEFAULT_PLAYERS, help="Player names")
    p_chart.add_argument("--output", "-o", help="Output PNG path")

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    if args.command == "play":
        cmd_play(args)
    elif args.command == "bench":
        cmd_bench(args)
    elif args.command == "chart":
        cmd_chart(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
