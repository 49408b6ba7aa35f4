"""Histogram of game lengths over many simulated games."""

from __future__ import annotations

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt


def make_length_chart(
    turns: list[int],
    output_path: str = "game_lengths.png",
    title: str = "The Goose: turns per game",
) -> str:
    """Create a histogram of turns needed to win.

    Returns the path to the saved PNG.
    """
    if not turns:
        raise ValueError("No games to chart.")

    bins = list(range(min(turns), max(turns) + 2))
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.hist(turns, bins=bins, color="#4A90D9", edgecolor="white")

    mean = sum(turns) / len(turns)
    ax.axvline(mean, color="#D9534F", linestyle="--")
    ax.text(
        mean, ax.get_ylim()[1] * 0.95, f" mean {mean:.1f}",
        color="#D9534F", fontsize=11, fontweight="bold",
    )

    ax.set_xlabel("Turns")
    ax.set_ylabel("Games")
    ax.set_title(title, fontsize=14, fontweight="bold")

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
