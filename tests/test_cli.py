"""Tests for the command-line entry point."""

from the_goose.__main__ import main


def test_play_prints_events(capsys):
    main(["play", "--seed", "5", "--players", "Pippo", "Pluto"])

    out = capsys.readouterr().out
    assert out.startswith("players: Pippo\nplayers: Pippo, Pluto\n")
    assert "Pippo rolls" in out
    assert "won in" in out or "No winner" in out


def test_bench_prints_throughput(capsys):
    main(["bench", "--games", "3", "--seed", "1"])

    out = capsys.readouterr().out
    assert out.startswith("3 games in")
    assert "games/s" in out
    assert "turns/game" in out


def test_chart_saves_png(tmp_path, capsys):
    out = tmp_path / "chart.png"
    main(["chart", "--games", "5", "--seed", "2", "--output", str(out)])

    assert out.exists()
    assert f"Chart saved to {out}" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    main([])
    assert "usage: the_goose" in capsys.readouterr().out


def test_play_labels_start_square(capsys):
    main(["play", "--players", "Pippo"])

    # Cycling dice: first roll is 1 + 2 from the start square
    assert "Pippo moves from Start to 3" in capsys.readouterr().out
