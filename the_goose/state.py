"""Player-state interface, the default dict-backed store, and a staging overlay."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Protocol, runtime_checkable


# ── State interface ──────────────────────────────────────────────────

@runtime_checkable
class PlayerState(Protocol):
    """Structural interface: any object with these methods works.

    Missing players are reported as ``None`` / empty lists, never as errors.
    Any exception raised here is treated as a host failure by the engine.
    """

    def get_position(self, player: Hashable) -> int | None: ...

    def add_player(self, player: Hashable, position: int) -> None: ...

    def remove_player(self, player: Hashable) -> None: ...

    def find_players_at(self, position: int) -> list: ...

    def players(self) -> list: ...

    def set_position(self, player: Hashable, position: int) -> None: ...


# ── Dict-backed store ────────────────────────────────────────────────

@dataclass
class DictState:
    """Default store. Roster order is insertion order."""

    positions: dict[Any, int] = field(default_factory=dict)

    def get_position(self, player: Hashable) -> int | None:
        return self.positions.get(player)

    def add_player(self, player: Hashable, position: int) -> None:
        self.positions[player] = position

    def remove_player(self, player: Hashable) -> None:
        self.positions.pop(player, None)

    def find_players_at(self, position: int) -> list:
        return [p for p, pos in self.positions.items() if pos == position]

    def players(self) -> list:
        return list(self.positions)

    def set_position(self, player: Hashable, position: int) -> None:
        # Unknown players are ignored, like a missing key on update
        if player in self.positions:
            self.positions[player] = position


# ── Staging overlay ──────────────────────────────────────────────────

class StagedState:
    """Buffers position writes on top of *base* until commit().

    Reads see the staged writes. Roster changes (add/remove) are staged too
    and replayed in order on commit.
    """

    def __init__(self, base: PlayerState):
        self.base = base
        self._ops: list[tuple[str, Any, int | None]] = []
        self._positions: dict[Any, int | None] = {}
        self._added: list[Any] = []

    def get_position(self, player: Hashable) -> int | None:
        if player in self._positions:
            return self._positions[player]
        return self.base.get_position(player)

    def add_player(self, player: Hashable, position: int) -> None:
        self._ops.append(("add", player, position))
        self._positions[player] = position
        if player not in self._added:
            self._added.append(player)

    def remove_player(self, player: Hashable) -> None:
        self._ops.append(("remove", player, None))
        self._positions[player] = None
        if player in self._added:
            self._added.remove(player)

    def find_players_at(self, position: int) -> list:
        found = set(self.base.find_players_at(position))
        return [
            p for p in self.players()
            if (self._positions[p] == position if p in self._positions else p in found)
        ]

    def players(self) -> list:
        roster = [
            p for p in self.base.players()
            if p not in self._positions or self._positions[p] is not None
        ]
        roster.extend(p for p in self._added if p not in roster)
        return roster

    def set_position(self, player: Hashable, position: int) -> None:
        if self.get_position(player) is None:
            return
        self._ops.append(("set", player, position))
        self._positions[player] = position

    def commit(self) -> None:
        """Replay the staged writes on the base store, in order.

        If a write fails, every touched player is put back where the base
        store had it before the replay, then the error propagates.
        """
        snapshot = {}
        for _, player, _ in self._ops:
            if player not in snapshot:
                snapshot[player] = self.base.get_position(player)
        try:
            for op, player, position in self._ops:
                if op == "add":
                    self.base.add_player(player, position)
                elif op == "remove":
                    self.base.remove_player(player)
                else:
                    self.base.set_position(player, position)
        except Exception:
            self._restore(snapshot)
            raise
        finally:
            self.rollback()

    def _restore(self, snapshot: dict[Any, int | None]) -> None:
        for player, position in snapshot.items():
            if position is None:
                self.base.remove_player(player)
            elif self.base.get_position(player) is None:
                self.base.add_player(player, position)
            else:
                self.base.set_position(player, position)

    def rollback(self) -> None:
        self._ops.clear()
        self._positions.clear()
        self._added.clear()
