"""Grid / occupancy model."""

from __future__ import annotations

from typing import Iterator, Mapping

from goopfield.core.errors import GridBoundsError, InvariantViolation, OccupancyError
from goopfield.core.models import EMPTY, PLAYER, Enemy, Position, Tile


class Grid:
    """2D occupancy grid backed by a flat list.

    Every cell holds one ``Tile``. Out-of-range access is a programming
    fault and raises ``GridBoundsError`` instead of being clamped.
    """

    __slots__ = ("width", "height", "core_size", "min_core_x", "max_core_x", "min_core_y", "max_core_y", "_tiles")

    def __init__(self, width: int, height: int, core_size: int = 4) -> None:
        self.width = width
        self.height = height
        self.core_size = core_size
        self.min_core_x = width // 2 - core_size // 2
        self.max_core_x = width // 2 + core_size // 2 - 1
        self.min_core_y = height // 2 - core_size // 2
        self.max_core_y = height // 2 + core_size // 2 - 1
        self._tiles: list[Tile] = [EMPTY] * (width * height)

    # -- access --

    def _idx(self, pos: Position) -> int:
        if not self.in_bounds(pos):
            raise GridBoundsError(f"{pos} outside {self.width}x{self.height} grid")
        return pos.y * self.width + pos.x

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, pos: Position) -> Tile:
        return self._tiles[self._idx(pos)]

    def set(self, pos: Position, tile: Tile) -> None:
        self._tiles[self._idx(pos)] = tile

    def place(self, pos: Position, tile: Tile) -> None:
        """Set *tile* at *pos*, refusing to overwrite an occupant."""
        idx = self._idx(pos)
        if not self._tiles[idx].is_empty:
            raise OccupancyError(f"{pos} already holds {self._tiles[idx]}")
        self._tiles[idx] = tile

    def clear(self, pos: Position) -> None:
        self._tiles[self._idx(pos)] = EMPTY

    def move(self, src: Position, dst: Position) -> Tile:
        """Relocate the occupant of *src* into the empty cell *dst*."""
        tile = self.get(src)
        self.place(dst, tile)
        self.clear(src)
        return tile

    # -- core zone --

    def is_in_core_zone(self, pos: Position) -> bool:
        return (
            self.min_core_x <= pos.x <= self.max_core_x
            and self.min_core_y <= pos.y <= self.max_core_y
        )

    def core_cells(self) -> Iterator[Position]:
        for x in range(self.min_core_x, self.max_core_x + 1):
            for y in range(self.min_core_y, self.max_core_y + 1):
                yield Position(x, y)

    # -- queries --

    def enemy_cells(self) -> Iterator[tuple[Position, int]]:
        """Yield ``(position, enemy_id)`` for every enemy tile, row-major."""
        for idx, tile in enumerate(self._tiles):
            if tile.is_enemy:
                yield Position(idx % self.width, idx // self.width), tile.enemy_id

    def player_cells(self) -> list[Position]:
        return [
            Position(idx % self.width, idx // self.width)
            for idx, tile in enumerate(self._tiles)
            if tile == PLAYER
        ]

    def validate(self, enemies: Mapping[int, Enemy], player_pos: Position) -> None:
        """Raise ``InvariantViolation`` unless grid and registry agree exactly."""
        players = self.player_cells()
        if players != [player_pos]:
            raise InvariantViolation(f"player expected only at {player_pos}, found at {players}")

        seen: dict[int, Position] = {}
        for pos, eid in self.enemy_cells():
            if eid in seen:
                raise InvariantViolation(f"enemy {eid} occupies both {seen[eid]} and {pos}")
            seen[eid] = pos
            enemy = enemies.get(eid)
            if enemy is None:
                raise InvariantViolation(f"enemy {eid} at {pos} is not registered")
            if enemy.pos != pos:
                raise InvariantViolation(f"enemy {eid} registered at {enemy.pos} but found at {pos}")

        missing = set(enemies) - set(seen)
        if missing:
            raise InvariantViolation(f"registered enemies missing from grid: {sorted(missing)}")

    # -- copy --

    def copy(self) -> Grid:
        new = Grid.__new__(Grid)
        new.width = self.width
        new.height = self.height
        new.core_size = self.core_size
        new.min_core_x = self.min_core_x
        new.max_core_x = self.max_core_x
        new.min_core_y = self.min_core_y
        new.max_core_y = self.max_core_y
        new._tiles = list(self._tiles)
        return new

    def kinds(self) -> list[int]:
        """Row-major tile kinds, for compact serialization."""
        return [int(t.kind) for t in self._tiles]
