"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class Direction(IntEnum):
    """Cardinal directions. Also names the way a spawned enemy travels."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3

    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def offset(self) -> tuple[int, int]:
        """Unit step (dx, dy); UP is towards y = 0."""
        return _OFFSETS[self]

    @property
    def rotation_degrees(self) -> float:
        return _ROTATIONS[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}

_ROTATIONS: dict[Direction, float] = {
    Direction.LEFT: 270.0,
    Direction.RIGHT: 90.0,
    Direction.UP: 0.0,
    Direction.DOWN: 180.0,
}


@unique
class Color(IntEnum):
    """Goop colors. Only equality matters."""

    RED = 0
    GREEN = 1
    BLUE = 2
    PURPLE = 3


@unique
class TileKind(IntEnum):
    """What occupies a grid cell."""

    EMPTY = 0
    PLAYER = 1
    ENEMY = 2


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    SPAWN = 0
    COLOR = 1
    PLAYER = 2
    POLICY = 3
