"""Core data models: Position, Tile, Enemy, Player."""

from __future__ import annotations

from dataclasses import dataclass

from goopfield.core.enums import Color, Direction, TileKind


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable 2D integer grid coordinate."""

    x: int = 0
    y: int = 0

    def step(self, direction: Direction) -> Position:
        dx, dy = direction.offset
        return Position(self.x + dx, self.y + dy)

    def to_screen(self, cell_size: int = 16) -> tuple[float, float]:
        """Centre of the cell in presentation coordinates."""
        half = cell_size / 2
        return (self.x * cell_size + half, self.y * cell_size + half)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class Tile:
    """Occupancy tag of a single cell."""

    kind: TileKind = TileKind.EMPTY
    enemy_id: int | None = None

    @classmethod
    def enemy(cls, enemy_id: int) -> Tile:
        return cls(TileKind.ENEMY, enemy_id)

    @property
    def is_empty(self) -> bool:
        return self.kind == TileKind.EMPTY

    @property
    def is_enemy(self) -> bool:
        return self.kind == TileKind.ENEMY


EMPTY = Tile()
PLAYER = Tile(TileKind.PLAYER)


@dataclass(slots=True)
class Enemy:
    """A goop. Identity is the id; position and color are mutable."""

    id: int
    pos: Position
    color: Color

    def copy(self) -> Enemy:
        return Enemy(id=self.id, pos=self.pos, color=self.color)


@dataclass(slots=True)
class Player:
    """The single player avatar.

    ``is_moving`` and ``is_shooting`` are busy flags: while either is set the
    engine rejects new move and shoot commands. They are cleared only by the
    presentation layer's completion acknowledgements.
    """

    pos: Position
    color: Color
    direction: Direction = Direction.UP
    is_moving: bool = False
    is_shooting: bool = False

    @property
    def busy(self) -> bool:
        return self.is_moving or self.is_shooting

    def copy(self) -> Player:
        return Player(
            pos=self.pos, color=self.color, direction=self.direction,
            is_moving=self.is_moving, is_shooting=self.is_shooting,
        )
