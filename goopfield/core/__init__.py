"""Core data models and field representation."""

from goopfield.core.enums import Color, Direction, Domain, TileKind
from goopfield.core.models import EMPTY, PLAYER, Enemy, Player, Position, Tile
from goopfield.core.grid import Grid
from goopfield.core.field_state import FieldState
from goopfield.core.snapshot import Snapshot

__all__ = [
    "Color",
    "Direction",
    "Domain",
    "EMPTY",
    "Enemy",
    "FieldState",
    "Grid",
    "PLAYER",
    "Player",
    "Position",
    "Snapshot",
    "Tile",
    "TileKind",
]
