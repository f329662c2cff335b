"""Notifications emitted by the engine for the presentation layer.

Events are plain frozen records, emitted in the order the engine mutates
state. The core never holds presentation handles; adapters key their own
handles by ``enemy_id``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Any, ClassVar

from goopfield.core.enums import Color, Direction
from goopfield.core.models import Position


@dataclass(frozen=True, slots=True)
class FieldEvent:
    """Base class; ``kind`` is the wire name used by the API and replays."""

    kind: ClassVar[str] = "event"

    def payload(self) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": self.kind}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Position):
                value = [value.x, value.y]
            elif isinstance(value, IntEnum):
                value = value.name.lower()
            data[f.name] = value
        return data


@dataclass(frozen=True, slots=True)
class EnemySpawned(FieldEvent):
    kind: ClassVar[str] = "enemy_spawned"

    enemy_id: int
    color: Color
    position: Position


@dataclass(frozen=True, slots=True)
class EnemyMoved(FieldEvent):
    kind: ClassVar[str] = "enemy_moved"

    enemy_id: int
    from_pos: Position
    to_pos: Position
    duration: float


@dataclass(frozen=True, slots=True)
class EnemyRemoved(FieldEvent):
    kind: ClassVar[str] = "enemy_removed"

    enemy_id: int


@dataclass(frozen=True, slots=True)
class EnemyColorChanged(FieldEvent):
    kind: ClassVar[str] = "enemy_color_changed"

    enemy_id: int
    color: Color


@dataclass(frozen=True, slots=True)
class PlayerMoved(FieldEvent):
    kind: ClassVar[str] = "player_moved"

    to_pos: Position
    duration: float


@dataclass(frozen=True, slots=True)
class PlayerTurned(FieldEvent):
    kind: ClassVar[str] = "player_turned"

    direction: Direction


@dataclass(frozen=True, slots=True)
class PlayerColorChanged(FieldEvent):
    kind: ClassVar[str] = "player_color_changed"

    color: Color


@dataclass(frozen=True, slots=True)
class PlayerShotTo(FieldEvent):
    kind: ClassVar[str] = "player_shot_to"

    position: Position
    duration: float


@dataclass(frozen=True, slots=True)
class PlayerReturned(FieldEvent):
    kind: ClassVar[str] = "player_returned"

    to_pos: Position
    duration: float


@dataclass(frozen=True, slots=True)
class FieldReset(FieldEvent):
    """The round was lost; every previously announced enemy is gone."""

    kind: ClassVar[str] = "field_reset"

    round: int
