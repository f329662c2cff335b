"""Metadata endpoints — enum definitions so clients hardcode no names."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from goopfield.core.enums import Color, Direction, TileKind
from goopfield.core.events import FieldEvent

router = APIRouter(prefix="/metadata")


class EnumEntry(BaseModel):
    id: int
    name: str


class DirectionEntry(EnumEntry):
    dx: int
    dy: int
    rotation: float


class EnumsResponse(BaseModel):
    colors: list[EnumEntry]
    directions: list[DirectionEntry]
    tile_kinds: list[EnumEntry]
    event_kinds: list[str]


def _event_kinds() -> list[str]:
    kinds: list[str] = []
    pending = list(FieldEvent.__subclasses__())
    while pending:
        cls = pending.pop(0)
        kinds.append(cls.kind)
        pending.extend(cls.__subclasses__())
    return sorted(kinds)


@router.get("/enums", response_model=EnumsResponse)
def get_enums() -> EnumsResponse:
    """Colors, directions (with grid offsets), tile kinds and event wire names."""
    return EnumsResponse(
        colors=[EnumEntry(id=c.value, name=c.name.lower()) for c in Color],
        directions=[
            DirectionEntry(
                id=d.value,
                name=d.name.lower(),
                dx=d.offset[0],
                dy=d.offset[1],
                rotation=d.rotation_degrees,
            )
            for d in Direction
        ],
        tile_kinds=[EnumEntry(id=k.value, name=k.name.lower()) for k in TileKind],
        event_kinds=_event_kinds(),
    )
