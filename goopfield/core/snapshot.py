"""Immutable snapshot of the field, safe to hand to the API thread."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from goopfield.core.enums import Direction
from goopfield.core.field_state import FieldState
from goopfield.core.grid import Grid
from goopfield.core.models import Enemy, Player


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view of one moment of play.

    Enemies and player are copied and the enemy dict is wrapped in a
    MappingProxyType, so readers cannot reach back into live state.
    """

    round: int
    spawn_count: int
    score: int
    total_eliminations: int
    interval_multiplier: float
    last_direction: Direction | None
    player: Player
    enemies: Mapping[int, Enemy]
    grid: Grid

    @classmethod
    def from_state(
        cls,
        state: FieldState,
        *,
        spawn_count: int,
        score: int,
        total_eliminations: int,
        interval_multiplier: float,
    ) -> Snapshot:
        return cls(
            round=state.round,
            spawn_count=spawn_count,
            score=score,
            total_eliminations=total_eliminations,
            interval_multiplier=interval_multiplier,
            last_direction=state.last_direction,
            player=state.player.copy(),
            enemies=MappingProxyType({eid: e.copy() for eid, e in state.enemies.items()}),
            grid=state.grid.copy(),
        )
