"""Match resolver — line-of-sight chain elimination and color swap."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from goopfield.core.enums import Direction
from goopfield.core.events import EnemyColorChanged, EnemyRemoved, FieldEvent, PlayerColorChanged
from goopfield.core.models import Position

if TYPE_CHECKING:
    from goopfield.core.field_state import FieldState

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ShotResult:
    eliminated: int
    target: Position
    events: list[FieldEvent] = field(default_factory=list)


class MatchResolver:
    """Resolves one shot from the player's cell in the facing direction."""

    __slots__ = ()

    def find_enemy(self, state: FieldState, origin: Position, direction: Direction) -> tuple[int, Position] | None:
        """Nearest enemy strictly beyond *origin*, or None at the grid border."""
        grid = state.grid
        pos = origin.step(direction)
        while grid.in_bounds(pos):
            tile = grid.get(pos)
            if tile.is_enemy:
                return tile.enemy_id, pos
            pos = pos.step(direction)
        return None

    def resolve(self, state: FieldState) -> ShotResult:
        player = state.player
        origin = player.pos
        result = ShotResult(eliminated=0, target=origin)

        while (hit := self.find_enemy(state, origin, player.direction)) is not None:
            enemy_id, enemy_pos = hit
            enemy = state.get_enemy(enemy_id)
            # Later scans resume from here
            origin = enemy_pos
            result.target = enemy_pos

            if enemy.color == player.color:
                state.remove_enemy(enemy_id)
                result.eliminated += 1
                result.events.append(EnemyRemoved(enemy_id=enemy_id))
                continue

            player.color, enemy.color = enemy.color, player.color
            result.events.append(PlayerColorChanged(color=player.color))
            result.events.append(EnemyColorChanged(enemy_id=enemy_id, color=enemy.color))
            logger.debug("Color swap with enemy %d at %s", enemy_id, enemy_pos)
            break

        return result
