"""Convergence mover — pushes a lane one cell toward the core, then spawns."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from goopfield.core.enums import Direction, Domain, TileKind
from goopfield.core.events import EnemyMoved, EnemySpawned
from goopfield.core.models import Enemy, Position

if TYPE_CHECKING:
    from goopfield.config import FieldConfig
    from goopfield.core.field_state import FieldState
    from goopfield.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ConvergenceResult:
    moves: list[EnemyMoved] = field(default_factory=list)
    # Cell of the enemy that ran into the player, if any
    contact: Position | None = None


class ConvergenceMover:
    """Shifts every enemy on the active lane one step toward the centre.

    Only the half of the lane on the spawn side is scanned, starting at the
    cell next to the centre line and walking out to the edge. Each enemy
    therefore moves into a cell that has already been vacated, and an enemy
    at the boundary is pushed into the core zone before anything behind it
    moves. Entering the core is not checked here.
    """

    __slots__ = ("_config", "_rng")

    def __init__(self, config: FieldConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    def scan_order(self, direction: Direction, lane: Position) -> list[Position]:
        """Cells of the lane in the order they must be processed."""
        half_w = self._config.grid_width // 2
        half_h = self._config.grid_height // 2

        match direction:
            case Direction.RIGHT:
                return [Position(x, lane.y) for x in range(half_w - 1, -1, -1)]
            case Direction.LEFT:
                return [Position(x, lane.y) for x in range(half_w, self._config.grid_width)]
            case Direction.DOWN:
                return [Position(lane.x, y) for y in range(half_h - 1, -1, -1)]
            case Direction.UP:
                return [Position(lane.x, y) for y in range(half_h, self._config.grid_height)]
        raise ValueError(f"unknown direction {direction!r}")

    def advance(self, state: FieldState, direction: Direction, lane: Position) -> ConvergenceResult:
        result = ConvergenceResult()
        grid = state.grid

        for pos in self.scan_order(direction, lane):
            tile = grid.get(pos)
            if not tile.is_enemy:
                continue
            dst = pos.step(direction)
            if grid.get(dst).kind == TileKind.PLAYER:
                # Reaching the player ends the round; the rest of the lane stays put
                logger.info("Enemy %d reached the player at %s", tile.enemy_id, dst)
                result.contact = pos
                break
            state.move_enemy(tile.enemy_id, dst)
            result.moves.append(EnemyMoved(
                enemy_id=tile.enemy_id, from_pos=pos, to_pos=dst,
                duration=self._config.enemy_move_duration,
            ))

        return result

    def insert(self, state: FieldState, edge: Position) -> EnemySpawned:
        """Create a fresh enemy with a random color at the edge cell."""
        eid = state.allocate_enemy_id()
        color = self._rng.next_color(Domain.COLOR, eid, state.round)
        state.add_enemy(Enemy(id=eid, pos=edge, color=color))
        logger.debug("Enemy %d (%s) spawned at %s", eid, color.name, edge)
        return EnemySpawned(enemy_id=eid, color=color, position=edge)
