"""Spawn selector — picks the edge and lane for the next enemy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from goopfield.core.enums import Direction, Domain
from goopfield.core.errors import NoSpawnCandidateError
from goopfield.core.models import Position

if TYPE_CHECKING:
    from goopfield.core.grid import Grid
    from goopfield.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

Candidate = tuple[Direction, Position]


class SpawnSelector:
    """Chooses ``(direction, edge position)`` for a spawn tick.

    The direction is the way the new enemy will travel, so DOWN spawns on
    the top row. Candidates are only the lanes crossing the core zone, and
    the previous spawn direction is never repeated.

    The draw is one flat uniform pick over every (direction, lane) pair, not
    a direction first and a lane second. A direction with more lanes gets
    proportionally more weight.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: DeterministicRNG) -> None:
        self._rng = rng

    def candidates(self, grid: Grid, exclude: Direction | None) -> list[Candidate]:
        xs = range(grid.min_core_x, grid.max_core_x + 1)
        ys = range(grid.min_core_y, grid.max_core_y + 1)
        result: list[Candidate] = []

        if exclude != Direction.DOWN:
            result.extend((Direction.DOWN, Position(x, 0)) for x in xs)
        if exclude != Direction.UP:
            result.extend((Direction.UP, Position(x, grid.height - 1)) for x in xs)
        if exclude != Direction.RIGHT:
            result.extend((Direction.RIGHT, Position(0, y)) for y in ys)
        if exclude != Direction.LEFT:
            result.extend((Direction.LEFT, Position(grid.width - 1, y)) for y in ys)

        return result

    def choose(self, grid: Grid, exclude: Direction | None, spawn_index: int, round: int = 0) -> Candidate:
        options = self.candidates(grid, exclude)
        if not options:
            raise NoSpawnCandidateError(f"no spawn lanes left after excluding {exclude!r}")
        direction, pos = self._rng.choice(options, Domain.SPAWN, spawn_index, round)
        logger.debug("Spawn %d: %s at %s (%d candidates)", spawn_index, direction.name, pos, len(options))
        return direction, pos
