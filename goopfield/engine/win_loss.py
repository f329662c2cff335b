"""Win/loss evaluator."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from goopfield.core.grid import Grid


class WinLossEvaluator:
    """The round is lost once any enemy stands in the core zone or touches the player."""

    __slots__ = ()

    def is_lost(self, grid: Grid, contact: bool = False) -> bool:
        if contact:
            return True
        return any(grid.get(pos).is_enemy for pos in grid.core_cells())
