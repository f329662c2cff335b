"""Difficulty controller — kill count drives the spawn interval."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class SpawnTimer(Protocol):
    """Anything that accepts the interval multiplier pushed after each batch."""

    def set_interval_multiplier(self, multiplier: float) -> None: ...


class DifficultyController:
    """Tracks lifetime eliminations and derives the spawn-interval multiplier.

    Every ``step`` lifetime eliminations the interval is multiplied by a
    further ``factor``; there is no floor.
    """

    __slots__ = ("_step", "_factor", "_timer", "_total", "_multiplier")

    def __init__(self, timer: SpawnTimer, step: int = 20, factor: float = 0.9) -> None:
        self._step = step
        self._factor = factor
        self._timer = timer
        self._total = 0
        self._multiplier = 1.0

    @property
    def total_eliminations(self) -> int:
        return self._total

    @property
    def multiplier(self) -> float:
        return self._multiplier

    def multiplier_for(self, total: int) -> float:
        return self._factor ** (total // self._step)

    def record(self, eliminated: int) -> float:
        """Add one batch, push the new multiplier to the timer, and return it."""
        if eliminated < 0:
            raise ValueError(f"negative elimination count: {eliminated}")
        self._total += eliminated
        new = self.multiplier_for(self._total)
        if new != self._multiplier:
            logger.info("Difficulty up: %d eliminations, interval x%.4f", self._total, new)
        self._multiplier = new
        self._timer.set_interval_multiplier(new)
        return new

    def reset(self) -> None:
        self._total = 0
        self._multiplier = 1.0
        self._timer.set_interval_multiplier(1.0)


class ManualSpawnTimer:
    """Spawn timer that only remembers the last multiplier.

    Used where the caller drives spawn ticks itself (tests, headless runs).
    """

    __slots__ = ("base_interval", "interval_multiplier")

    def __init__(self, base_interval: float = 1.0) -> None:
        self.base_interval = base_interval
        self.interval_multiplier = 1.0

    @property
    def interval(self) -> float:
        return self.base_interval * self.interval_multiplier

    def set_interval_multiplier(self, multiplier: float) -> None:
        self.interval_multiplier = multiplier
