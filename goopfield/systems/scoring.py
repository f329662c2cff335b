"""Scoreboard — the default score collaborator."""

from __future__ import annotations

from typing import Protocol


class ScoreKeeper(Protocol):
    """Receives the exact elimination count of every successful shot."""

    @property
    def points(self) -> int: ...

    def add_points(self, eliminated: int) -> None: ...

    def reset(self) -> None: ...


class Scoreboard:
    """Multi-kill bonus scoring: the i-th kill of one shot is worth ``i * points_per_rank``."""

    __slots__ = ("_points_per_rank", "_points")

    def __init__(self, points_per_rank: int = 100) -> None:
        self._points_per_rank = points_per_rank
        self._points = 0

    @property
    def points(self) -> int:
        return self._points

    def points_for(self, eliminated: int) -> int:
        return sum(self._points_per_rank * i for i in range(1, eliminated + 1))

    def add_points(self, eliminated: int) -> None:
        self._points += self.points_for(eliminated)

    def reset(self) -> None:
        self._points = 0
