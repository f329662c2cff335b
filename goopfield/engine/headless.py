"""Headless session — drives a FieldEngine without a presentation layer.

Stands in for every collaborator at once: it is the spawn timer, the
input source (a seeded random policy), and an instant presentation layer
that acknowledges each animation as soon as it is emitted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from goopfield.core.enums import Direction, Domain
from goopfield.engine.field_engine import FieldEngine
from goopfield.systems.rng import DeterministicRNG

if TYPE_CHECKING:
    from goopfield.config import FieldConfig
    from goopfield.utils.replay import ReplayRecorder

logger = logging.getLogger(__name__)

# Policy choices: index 0 shoots, 1..4 move
_MOVES: tuple[Direction, ...] = (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN)


@dataclass(slots=True)
class SessionSummary:
    spawns: int = 0
    shots: int = 0
    moves: int = 0
    eliminated: int = 0
    losses: int = 0
    best_score: int = 0
    final_score: int = 0


class HeadlessRunner:
    """Alternates spawn ticks with a few random player actions."""

    __slots__ = ("_config", "_engine", "_policy_rng", "_recorder", "_actions_per_spawn", "_summary", "_step")

    def __init__(
        self,
        config: FieldConfig,
        actions_per_spawn: int = 2,
        recorder: ReplayRecorder | None = None,
    ) -> None:
        self._config = config
        self._engine = FieldEngine(config, rng=DeterministicRNG(config.seed))
        # Separate seed stream so the policy never perturbs field randomness
        self._policy_rng = DeterministicRNG(config.seed + 1)
        self._recorder = recorder
        self._actions_per_spawn = actions_per_spawn
        self._summary = SessionSummary()
        self._step = 0

    @property
    def engine(self) -> FieldEngine:
        return self._engine

    @property
    def summary(self) -> SessionSummary:
        return self._summary

    def _record(self, action: str) -> None:
        events = self._engine.drain_events()
        if self._recorder is not None:
            self._recorder.record(action, events, self._engine.create_snapshot())

    def _act(self) -> None:
        engine = self._engine
        choice = self._policy_rng.next_int(Domain.POLICY, self._step, 0, 0, len(_MOVES))
        self._step += 1

        if choice == 0:
            result = engine.on_shoot()
            self._record("shoot")
            if result is not None:
                self._summary.shots += 1
                self._summary.eliminated += result.eliminated
                self._summary.best_score = max(self._summary.best_score, engine.score.points)
            engine.return_to_position()
            engine.end_shoot()
        else:
            direction = _MOVES[choice - 1]
            engine.on_move(direction)
            self._record(f"move_{direction.name.lower()}")
            self._summary.moves += 1
            engine.end_movement()
        self._record("ack")

    def run(self, spawns: int) -> SessionSummary:
        logger.info("=== Headless session started (seed=%d, spawns=%d) ===", self._config.seed, spawns)
        self._record("start")

        for i in range(spawns):
            if self._engine.on_spawn_tick():
                self._summary.losses += 1
            self._summary.spawns += 1
            self._record("spawn")

            for _ in range(self._actions_per_spawn):
                self._act()

            if (i + 1) % 50 == 0:
                logger.info(
                    "Spawn %d: %d enemies, score %d",
                    i + 1, len(self._engine.state.enemies), self._engine.score.points,
                )

        self._summary.final_score = self._engine.score.points
        logger.info(
            "=== Session finished: %d losses, best score %d ===",
            self._summary.losses, self._summary.best_score,
        )
        if self._recorder is not None:
            self._recorder.flush()
        return self._summary
