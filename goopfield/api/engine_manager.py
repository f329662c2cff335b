"""EngineManager — runs the spawn timer on a background thread.

The manager is the engine's spawn-timer, score-owner and reset collaborator
at once. Every entry point into the FieldEngine (spawn tick, player input,
animation acknowledgements, reset) goes through one lock, so a spawn tick's
mutation, loss check and reload can never interleave with a shot. The API
reads from an atomically swapped immutable Snapshot.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from goopfield.core.events import FieldReset
from goopfield.core.snapshot import Snapshot
from goopfield.engine.field_engine import FieldEngine
from goopfield.systems.rng import DeterministicRNG
from goopfield.systems.scoring import Scoreboard
from goopfield.utils.event_log import EventLog

if TYPE_CHECKING:
    from goopfield.config import FieldConfig
    from goopfield.core.enums import Direction
    from goopfield.engine.match_resolver import ShotResult

logger = logging.getLogger(__name__)

ACKNOWLEDGEMENTS = ("end_movement", "return_to_position", "end_shoot")


class EngineManager:
    """Manages one play session.

    Provides thread-safe access to:
      - latest snapshot (atomic reference swap)
      - event log (lock-guarded, sequence-numbered)
      - timer control (start / pause / resume / step / reset)
      - player input and animation acknowledgements
    """

    def __init__(self, config: FieldConfig) -> None:
        self._config = config
        self.config = config
        self._interval_multiplier: float = 1.0

        # Serializes every call into the engine
        self._engine_lock = threading.Lock()
        self._snapshot_lock = threading.Lock()
        self._latest_snapshot: Snapshot | None = None
        self._event_log = EventLog(config.event_log_limit)

        # Counters (lifetime of the manager, not of a round)
        self._total_spawned: int = 0
        self._total_losses: int = 0
        self._best_score: int = 0

        # Control
        self._thread: threading.Thread | None = None
        self._running = threading.Event()
        self._paused = threading.Event()
        self._step_requested = threading.Event()
        self._stop_requested = threading.Event()

        self._scoreboard = Scoreboard(config.points_per_rank)
        self._engine: FieldEngine = self._build()
        self._publish()

    # -- spawn timer collaborator --

    def set_interval_multiplier(self, multiplier: float) -> None:
        self._interval_multiplier = multiplier

    @property
    def interval_multiplier(self) -> float:
        return self._interval_multiplier

    @property
    def spawn_interval(self) -> float:
        return self._config.base_spawn_interval * self._interval_multiplier

    # -- public properties --

    @property
    def running(self) -> bool:
        return self._running.is_set()

    @property
    def paused(self) -> bool:
        return self._paused.is_set()

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def total_spawned(self) -> int:
        return self._total_spawned

    @property
    def total_losses(self) -> int:
        return self._total_losses

    @property
    def best_score(self) -> int:
        return self._best_score

    def is_moving(self) -> bool:
        with self._engine_lock:
            return self._engine.is_moving()

    def is_shooting(self) -> bool:
        with self._engine_lock:
            return self._engine.is_shooting()

    # -- snapshot access --

    def get_snapshot(self) -> Snapshot | None:
        with self._snapshot_lock:
            return self._latest_snapshot

    # -- engine entry points --

    def spawn_tick(self) -> bool:
        """One spawn tick; True if the round was lost."""
        with self._engine_lock:
            lost = self._engine.on_spawn_tick()
            self._total_spawned += 1
            self._publish()
        return lost

    def move(self, direction: Direction) -> bool:
        with self._engine_lock:
            accepted = self._engine.on_move(direction)
            self._publish()
        return accepted

    def shoot(self) -> ShotResult | None:
        with self._engine_lock:
            result = self._engine.on_shoot()
            self._best_score = max(self._best_score, self._scoreboard.points)
            self._publish()
        return result

    def acknowledge(self, name: str) -> None:
        """Forward a presentation completion callback to the engine."""
        if name not in ACKNOWLEDGEMENTS:
            raise ValueError(f"unknown acknowledgement {name!r}")
        with self._engine_lock:
            getattr(self._engine, name)()
            self._publish()

    # -- lifecycle --

    def start(self) -> None:
        if self._running.is_set():
            return
        self._stop_requested.clear()
        self._paused.clear()
        self._running.set()
        self._thread = threading.Thread(target=self._run_loop, name="spawn-timer", daemon=True)
        self._thread.start()
        logger.info("Spawn timer started (interval=%.3fs)", self.spawn_interval)

    def pause(self) -> None:
        self._paused.set()
        logger.info("Spawn timer paused after %d spawns", self._total_spawned)

    def resume(self) -> None:
        self._paused.clear()
        logger.info("Spawn timer resumed")

    def step(self) -> None:
        """Execute exactly one spawn tick on the timer thread (must be paused)."""
        if not self._paused.is_set():
            self.pause()
        self._step_requested.set()

    def stop(self) -> None:
        self._stop_requested.set()
        self._paused.clear()
        self._running.clear()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=5.0)
        logger.info("Spawn timer stopped.")

    def reset(self) -> None:
        """Stop the timer and start a brand-new session."""
        self.stop()
        with self._engine_lock:
            self._event_log.clear()
            self._total_spawned = 0
            self._total_losses = 0
            self._scoreboard.reset()
            self._interval_multiplier = 1.0
            # Enemy ids are never reused within the process
            self._engine = self._build(first_enemy_id=self._engine.state.next_enemy_id)
            self._event_log.append_many([FieldReset(round=0)], round=0)
            self._publish()
        logger.info("EngineManager reset.")

    # -- internals --

    def _build(self, first_enemy_id: int = 1) -> FieldEngine:
        return FieldEngine(
            self._config,
            rng=DeterministicRNG(self._config.seed),
            timer=self,
            score=self._scoreboard,
            reload=self._on_reload,
            first_enemy_id=first_enemy_id,
        )

    def _on_reload(self) -> None:
        """Reset trigger; called by the engine with the engine lock held."""
        self._total_losses += 1
        logger.info("Round lost (%d total); reloading field", self._total_losses)
        self._engine.reset()

    def _run_loop(self) -> None:
        logger.info("Spawn timer thread started.")

        while not self._stop_requested.is_set():
            if self._paused.is_set() and not self._step_requested.is_set():
                self._stop_requested.wait(0.01)
                continue

            single_step = self._step_requested.is_set()
            if single_step:
                self._step_requested.clear()
            elif self._stop_requested.wait(self.spawn_interval):
                break
            elif self._paused.is_set():
                continue

            self.spawn_tick()

        self._running.clear()
        logger.info("Spawn timer thread exited.")

    def _publish(self) -> None:
        """Push drained events and swap in a fresh snapshot (engine lock held)."""
        snap = self._engine.create_snapshot()
        events = self._engine.drain_events()
        if events:
            self._event_log.append_many(events, snap.round)
        with self._snapshot_lock:
            self._latest_snapshot = snap
