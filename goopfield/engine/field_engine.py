"""FieldEngine — the authoritative, turn-based game core.

Entry points, each run to completion before the next is admitted:
  - ``on_spawn_tick``  — select lane → converge → insert → loss check
  - ``on_move`` / ``on_shoot`` — player commands, gated by busy flags
  - ``end_movement`` / ``return_to_position`` / ``end_shoot`` — animation acks

The engine is not thread-safe; callers on several threads must serialize
access (see ``goopfield.api.engine_manager``).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from goopfield.core.enums import Direction, Domain
from goopfield.core.errors import HandshakeError
from goopfield.core.events import (
    FieldEvent,
    FieldReset,
    PlayerColorChanged,
    PlayerMoved,
    PlayerReturned,
    PlayerShotTo,
    PlayerTurned,
)
from goopfield.core.field_state import FieldState
from goopfield.core.grid import Grid
from goopfield.core.models import Player, Position
from goopfield.core.snapshot import Snapshot
from goopfield.engine.convergence import ConvergenceMover
from goopfield.engine.event_queue import EventQueue
from goopfield.engine.match_resolver import MatchResolver, ShotResult
from goopfield.engine.win_loss import WinLossEvaluator
from goopfield.systems.difficulty import DifficultyController, ManualSpawnTimer
from goopfield.systems.rng import DeterministicRNG
from goopfield.systems.scoring import Scoreboard
from goopfield.systems.spawn_selector import SpawnSelector

if TYPE_CHECKING:
    from goopfield.config import FieldConfig
    from goopfield.systems.difficulty import SpawnTimer
    from goopfield.systems.scoring import ScoreKeeper

logger = logging.getLogger(__name__)

# Shot handshake phases
_SHOT_IDLE = 0
_SHOT_OUT = 1       # PlayerShotTo emitted, waiting for return_to_position
_SHOT_BACK = 2      # PlayerReturned emitted, waiting for end_shoot


class FieldEngine:
    """Owns the field state and drives every mutation of it."""

    __slots__ = (
        "_config",
        "_rng",
        "_timer",
        "_score",
        "_reload",
        "_selector",
        "_mover",
        "_resolver",
        "_evaluator",
        "_difficulty",
        "_events",
        "_state",
        "_spawn_count",
        "_shot_phase",
    )

    def __init__(
        self,
        config: FieldConfig,
        rng: DeterministicRNG | None = None,
        timer: SpawnTimer | None = None,
        score: ScoreKeeper | None = None,
        reload: Callable[[], None] | None = None,
        first_enemy_id: int = 1,
    ) -> None:
        self._config = config
        self._rng = rng or DeterministicRNG(config.seed)
        self._timer = timer or ManualSpawnTimer(config.base_spawn_interval)
        self._score = score or Scoreboard(config.points_per_rank)
        self._reload = reload or self.reset
        self._selector = SpawnSelector(self._rng)
        self._mover = ConvergenceMover(config, self._rng)
        self._resolver = MatchResolver()
        self._evaluator = WinLossEvaluator()
        self._difficulty = DifficultyController(
            self._timer, step=config.difficulty_step, factor=config.difficulty_factor,
        )
        self._events = EventQueue()
        self._spawn_count = 0
        self._shot_phase = _SHOT_IDLE
        self._state = self._new_state(round=0, first_enemy_id=first_enemy_id)

    # -- public properties --

    @property
    def config(self) -> FieldConfig:
        return self._config

    @property
    def state(self) -> FieldState:
        return self._state

    @property
    def player(self) -> Player:
        return self._state.player

    @property
    def score(self) -> ScoreKeeper:
        return self._score

    @property
    def difficulty(self) -> DifficultyController:
        return self._difficulty

    @property
    def spawn_count(self) -> int:
        return self._spawn_count

    def is_moving(self) -> bool:
        return self._state.player.is_moving

    def is_shooting(self) -> bool:
        return self._state.player.is_shooting

    def drain_events(self) -> list[FieldEvent]:
        """Pop every notification emitted since the last drain, in order."""
        return self._events.drain()

    def create_snapshot(self) -> Snapshot:
        return Snapshot.from_state(
            self._state,
            spawn_count=self._spawn_count,
            score=self._score.points,
            total_eliminations=self._difficulty.total_eliminations,
            interval_multiplier=self._difficulty.multiplier,
        )

    # -- lifecycle --

    def _new_state(self, round: int, first_enemy_id: int) -> FieldState:
        cfg = self._config
        grid = Grid(cfg.grid_width, cfg.grid_height, cfg.core_size)
        x = self._rng.next_int(Domain.PLAYER, round, 0, grid.min_core_x, grid.max_core_x)
        y = self._rng.next_int(Domain.PLAYER, round, 1, grid.min_core_y, grid.max_core_y)
        color = self._rng.next_color(Domain.PLAYER, round, 2)
        player = Player(pos=Position(x, y), color=color, direction=Direction.UP)
        state = FieldState(grid, player, round=round, first_enemy_id=first_enemy_id)

        self._events.push(PlayerMoved(to_pos=player.pos, duration=0.0))
        self._events.push(PlayerColorChanged(color=color))
        self._events.push(PlayerTurned(direction=player.direction))
        logger.info("Round %d: player at %s (%s)", round, player.pos, color.name)
        return state

    def reset(self) -> None:
        """Reinitialize every piece of round state. Enemy ids keep counting up."""
        old = self._state
        self._spawn_count = 0
        self._shot_phase = _SHOT_IDLE
        self._difficulty.reset()
        self._score.reset()
        self._events.push(FieldReset(round=old.round + 1))
        self._state = self._new_state(round=old.round + 1, first_enemy_id=old.next_enemy_id)

    def _check(self) -> None:
        if self._config.strict_invariants:
            self._state.validate()

    # -- spawn timer entry point --

    def on_spawn_tick(self) -> bool:
        """Run one spawn tick. Returns True if it lost the round (and reloaded)."""
        state = self._state
        direction, edge = self._selector.choose(
            state.grid, state.last_direction, self._spawn_count, state.round,
        )
        state.last_direction = direction
        self._spawn_count += 1

        result = self._mover.advance(state, direction, edge)
        self._events.extend(result.moves)
        # A lane that reached the player stops short: no further moves, no insertion
        if result.contact is None:
            self._events.push(self._mover.insert(state, edge))

        self._check()

        if self._evaluator.is_lost(state.grid, contact=result.contact is not None):
            logger.info(
                "Round %d lost after %d spawns (score %d)",
                state.round, self._spawn_count, self._score.points,
            )
            self._reload()
            return True
        return False

    # -- input entry points --

    def on_move(self, direction: Direction) -> bool:
        """Turn and step one cell, clamped to the core zone. False if busy."""
        player = self._state.player
        if player.busy:
            logger.debug("Move %s ignored: player busy", direction.name)
            return False

        player.direction = direction
        self._events.push(PlayerTurned(direction=direction))

        grid = self._state.grid
        dx, dy = direction.offset
        target = Position(
            min(max(player.pos.x + dx, grid.min_core_x), grid.max_core_x),
            min(max(player.pos.y + dy, grid.min_core_y), grid.max_core_y),
        )
        self._state.move_player(target)
        player.is_moving = True
        self._events.push(PlayerMoved(to_pos=target, duration=self._config.player_move_duration))

        self._check()
        return True

    def on_shoot(self) -> ShotResult | None:
        """Fire along the facing direction. None if busy."""
        player = self._state.player
        if player.busy:
            logger.debug("Shot ignored: player busy")
            return None

        result = self._resolver.resolve(self._state)
        self._events.extend(result.events)

        self._difficulty.record(result.eliminated)
        if result.eliminated > 0:
            self._score.add_points(result.eliminated)
            logger.info("Shot %s eliminated %d", player.direction.name, result.eliminated)

        player.is_shooting = True
        self._shot_phase = _SHOT_OUT
        self._events.push(PlayerShotTo(position=result.target, duration=self._config.shoot_duration))

        self._check()
        return result

    # -- presentation acknowledgements --

    def end_movement(self) -> None:
        player = self._state.player
        if not player.is_moving:
            raise HandshakeError("end_movement without a move in flight")
        player.is_moving = False

    def return_to_position(self) -> None:
        """Shot animation reached its target; head back to the player's cell."""
        if self._shot_phase != _SHOT_OUT:
            raise HandshakeError("return_to_position without a shot in flight")
        player = self._state.player
        self._shot_phase = _SHOT_BACK
        player.direction = player.direction.opposite()
        self._events.push(PlayerTurned(direction=player.direction))
        self._events.push(PlayerReturned(to_pos=player.pos, duration=self._config.return_duration))

    def end_shoot(self) -> None:
        if self._shot_phase != _SHOT_BACK:
            raise HandshakeError("end_shoot before return_to_position")
        player = self._state.player
        self._shot_phase = _SHOT_IDLE
        player.direction = player.direction.opposite()
        player.is_shooting = False
        self._events.push(PlayerTurned(direction=player.direction))
