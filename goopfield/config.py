"""Field configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldConfig:
    """Immutable configuration for a play session."""

    # RNG
    seed: int = 42

    # Field
    grid_width: int = 18
    grid_height: int = 12
    core_size: int = 4
    cell_size: int = 16

    # Spawn timer
    base_spawn_interval: float = 1.0      # Seconds between spawn ticks at multiplier 1.0

    # Difficulty: interval shrinks by (1 - factor) every `step` lifetime eliminations
    difficulty_step: int = 20
    difficulty_factor: float = 0.9

    # Animation hints (seconds) handed to the presentation layer
    enemy_move_duration: float = 0.1
    player_move_duration: float = 0.1
    shoot_duration: float = 0.15
    return_duration: float = 0.15

    # Scoring
    points_per_rank: int = 100            # i-th kill of a batch is worth i * points_per_rank

    # Checks grid occupancy after every spawn and shot
    strict_invariants: bool = True

    # API
    event_log_limit: int = 2000

    # Logging
    log_level: str = "INFO"
    replay_file: str = "replay.json"

    # -- derived core-zone bounds (inclusive) --

    @property
    def core_min_x(self) -> int:
        return self.grid_width // 2 - self.core_size // 2

    @property
    def core_max_x(self) -> int:
        return self.grid_width // 2 + self.core_size // 2 - 1

    @property
    def core_min_y(self) -> int:
        return self.grid_height // 2 - self.core_size // 2

    @property
    def core_max_y(self) -> int:
        return self.grid_height // 2 + self.core_size // 2 - 1
