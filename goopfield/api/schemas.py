"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


# --- Field state ---

class PlayerSchema(BaseModel):
    x: int
    y: int
    color: str
    direction: str
    is_moving: bool = False
    is_shooting: bool = False


class EnemySchema(BaseModel):
    id: int
    x: int
    y: int
    color: str


class EventSchema(BaseModel):
    seq: int
    round: int
    kind: str
    data: dict[str, Any] = Field(default_factory=dict)


class FieldStateResponse(BaseModel):
    round: int
    spawn_count: int
    score: int
    total_eliminations: int
    interval_multiplier: float
    last_direction: str | None = None
    player: PlayerSchema
    enemies: list[EnemySchema]
    events: list[EventSchema] = Field(default_factory=list)
    next_seq: int = 0


# --- Map ---

class MapResponse(BaseModel):
    width: int
    height: int
    cell_size: int
    core_min_x: int
    core_max_x: int
    core_min_y: int
    core_max_y: int
    # RLE of tile kinds, row-major: [kind, count, kind, count, ...]
    grid: list[int]


# --- Input ---

class InputResponse(BaseModel):
    accepted: bool
    message: str
    eliminated: int = 0
    target_x: int | None = None
    target_y: int | None = None


# --- Control ---

class ControlResponse(BaseModel):
    status: str
    message: str
    spawn_count: int = 0


# --- Config ---

class FieldConfigResponse(BaseModel):
    seed: int
    grid_width: int
    grid_height: int
    core_size: int
    cell_size: int
    base_spawn_interval: float
    difficulty_step: int
    difficulty_factor: float
    enemy_move_duration: float
    player_move_duration: float
    shoot_duration: float
    return_duration: float
    points_per_rank: int
    spawn_interval: float


# --- Stats ---

class SessionStats(BaseModel):
    round: int
    score: int
    best_score: int
    total_spawned: int
    total_losses: int
    enemy_count: int
    running: bool
    paused: bool
