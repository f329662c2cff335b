"""GET /api/v1/config — expose the field configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from goopfield.api.dependencies import get_engine_manager
from goopfield.api.engine_manager import EngineManager
from goopfield.api.schemas import FieldConfigResponse

router = APIRouter()


@router.get("/config", response_model=FieldConfigResponse)
def get_config(
    manager: EngineManager = Depends(get_engine_manager),
) -> FieldConfigResponse:
    cfg = manager.config
    return FieldConfigResponse(
        seed=cfg.seed,
        grid_width=cfg.grid_width,
        grid_height=cfg.grid_height,
        core_size=cfg.core_size,
        cell_size=cfg.cell_size,
        base_spawn_interval=cfg.base_spawn_interval,
        difficulty_step=cfg.difficulty_step,
        difficulty_factor=cfg.difficulty_factor,
        enemy_move_duration=cfg.enemy_move_duration,
        player_move_duration=cfg.player_move_duration,
        shoot_duration=cfg.shoot_duration,
        return_duration=cfg.return_duration,
        points_per_rank=cfg.points_per_rank,
        spawn_interval=manager.spawn_interval,
    )
