"""GET /api/v1/map — grid geometry plus the current occupancy layer."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from goopfield.api.dependencies import get_engine_manager
from goopfield.api.engine_manager import EngineManager
from goopfield.api.schemas import MapResponse

router = APIRouter()


def rle_encode(values: list[int]) -> list[int]:
    """Run-length encode as ``[value, count, value, count, ...]``."""
    rle: list[int] = []
    if not values:
        return rle
    cur_val = values[0]
    cur_count = 1
    for v in values[1:]:
        if v == cur_val:
            cur_count += 1
        else:
            rle.append(cur_val)
            rle.append(cur_count)
            cur_val = v
            cur_count = 1
    rle.append(cur_val)
    rle.append(cur_count)
    return rle


@router.get("/map", response_model=MapResponse)
def get_map(manager: EngineManager = Depends(get_engine_manager)) -> MapResponse:
    snap = manager.get_snapshot()
    if snap is None:
        raise HTTPException(status_code=503, detail="Field not initialized yet.")

    grid = snap.grid
    return MapResponse(
        width=grid.width,
        height=grid.height,
        cell_size=manager.config.cell_size,
        core_min_x=grid.min_core_x,
        core_max_x=grid.max_core_x,
        core_min_y=grid.min_core_y,
        core_max_y=grid.max_core_y,
        grid=rle_encode(grid.kinds()),
    )
