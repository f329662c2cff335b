"""POST /api/v1/control/{action} — spawn timer lifecycle controls."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends

from goopfield.api.dependencies import get_engine_manager
from goopfield.api.engine_manager import EngineManager
from goopfield.api.schemas import ControlResponse

router = APIRouter()


class ControlAction(str, Enum):
    start = "start"
    pause = "pause"
    resume = "resume"
    step = "step"
    reset = "reset"


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    manager: EngineManager = Depends(get_engine_manager),
) -> ControlResponse:
    spawned = manager.total_spawned

    match action:
        case ControlAction.start:
            if manager.running:
                return ControlResponse(status="noop", message="Already running.", spawn_count=spawned)
            manager.start()
            return ControlResponse(status="ok", message="Spawn timer started.", spawn_count=spawned)

        case ControlAction.pause:
            if not manager.running:
                return ControlResponse(status="error", message="Not running.", spawn_count=spawned)
            manager.pause()
            return ControlResponse(status="ok", message="Spawn timer paused.", spawn_count=spawned)

        case ControlAction.resume:
            if not manager.running:
                return ControlResponse(status="error", message="Not running.", spawn_count=spawned)
            manager.resume()
            return ControlResponse(status="ok", message="Spawn timer resumed.", spawn_count=spawned)

        case ControlAction.step:
            if manager.running:
                manager.step()
                return ControlResponse(status="ok", message="Spawn tick requested.", spawn_count=spawned)
            manager.spawn_tick()
            return ControlResponse(status="ok", message="Spawn tick executed.", spawn_count=manager.total_spawned)

        case ControlAction.reset:
            manager.reset()
            return ControlResponse(status="ok", message="Session reset.", spawn_count=manager.total_spawned)
