"""POST /api/v1/input/* and /api/v1/ack/* — player commands and animation acks."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends, HTTPException

from goopfield.api.dependencies import get_engine_manager
from goopfield.api.engine_manager import EngineManager
from goopfield.api.schemas import InputResponse
from goopfield.core.enums import Direction
from goopfield.core.errors import HandshakeError

router = APIRouter()


class MoveDirection(str, Enum):
    left = "left"
    right = "right"
    up = "up"
    down = "down"


class Acknowledgement(str, Enum):
    end_movement = "end_movement"
    return_to_position = "return_to_position"
    end_shoot = "end_shoot"


@router.post("/input/move/{direction}", response_model=InputResponse)
def move(
    direction: MoveDirection,
    manager: EngineManager = Depends(get_engine_manager),
) -> InputResponse:
    if not manager.move(Direction[direction.name.upper()]):
        return InputResponse(accepted=False, message="Player is busy.")
    return InputResponse(accepted=True, message=f"Moved {direction.value}.")


@router.post("/input/shoot", response_model=InputResponse)
def shoot(manager: EngineManager = Depends(get_engine_manager)) -> InputResponse:
    result = manager.shoot()
    if result is None:
        return InputResponse(accepted=False, message="Player is busy.")
    return InputResponse(
        accepted=True,
        message=f"Eliminated {result.eliminated}.",
        eliminated=result.eliminated,
        target_x=result.target.x,
        target_y=result.target.y,
    )


@router.post("/ack/{name}", response_model=InputResponse)
def acknowledge(
    name: Acknowledgement,
    manager: EngineManager = Depends(get_engine_manager),
) -> InputResponse:
    try:
        manager.acknowledge(name.value)
    except HandshakeError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return InputResponse(accepted=True, message=f"{name.value} acknowledged.")
