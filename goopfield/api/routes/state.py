"""GET /api/v1/state — live field data polled by the presentation client."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from goopfield.api.dependencies import get_engine_manager
from goopfield.api.engine_manager import EngineManager
from goopfield.api.schemas import (
    EnemySchema,
    EventSchema,
    FieldStateResponse,
    PlayerSchema,
    SessionStats,
)

router = APIRouter()


@router.get("/state", response_model=FieldStateResponse)
def get_state(
    since: int | None = Query(None, ge=0, description="Only events with seq >= since"),
    limit: int = Query(100, ge=1, le=1000),
    manager: EngineManager = Depends(get_engine_manager),
) -> FieldStateResponse:
    snap = manager.get_snapshot()
    if snap is None:
        raise HTTPException(status_code=503, detail="No snapshot available yet.")

    log = manager.event_log
    logged = log.latest(limit) if since is None else log.since(since)[:limit]
    events = []
    for entry in logged:
        data = entry.event.payload()
        kind = data.pop("kind")
        events.append(EventSchema(seq=entry.seq, round=entry.round, kind=kind, data=data))

    p = snap.player
    return FieldStateResponse(
        round=snap.round,
        spawn_count=snap.spawn_count,
        score=snap.score,
        total_eliminations=snap.total_eliminations,
        interval_multiplier=snap.interval_multiplier,
        last_direction=snap.last_direction.name.lower() if snap.last_direction is not None else None,
        player=PlayerSchema(
            x=p.pos.x, y=p.pos.y,
            color=p.color.name.lower(), direction=p.direction.name.lower(),
            is_moving=p.is_moving, is_shooting=p.is_shooting,
        ),
        enemies=[
            EnemySchema(id=e.id, x=e.pos.x, y=e.pos.y, color=e.color.name.lower())
            for e in sorted(snap.enemies.values(), key=lambda e: e.id)
        ],
        events=events,
        next_seq=log.next_seq,
    )


@router.get("/stats", response_model=SessionStats)
def get_stats(manager: EngineManager = Depends(get_engine_manager)) -> SessionStats:
    snap = manager.get_snapshot()
    if snap is None:
        raise HTTPException(status_code=503, detail="No snapshot available yet.")
    return SessionStats(
        round=snap.round,
        score=snap.score,
        best_score=manager.best_score,
        total_spawned=manager.total_spawned,
        total_losses=manager.total_losses,
        enemy_count=len(snap.enemies),
        running=manager.running,
        paused=manager.paused,
    )
