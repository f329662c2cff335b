"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from goopfield.api.dependencies import set_engine_manager
from goopfield.api.engine_manager import EngineManager
from goopfield.api.routes import api_router
from goopfield.config import FieldConfig
from goopfield.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: FieldConfig | None = None, autostart: bool = True) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = FieldConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = EngineManager(_config)
        set_engine_manager(manager)
        if autostart:
            manager.start()
        logger.info("API server started (seed=%d).", _config.seed)
        yield
        manager.stop()
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Goop Field Engine",
        description=(
            "Headless simulation core of the goop field arcade puzzle.\n\n"
            "## API Groups\n\n"
            "- **State** — Live field state and the ordered presentation event feed\n"
            "- **Map** — Grid geometry, core zone bounds and current occupancy\n"
            "- **Input** — Player commands and animation completion acknowledgements\n"
            "- **Control** — Spawn timer lifecycle: start, pause, resume, step, reset\n"
            "- **Config** — Read-only field configuration\n"
            "- **Metadata** — Enum definitions: colors, directions, tile kinds, event names\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "State", "description": "Field snapshot and events, polled by the presentation client."},
            {"name": "Map", "description": "Grid dimensions, core zone and RLE-encoded occupancy."},
            {"name": "Input", "description": "Move/shoot commands (rejected while the player is busy) and animation acknowledgements."},
            {"name": "Control", "description": "Spawn timer controls: start, pause, resume, single spawn tick, and session reset."},
            {"name": "Config", "description": "Read-only field configuration and the current spawn interval."},
            {"name": "Metadata", "description": "Enum definitions so clients hardcode no names."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
