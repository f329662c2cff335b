"""Replay serialization — records every engine action for later inspection."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from goopfield.core.events import FieldEvent
    from goopfield.core.snapshot import Snapshot

logger = logging.getLogger(__name__)


class ReplayRecorder:
    """Accumulates action records and flushes them to a JSON replay file."""

    __slots__ = ("_path", "_seed", "_actions")

    def __init__(self, path: str | Path, seed: int) -> None:
        self._path = Path(path)
        self._seed = seed
        self._actions: list[dict[str, Any]] = []

    @property
    def actions(self) -> list[dict[str, Any]]:
        return self._actions

    def record(self, action: str, events: list[FieldEvent], snapshot: Snapshot) -> None:
        self._actions.append(
            {
                "index": len(self._actions),
                "action": action,
                "round": snapshot.round,
                "score": snapshot.score,
                "player": {
                    "pos": [snapshot.player.pos.x, snapshot.player.pos.y],
                    "color": snapshot.player.color.name.lower(),
                    "direction": snapshot.player.direction.name.lower(),
                },
                "enemies": [
                    {"id": e.id, "pos": [e.pos.x, e.pos.y], "color": e.color.name.lower()}
                    for e in snapshot.enemies.values()
                ],
                "events": [ev.payload() for ev in events],
            }
        )

    def flush(self) -> None:
        """Write accumulated data to disk."""
        replay = {
            "version": "1.0",
            "seed": self._seed,
            "total_actions": len(self._actions),
            "actions": self._actions,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(replay, indent=2), encoding="utf-8")
        logger.info("Replay saved to %s (%d actions)", self._path, len(self._actions))
