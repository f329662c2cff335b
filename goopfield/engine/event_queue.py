"""FIFO outbox connecting the engine to its presentation adapter."""

from __future__ import annotations

import queue
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from goopfield.core.events import FieldEvent


class EventQueue:
    """Single-producer queue of FieldEvents.

    The engine pushes as it mutates; the adapter drains in order.
    """

    __slots__ = ("_queue",)

    def __init__(self) -> None:
        self._queue: queue.Queue[FieldEvent] = queue.Queue()

    def push(self, event: FieldEvent) -> None:
        self._queue.put_nowait(event)

    def extend(self, events: Iterable[FieldEvent]) -> None:
        for event in events:
            self._queue.put_nowait(event)

    def drain(self) -> list[FieldEvent]:
        events: list[FieldEvent] = []
        while True:
            try:
                events.append(self._queue.get_nowait())
            except queue.Empty:
                break
        return events

    @property
    def empty(self) -> bool:
        return self._queue.empty()
