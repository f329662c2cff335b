"""Thread-safe bounded log of presentation events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from goopfield.core.events import FieldEvent


@dataclass(frozen=True, slots=True)
class LoggedEvent:
    """A FieldEvent stamped with a global sequence number and its round."""

    seq: int
    round: int
    event: FieldEvent

    def payload(self) -> dict[str, Any]:
        data = self.event.payload()
        data["seq"] = self.seq
        data["round"] = self.round
        return data


class EventLog:
    """Writers append drained engine events; readers poll by sequence number.

    Sequence numbers keep increasing across ``clear()`` so a client polling
    with ``since(seq)`` never sees an old number reused.
    """

    __slots__ = ("_buffer", "_lock", "_next_seq")

    def __init__(self, limit: int = 2000) -> None:
        self._buffer: deque[LoggedEvent] = deque(maxlen=limit)
        self._lock = threading.Lock()
        self._next_seq = 0

    def append_many(self, events: Iterable[FieldEvent], round: int) -> None:
        with self._lock:
            for event in events:
                self._buffer.append(LoggedEvent(self._next_seq, round, event))
                self._next_seq += 1

    def since(self, seq: int) -> list[LoggedEvent]:
        """Return all retained events with sequence number >= *seq*."""
        with self._lock:
            return [e for e in self._buffer if e.seq >= seq]

    def latest(self, count: int = 50) -> list[LoggedEvent]:
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    @property
    def next_seq(self) -> int:
        with self._lock:
            return self._next_seq

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
