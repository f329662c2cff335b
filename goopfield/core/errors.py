"""Exception hierarchy for the field engine.

Every error here signals a broken caller contract or a desync between the
engine and its collaborators. None of them are retried.
"""

from __future__ import annotations


class FieldError(Exception):
    """Base class for all engine faults."""


class GridBoundsError(FieldError, IndexError):
    """A coordinate outside the grid was read or written."""


class OccupancyError(FieldError):
    """Two occupants would share one cell."""


class InvariantViolation(FieldError):
    """The grid and the enemy registry disagree."""


class UnknownEnemyError(FieldError, KeyError):
    """An enemy id is no longer registered."""


class NoSpawnCandidateError(FieldError):
    """The spawn selector had nothing to choose from."""


class HandshakeError(FieldError):
    """A completion acknowledgement arrived for an action not in flight."""
