"""Engine layer: convergence, matching, loss detection, and the FieldEngine."""

from goopfield.engine.convergence import ConvergenceMover, ConvergenceResult
from goopfield.engine.event_queue import EventQueue
from goopfield.engine.match_resolver import MatchResolver, ShotResult
from goopfield.engine.win_loss import WinLossEvaluator
from goopfield.engine.field_engine import FieldEngine
from goopfield.engine.headless import HeadlessRunner, SessionSummary

__all__ = [
    "ConvergenceMover",
    "ConvergenceResult",
    "EventQueue",
    "FieldEngine",
    "HeadlessRunner",
    "MatchResolver",
    "SessionSummary",
    "ShotResult",
    "WinLossEvaluator",
]
