from icss.events.bus import EventBus
from icss.events.log import logging_listener
from icss.events.types import (
    CompilationCompleted,
    CompilationFailed,
    CompilationStarted,
    PhaseCompleted,
    PhaseStarted,
)

__all__ = [
    "EventBus",
    "logging_listener",
    "CompilationStarted",
    "CompilationCompleted",
    "CompilationFailed",
    "PhaseStarted",
    "PhaseCompleted",
]
