"""Bridge from compilation events to the standard logging module."""

from __future__ import annotations

import logging
from typing import Any, Callable

from icss.events import types as events

Listener = Callable[[Any], None]


def logging_listener(logger: logging.Logger | None = None) -> Listener:
    """Create an ``EventBus.on_all`` callback that logs every event."""
    log = logger or logging.getLogger("icss")

    def listener(event: Any) -> None:
        if isinstance(event, events.CompilationStarted):
            log.info("Compiling %s", event.source_name)
        elif isinstance(event, events.CompilationCompleted):
            log.info(
                "Compiled %s: rules=%d", event.source_name, event.rule_count
            )
        elif isinstance(event, events.CompilationFailed):
            log.warning(
                "Compilation failed in %s: %s (diagnostics=%d)",
                event.phase,
                event.error,
                event.diagnostic_count,
            )
        elif isinstance(event, events.PhaseStarted):
            log.debug("Phase started: %s", event.phase)
        elif isinstance(event, events.PhaseCompleted):
            log.debug("Phase completed: %s", event.phase)
        else:
            log.debug("Event: %r", event)

    return listener
