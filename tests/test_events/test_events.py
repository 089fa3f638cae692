"""Tests for the event bus and the logging bridge."""

import logging

import pytest

from icss.events import (
    CompilationCompleted,
    CompilationFailed,
    CompilationStarted,
    EventBus,
    PhaseCompleted,
    PhaseStarted,
    logging_listener,
)


class TestEventBus:
    def test_typed_listener_only_gets_its_type(self):
        bus = EventBus()
        received = []
        bus.subscribe(PhaseStarted, received.append)
        bus.emit(PhaseStarted(phase="parse"))
        bus.emit(PhaseCompleted(phase="parse"))
        assert received == [PhaseStarted(phase="parse")]

    def test_catch_all_runs_before_typed(self):
        bus = EventBus()
        order = []
        bus.subscribe(PhaseStarted, lambda e: order.append("typed"))
        bus.on_all(lambda e: order.append("all"))
        bus.emit(PhaseStarted(phase="check"))
        assert order == ["all", "typed"]

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        unsubscribe = bus.subscribe(PhaseStarted, received.append)
        remove_all = bus.on_all(received.append)
        unsubscribe()
        remove_all()
        bus.emit(PhaseStarted(phase="parse"))
        assert received == []

    def test_emit_without_listeners(self):
        EventBus().emit(PhaseStarted(phase="parse"))

    def test_listener_error_propagates(self):
        bus = EventBus()

        def boom(event):
            raise RuntimeError("listener failed")

        bus.on_all(boom)
        with pytest.raises(RuntimeError, match="listener failed"):
            bus.emit(PhaseStarted(phase="parse"))

    def test_events_are_frozen(self):
        event = CompilationStarted(source_name="a.icss")
        with pytest.raises(AttributeError):
            event.source_name = "b.icss"  # type: ignore[misc]


class TestLoggingListener:
    @pytest.fixture()
    def logger(self):
        return logging.getLogger("icss.test-events")

    def test_levels(self, logger, caplog):
        caplog.set_level(logging.DEBUG, logger=logger.name)
        listener = logging_listener(logger)

        listener(CompilationStarted(source_name="a.icss"))
        listener(PhaseStarted(phase="parse"))
        listener(PhaseCompleted(phase="parse"))
        listener(CompilationFailed(phase="check", error="bad", diagnostic_count=3))
        listener(CompilationCompleted(source_name="a.icss", rule_count=4))

        assert [(r.levelname, r.getMessage()) for r in caplog.records] == [
            ("INFO", "Compiling a.icss"),
            ("DEBUG", "Phase started: parse"),
            ("DEBUG", "Phase completed: parse"),
            ("WARNING", "Compilation failed in check: bad (diagnostics=3)"),
            ("INFO", "Compiled a.icss: rules=4"),
        ]

    def test_unknown_event_logged_at_debug(self, logger, caplog):
        caplog.set_level(logging.DEBUG, logger=logger.name)
        logging_listener(logger)("something else")
        assert caplog.records[-1].levelno == logging.DEBUG
        assert caplog.records[-1].getMessage() == "Event: 'something else'"

    def test_default_logger_name(self, caplog):
        caplog.set_level(logging.INFO, logger="icss")
        logging_listener()(CompilationStarted(source_name="x"))
        assert caplog.records[-1].name == "icss"
