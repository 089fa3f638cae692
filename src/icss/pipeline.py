"""Compilation pipeline: parse, check, evaluate, and generate."""

from __future__ import annotations

from icss.checker import Checker
from icss.config import CompilerConfig
from icss.events import types as events
from icss.events.bus import EventBus
from icss.generator import Generator
from icss.model.ast import Stylesheet, collect_diagnostics
from icss.model.diagnostic import Diagnostic
from icss.parser import ParseError, parse_stylesheet
from icss.transforms import Evaluator


class CompilationError(Exception):
    """Raised when checking attaches diagnostics to the stylesheet."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics]
        super().__init__(
            f"Compilation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


class Compiler:
    """Runs the compilation phases in order, emitting lifecycle events.

    Evaluation only ever runs on a stylesheet that checked without
    diagnostics; otherwise :class:`CompilationError` is raised first.
    """

    def __init__(
        self,
        config: CompilerConfig | None = None,
        *,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config or CompilerConfig()
        self.event_bus = event_bus or EventBus()

    def parse(self, source: str) -> Stylesheet:
        self.event_bus.emit(events.PhaseStarted(phase="parse"))
        try:
            stylesheet = parse_stylesheet(source)
        except ParseError as exc:
            self.event_bus.emit(events.CompilationFailed(phase="parse", error=str(exc)))
            raise
        self.event_bus.emit(events.PhaseCompleted(phase="parse"))
        return stylesheet

    def check(self, stylesheet: Stylesheet) -> list[Diagnostic]:
        """Check *stylesheet* and return every diagnostic attached to it."""
        self.event_bus.emit(events.PhaseStarted(phase="check"))
        Checker(property_types=self.config.property_types).check(stylesheet)
        diagnostics = collect_diagnostics(stylesheet)
        self.event_bus.emit(events.PhaseCompleted(phase="check"))
        return diagnostics

    def evaluate(self, stylesheet: Stylesheet) -> Stylesheet:
        self.event_bus.emit(events.PhaseStarted(phase="evaluate"))
        stylesheet = Evaluator().apply(stylesheet)
        self.event_bus.emit(events.PhaseCompleted(phase="evaluate"))
        return stylesheet

    def generate(self, stylesheet: Stylesheet) -> str:
        self.event_bus.emit(events.PhaseStarted(phase="generate"))
        css = Generator(
            indent=self.config.indent, rule_separator=self.config.rule_separator
        ).generate(stylesheet)
        self.event_bus.emit(events.PhaseCompleted(phase="generate"))
        return css

    def check_or_raise(self, stylesheet: Stylesheet) -> None:
        diagnostics = self.check(stylesheet)
        if diagnostics:
            error = CompilationError(diagnostics)
            self.event_bus.emit(
                events.CompilationFailed(
                    phase="check", error=str(error), diagnostic_count=len(diagnostics)
                )
            )
            raise error

    def compile_stylesheet(self, stylesheet: Stylesheet) -> str:
        """Check, evaluate, and generate an already-parsed *stylesheet*."""
        self.check_or_raise(stylesheet)
        self.evaluate(stylesheet)
        return self.generate(stylesheet)

    def compile(self, source: str, name: str = "<string>") -> str:
        """Compile ICSS *source* text to CSS text."""
        self.event_bus.emit(events.CompilationStarted(source_name=name))
        stylesheet = self.parse(source)
        css = self.compile_stylesheet(stylesheet)
        self.event_bus.emit(
            events.CompilationCompleted(source_name=name, rule_count=len(stylesheet.rules))
        )
        return css


def compile_source(source: str, config: CompilerConfig | None = None) -> str:
    """Compile ICSS *source* to CSS in one call."""
    return Compiler(config).compile(source)
