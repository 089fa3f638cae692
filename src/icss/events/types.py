"""Event types emitted while compiling a stylesheet."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CompilationStarted:
    source_name: str


@dataclass(frozen=True)
class CompilationCompleted:
    source_name: str
    rule_count: int


@dataclass(frozen=True)
class CompilationFailed:
    phase: str
    error: str
    diagnostic_count: int = 0


@dataclass(frozen=True)
class PhaseStarted:
    phase: str


@dataclass(frozen=True)
class PhaseCompleted:
    phase: str
