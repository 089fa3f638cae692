"""Diagnostic model: error annotations attached to AST nodes by the checker."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Category of a checker finding."""

    TYPE = "type"
    OPERAND = "operand"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class Diagnostic:
    """A single checker finding about one AST node.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        kind: Which part of the error taxonomy the finding belongs to.
        message: Human-readable description of the problem.
        selector: The enclosing style rule's selectors, if applicable.
    """

    rule: str
    kind: ErrorKind
    message: str
    selector: str | None = None

    def __str__(self) -> str:
        location = ""
        if self.selector:
            location = f" [rule={self.selector}]"
        return f"{self.kind.value.upper()} ERROR{location}: {self.message}"
