"""Errors raised while reading ICSS source text."""

from __future__ import annotations


class ParseError(Exception):
    """ICSS source text that does not match the grammar.

    ``line`` and ``column`` are 1-based and None when the position is
    unknown (for example when the input ends too early).
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        if not isinstance(line, int) or line < 1:
            line = column = None
        self.line = line
        self.column = column
        self.reason = message
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.line is None:
            return self.reason
        return f"line {self.line}, column {self.column}: {self.reason}"
