"""Scope chain: a stack of name -> payload mappings with lexical shadowing.

The checker uses ``ScopeChain[ExpressionType | None]`` where every nested
scope starts empty and lookups walk outward.  The evaluator uses
``ScopeChain[Literal]`` with ``snapshot=True``: a nested scope starts as a
copy of the enclosing one, so a lookup only ever inspects the top scope.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

__all__ = ["ScopeChain", "ScopeError"]

T = TypeVar("T")


class ScopeError(RuntimeError):
    """Raised when scopes are left more often than they were entered."""


class ScopeChain(Generic[T]):
    """An ordered stack of scopes, innermost last."""

    def __init__(self, snapshot: bool = False) -> None:
        self.snapshot = snapshot
        self._scopes: list[dict[str, T]] = []

    @property
    def depth(self) -> int:
        return len(self._scopes)

    def enter_scope(self) -> None:
        """Push a new scope (empty, or a copy of the top in snapshot mode)."""
        if self.snapshot and self._scopes:
            self._scopes.append(dict(self._scopes[-1]))
        else:
            self._scopes.append({})

    def leave_scope(self) -> None:
        """Pop the top scope."""
        if not self._scopes:
            raise ScopeError("leave_scope() called with no active scope")
        self._scopes.pop()

    @contextmanager
    def scope(self) -> Iterator[ScopeChain[T]]:
        """Enter a scope for the duration of a ``with`` block."""
        self.enter_scope()
        try:
            yield self
        finally:
            self.leave_scope()

    def bind(self, name: str, payload: T) -> None:
        """Bind *name* in the top scope only."""
        if not self._scopes:
            raise ScopeError(f"cannot bind {name!r}: no active scope")
        self._scopes[-1][name] = payload

    def _visible(self) -> list[dict[str, T]]:
        if not self._scopes:
            return []
        if self.snapshot:
            return [self._scopes[-1]]
        return self._scopes[::-1]

    def resolve(self, name: str) -> T | None:
        """Return the innermost visible payload for *name*, or None."""
        for scope in self._visible():
            if name in scope:
                return scope[name]
        return None

    def is_bound(self, name: str) -> bool:
        return any(name in scope for scope in self._visible())

    def __contains__(self, name: str) -> bool:
        return self.is_bound(name)

    def __repr__(self) -> str:
        return f"ScopeChain(depth={self.depth}, snapshot={self.snapshot})"
