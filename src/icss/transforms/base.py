"""Protocol shared by the passes that rewrite a checked stylesheet."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from icss.model.ast import Stylesheet


@runtime_checkable
class Transform(Protocol):
    """Rewrites a stylesheet, in place or by returning a new tree.

    The returned stylesheet is what the next transform receives.
    """

    def apply(self, stylesheet: Stylesheet) -> Stylesheet: ...
