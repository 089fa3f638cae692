"""Expression types assigned by the checker."""

from __future__ import annotations

from enum import Enum


class ExpressionType(Enum):
    """The type universe of ICSS expressions."""

    PIXEL = "pixel"
    PERCENTAGE = "percentage"
    COLOR = "color"
    SCALAR = "scalar"
    BOOL = "bool"
