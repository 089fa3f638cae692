from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from icss.model.types import ExpressionType


@dataclass(frozen=True)
class CompilerConfig:
    indent: str = "  "
    rule_separator: str = "\n"
    # merged over the built-in property table, e.g. {"height": ExpressionType.PIXEL}
    property_types: Mapping[str, ExpressionType] = field(default_factory=dict)
