"""Stylesheet transforms run between checking and generation."""

from __future__ import annotations

from typing import Iterable

from icss.model.ast import Stylesheet
from icss.transforms.base import Transform
from icss.transforms.evaluator import EvaluationError, Evaluator, combine, evaluate

# Run in order before any caller-supplied transforms.
BUILTIN_TRANSFORMS: list[Transform] = [Evaluator()]


def apply_transforms(
    stylesheet: Stylesheet, custom_transforms: Iterable[Transform] | None = None
) -> Stylesheet:
    """Run the built-in transforms, then *custom_transforms*, over *stylesheet*."""
    for transform in [*BUILTIN_TRANSFORMS, *(custom_transforms or ())]:
        stylesheet = transform.apply(stylesheet)
    return stylesheet


__all__ = [
    "BUILTIN_TRANSFORMS",
    "EvaluationError",
    "Evaluator",
    "Transform",
    "apply_transforms",
    "combine",
    "evaluate",
]
