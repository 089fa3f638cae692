"""Type rules for ICSS declarations, conditions, and operations.

Each check takes already-inferred types and returns a Diagnostic describing
the violation, or None when the rule holds.  The checker decides which node
the diagnostic is attached to.
"""

from __future__ import annotations

from typing import Mapping

from icss.model.ast import MultiplyOperation, Operation
from icss.model.diagnostic import Diagnostic, ErrorKind
from icss.model.types import ExpressionType


# ---------------------------------------------------------------------------
# Known property types
# ---------------------------------------------------------------------------

# Properties not listed here are accepted with any value type.
PROPERTY_TYPES: Mapping[str, ExpressionType] = {
    "width": ExpressionType.PIXEL,
    "color": ExpressionType.COLOR,
    "background-color": ExpressionType.COLOR,
}

# Operand types that may never take part in arithmetic, checked in order.
_EXCLUDED_OPERANDS: tuple[tuple[ExpressionType, str, str], ...] = (
    (ExpressionType.COLOR, "color_in_operation", "Colors cannot be used in operations"),
    (ExpressionType.BOOL, "bool_in_operation", "Booleans cannot be used in operations"),
)


def merged_property_types(
    overrides: Mapping[str, ExpressionType] | None = None,
) -> dict[str, ExpressionType]:
    """Return the built-in property table with *overrides* applied on top."""
    table = dict(PROPERTY_TYPES)
    if overrides:
        table.update(overrides)
    return table


# ---------------------------------------------------------------------------
# Declarations and conditions (TYPE errors)
# ---------------------------------------------------------------------------


def check_property_type(
    property_name: str,
    actual: ExpressionType | None,
    property_types: Mapping[str, ExpressionType],
    selector: str | None = None,
) -> Diagnostic | None:
    """A known property must receive a value of its declared type."""
    required = property_types.get(property_name)
    if required is None or actual is required:
        return None
    return Diagnostic(
        rule="property_type",
        kind=ErrorKind.TYPE,
        message=(
            f"Only {required.value} values can be assigned to property "
            f"'{property_name}'"
        ),
        selector=selector,
    )


def check_condition_type(
    actual: ExpressionType | None, selector: str | None = None
) -> Diagnostic | None:
    """An if-clause condition must be boolean."""
    if actual is ExpressionType.BOOL:
        return None
    return Diagnostic(
        rule="condition_not_bool",
        kind=ErrorKind.TYPE,
        message="If-clause condition must be a boolean",
        selector=selector,
    )


def undefined_variable(name: str, selector: str | None = None) -> Diagnostic:
    return Diagnostic(
        rule="undefined_variable",
        kind=ErrorKind.UNRESOLVED,
        message=f"Variable {name} is not defined",
        selector=selector,
    )


# ---------------------------------------------------------------------------
# Operations (OPERAND errors)
# ---------------------------------------------------------------------------


def check_operands(
    operation: Operation,
    left: ExpressionType,
    right: ExpressionType,
    selector: str | None = None,
) -> Diagnostic | None:
    """Validate operand types of a binary operation.

    Excluded operand types (colors first) take priority over the
    operator-specific arity rules.
    """
    for excluded, rule, message in _EXCLUDED_OPERANDS:
        if left is excluded or right is excluded:
            return Diagnostic(
                rule=rule, kind=ErrorKind.OPERAND, message=message, selector=selector
            )

    if isinstance(operation, MultiplyOperation):
        if left is not ExpressionType.SCALAR and right is not ExpressionType.SCALAR:
            return Diagnostic(
                rule="scalar_required",
                kind=ErrorKind.OPERAND,
                message="At least one operand of * must be a scalar",
                selector=selector,
            )
        return None

    if left is not right:
        return Diagnostic(
            rule="operand_mismatch",
            kind=ErrorKind.OPERAND,
            message=(
                f"Operands of + and - must be of the same type "
                f"(got {left.value} {operation.symbol} {right.value})"
            ),
            selector=selector,
        )
    return None


def operation_type(
    operation: Operation, left: ExpressionType, right: ExpressionType
) -> ExpressionType:
    """Result type of an operation whose operands passed :func:`check_operands`."""
    if isinstance(operation, MultiplyOperation):
        return right if left is ExpressionType.SCALAR else left
    return left
