"""ICSS model layer -- public type re-exports."""

from icss.model.ast import (
    AddOperation,
    BoolLiteral,
    ColorLiteral,
    Declaration,
    ElseClause,
    Expression,
    IfClause,
    Literal,
    Member,
    MultiplyOperation,
    Node,
    Operation,
    PercentageLiteral,
    PixelLiteral,
    ScalarLiteral,
    Selector,
    Stylerule,
    Stylesheet,
    SubtractOperation,
    TopLevelMember,
    VariableAssignment,
    VariableReference,
    collect_diagnostics,
    has_errors,
    walk,
)
from icss.model.diagnostic import Diagnostic, ErrorKind
from icss.model.types import ExpressionType

__all__ = [
    # structure
    "Node",
    "Stylesheet",
    "Stylerule",
    "Selector",
    "Declaration",
    "VariableAssignment",
    "IfClause",
    "ElseClause",
    "Member",
    "TopLevelMember",
    # expressions
    "Expression",
    "Literal",
    "PixelLiteral",
    "PercentageLiteral",
    "ColorLiteral",
    "ScalarLiteral",
    "BoolLiteral",
    "VariableReference",
    "Operation",
    "AddOperation",
    "SubtractOperation",
    "MultiplyOperation",
    # types
    "ExpressionType",
    # diagnostic
    "ErrorKind",
    "Diagnostic",
    "walk",
    "collect_diagnostics",
    "has_errors",
]
