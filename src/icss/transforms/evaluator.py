"""Evaluator transform: folds expressions to literals and flattens if-clauses.

Must only run on a stylesheet that the checker left without diagnostics.
Afterwards the tree contains only style rules whose bodies are declarations
with literal values, in document and branch-resolved order.
"""

from __future__ import annotations

import operator
from dataclasses import replace
from typing import Callable

from icss.model.ast import (
    AddOperation,
    BoolLiteral,
    Declaration,
    Expression,
    IfClause,
    Literal,
    Member,
    MultiplyOperation,
    Operation,
    PercentageLiteral,
    PixelLiteral,
    ScalarLiteral,
    Stylerule,
    Stylesheet,
    SubtractOperation,
    TopLevelMember,
    VariableAssignment,
    VariableReference,
)
from icss.scope import ScopeChain

ValueScopes = ScopeChain[Literal]
ScopeFactory = Callable[[], ValueScopes]

_MAGNITUDES = (PixelLiteral, PercentageLiteral, ScalarLiteral)
_ADDITIVE: dict[type, Callable[[int, int], int]] = {
    AddOperation: operator.add,
    SubtractOperation: operator.sub,
}


class EvaluationError(Exception):
    """Raised when the tree cannot be folded (it was not checked first)."""


def _snapshot_scopes() -> ValueScopes:
    return ScopeChain(snapshot=True)


def combine(operation: Operation, left: Literal, right: Literal) -> Literal:
    """Apply *operation*'s numeric rule to two folded operands."""
    if isinstance(operation, MultiplyOperation):
        if isinstance(left, ScalarLiteral) and isinstance(right, _MAGNITUDES):
            return type(right)(left.value * right.value)
        if isinstance(right, ScalarLiteral) and isinstance(left, _MAGNITUDES):
            return type(left)(left.value * right.value)
    else:
        apply = _ADDITIVE[type(operation)]
        if type(left) is type(right) and isinstance(left, _MAGNITUDES):
            return type(left)(apply(left.value, right.value))
        # A scalar next to a pixel is taken as a raw pixel magnitude.
        if {type(left), type(right)} == {PixelLiteral, ScalarLiteral}:
            return PixelLiteral(apply(left.value, right.value))  # type: ignore[attr-defined]

    raise EvaluationError(
        f"Cannot evaluate {left!r} {operation.symbol} {right!r}"
    )


class Evaluator:
    """Fold every expression and splice selected if/else branches in place."""

    def __init__(self, scope_factory: ScopeFactory | None = None) -> None:
        self._scope_factory: ScopeFactory = scope_factory or _snapshot_scopes

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        scopes = self._scope_factory()
        members: list[TopLevelMember] = []
        with scopes.scope():
            for member in stylesheet.members:
                if isinstance(member, VariableAssignment):
                    scopes.bind(member.name, self.fold(member.expression, scopes))
                elif isinstance(member, Stylerule):
                    self._apply_stylerule(member, scopes)
                    members.append(member)
                else:
                    raise TypeError(f"Unexpected stylesheet member: {member!r}")
        stylesheet.members = members
        return stylesheet

    def _apply_stylerule(self, rule: Stylerule, scopes: ValueScopes) -> None:
        with scopes.scope():
            rule.body = self._flatten(rule.body, scopes)

    def _flatten(self, body: list[Member], scopes: ValueScopes) -> list[Member]:
        """Return the evaluated replacement for *body*.

        Assignments are bound and dropped, declarations are folded, and each
        if-clause is replaced by its selected branch at the same position.
        """
        result: list[Member] = []
        for member in body:
            if isinstance(member, Declaration):
                member.expression = self.fold(member.expression, scopes)
                result.append(member)
            elif isinstance(member, VariableAssignment):
                scopes.bind(member.name, self.fold(member.expression, scopes))
            elif isinstance(member, IfClause):
                condition = self.fold(member.condition, scopes)
                if not isinstance(condition, BoolLiteral):
                    result.append(member)
                    continue
                result.extend(self._select_branch(member, condition.value, scopes))
            else:
                raise TypeError(f"Unexpected rule member: {member!r}")
        return result

    def _select_branch(
        self, clause: IfClause, taken: bool, scopes: ValueScopes
    ) -> list[Member]:
        if taken:
            branch = clause.body
        elif clause.else_clause is not None:
            branch = clause.else_clause.body
        else:
            branch = []
        with scopes.scope():
            return self._flatten(branch, scopes)

    def fold(self, expression: Expression, scopes: ValueScopes) -> Literal:
        """Reduce *expression* to the literal it computes to."""
        if isinstance(expression, Literal):
            return expression

        if isinstance(expression, VariableReference):
            value = scopes.resolve(expression.name)
            if value is None:
                raise EvaluationError(f"Variable {expression.name} is not defined")
            # Each use site gets its own literal node.
            return replace(value)

        if isinstance(expression, Operation):
            left = self.fold(expression.lhs, scopes)
            right = self.fold(expression.rhs, scopes)
            return combine(expression, left, right)

        raise TypeError(f"Unexpected expression: {expression!r}")


def evaluate(stylesheet: Stylesheet) -> Stylesheet:
    """Evaluate *stylesheet* in place and return it."""
    return Evaluator().apply(stylesheet)
