"""Type checker: infers expression types and attaches diagnostics in place."""

from __future__ import annotations

from typing import Callable, Mapping, Optional

from icss.checker import rules
from icss.config import CompilerConfig
from icss.model.ast import (
    Declaration,
    ElseClause,
    Expression,
    IfClause,
    Literal,
    Member,
    Operation,
    Stylerule,
    Stylesheet,
    VariableAssignment,
    VariableReference,
)
from icss.model.types import ExpressionType
from icss.scope import ScopeChain

TypeScopes = ScopeChain[Optional[ExpressionType]]
ScopeFactory = Callable[[], TypeScopes]


class Checker:
    """Depth-first, non-aborting type checker.

    One scope is opened for the stylesheet and one for every rule, if-body
    and else-body.  Checking never raises on bad input; every violation is
    recorded on the offending node so a single run surfaces as many
    independent problems as possible.
    """

    def __init__(
        self,
        property_types: Mapping[str, ExpressionType] | None = None,
        scope_factory: ScopeFactory | None = None,
    ) -> None:
        self.property_types = rules.merged_property_types(property_types)
        self._scope_factory: ScopeFactory = scope_factory or ScopeChain

    def check(self, stylesheet: Stylesheet) -> None:
        scopes = self._scope_factory()
        with scopes.scope():
            for member in stylesheet.members:
                if isinstance(member, VariableAssignment):
                    self._check_assignment(member, scopes, None)
                elif isinstance(member, Stylerule):
                    self._check_stylerule(member, scopes)
                else:
                    raise TypeError(f"Unexpected stylesheet member: {member!r}")

    # ---- structure ----

    def _check_stylerule(self, rule: Stylerule, scopes: TypeScopes) -> None:
        with scopes.scope():
            self._check_body(rule.body, scopes, rule.selector_text)

    def _check_body(
        self, body: list[Member], scopes: TypeScopes, selector: str
    ) -> None:
        for member in body:
            if isinstance(member, Declaration):
                self._check_declaration(member, scopes, selector)
            elif isinstance(member, VariableAssignment):
                self._check_assignment(member, scopes, selector)
            elif isinstance(member, IfClause):
                self._check_if_clause(member, scopes, selector)
            else:
                raise TypeError(f"Unexpected rule member: {member!r}")

    def _check_if_clause(
        self, clause: IfClause, scopes: TypeScopes, selector: str
    ) -> None:
        condition_type = self.infer(clause.condition, scopes, selector)
        diagnostic = rules.check_condition_type(condition_type, selector)
        if diagnostic:
            clause.set_error(diagnostic)

        with scopes.scope():
            self._check_body(clause.body, scopes, selector)
        if clause.else_clause is not None:
            self._check_else_clause(clause.else_clause, scopes, selector)

    def _check_else_clause(
        self, clause: ElseClause, scopes: TypeScopes, selector: str
    ) -> None:
        with scopes.scope():
            self._check_body(clause.body, scopes, selector)

    def _check_declaration(
        self, declaration: Declaration, scopes: TypeScopes, selector: str
    ) -> None:
        actual = self.infer(declaration.expression, scopes, selector)
        diagnostic = rules.check_property_type(
            declaration.property, actual, self.property_types, selector
        )
        if diagnostic:
            declaration.set_error(diagnostic)

    def _check_assignment(
        self,
        assignment: VariableAssignment,
        scopes: TypeScopes,
        selector: str | None,
    ) -> None:
        # Unresolved types are bound too, so later uses are not reported twice.
        scopes.bind(assignment.name, self.infer(assignment.expression, scopes, selector))

    # ---- expressions ----

    def infer(
        self,
        expression: Expression,
        scopes: TypeScopes,
        selector: str | None = None,
    ) -> ExpressionType | None:
        """Return the type of *expression*, or None if it could not be typed."""
        if isinstance(expression, Literal):
            return expression.expression_type

        if isinstance(expression, VariableReference):
            if expression.name not in scopes:
                expression.set_error(rules.undefined_variable(expression.name, selector))
                return None
            return scopes.resolve(expression.name)

        if isinstance(expression, Operation):
            left = self.infer(expression.lhs, scopes, selector)
            right = self.infer(expression.rhs, scopes, selector)
            if left is None or right is None:
                return None
            diagnostic = rules.check_operands(expression, left, right, selector)
            if diagnostic:
                expression.set_error(diagnostic)
                return None
            return rules.operation_type(expression, left, right)

        raise TypeError(f"Unexpected expression: {expression!r}")


def check(stylesheet: Stylesheet, config: CompilerConfig | None = None) -> None:
    """Type-check *stylesheet*, attaching diagnostics to offending nodes."""
    config = config or CompilerConfig()
    Checker(property_types=config.property_types).check(stylesheet)
