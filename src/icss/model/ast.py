"""ICSS abstract syntax tree: stylesheet, rules, members, and expressions.

The tree is built once by the parser, annotated in place by the checker and
rewritten in place by the evaluator.  Every node has an ``error`` slot that
holds at most one :class:`~icss.model.diagnostic.Diagnostic`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Union

from icss.model.diagnostic import Diagnostic
from icss.model.types import ExpressionType


@dataclass
class Node:
    """Base class for every AST node."""

    error: Diagnostic | None = field(default=None, compare=False, repr=False, kw_only=True)

    def set_error(self, diagnostic: Diagnostic) -> None:
        """Attach *diagnostic* unless the node already carries one."""
        if self.error is None:
            self.error = diagnostic

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def children(self) -> list[Node]:
        return []


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


@dataclass
class Expression(Node):
    """Base class for expressions."""


@dataclass
class Literal(Expression):
    """A terminal, already-known value."""

    expression_type: ClassVar[ExpressionType]


@dataclass
class PixelLiteral(Literal):
    expression_type: ClassVar[ExpressionType] = ExpressionType.PIXEL

    value: int


@dataclass
class PercentageLiteral(Literal):
    expression_type: ClassVar[ExpressionType] = ExpressionType.PERCENTAGE

    value: int


@dataclass
class ColorLiteral(Literal):
    expression_type: ClassVar[ExpressionType] = ExpressionType.COLOR

    value: str


@dataclass
class ScalarLiteral(Literal):
    expression_type: ClassVar[ExpressionType] = ExpressionType.SCALAR

    value: int


@dataclass
class BoolLiteral(Literal):
    expression_type: ClassVar[ExpressionType] = ExpressionType.BOOL

    value: bool


@dataclass
class VariableReference(Expression):
    """A use of a variable, resolved through the scope chain."""

    name: str


@dataclass
class Operation(Expression):
    """A binary arithmetic operation."""

    symbol: ClassVar[str]

    lhs: Expression
    rhs: Expression

    def children(self) -> list[Node]:
        return [self.lhs, self.rhs]


@dataclass
class AddOperation(Operation):
    symbol: ClassVar[str] = "+"


@dataclass
class SubtractOperation(Operation):
    symbol: ClassVar[str] = "-"


@dataclass
class MultiplyOperation(Operation):
    symbol: ClassVar[str] = "*"


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Selector:
    """A tag, class, or id selector.  The value is opaque to the compiler."""

    kind: str  # "tag", "class", "id"
    value: str  # "a", "menu", "header"

    def __str__(self) -> str:
        if self.kind == "class":
            return f".{self.value}"
        if self.kind == "id":
            return f"#{self.value}"
        return self.value


@dataclass
class Declaration(Node):
    """A ``property: expression;`` pair inside a rule."""

    property: str
    expression: Expression

    def children(self) -> list[Node]:
        return [self.expression]


@dataclass
class VariableAssignment(Node):
    """A ``Name := expression;`` binding."""

    name: str
    expression: Expression

    def children(self) -> list[Node]:
        return [self.expression]


@dataclass
class ElseClause(Node):
    body: list[Member] = field(default_factory=list)

    def children(self) -> list[Node]:
        return list(self.body)


@dataclass
class IfClause(Node):
    """A conditional block, removed from the tree by the evaluator."""

    condition: Expression
    body: list[Member] = field(default_factory=list)
    else_clause: ElseClause | None = None

    def children(self) -> list[Node]:
        nodes: list[Node] = [self.condition, *self.body]
        if self.else_clause is not None:
            nodes.append(self.else_clause)
        return nodes


@dataclass
class Stylerule(Node):
    """One or more selectors plus an ordered body of members."""

    selectors: list[Selector]
    body: list[Member] = field(default_factory=list)

    @property
    def selector_text(self) -> str:
        return ", ".join(str(s) for s in self.selectors)

    def children(self) -> list[Node]:
        return list(self.body)


@dataclass
class Stylesheet(Node):
    """Root of the tree: global assignments and style rules in source order."""

    members: list[TopLevelMember] = field(default_factory=list)

    @property
    def rules(self) -> list[Stylerule]:
        return [m for m in self.members if isinstance(m, Stylerule)]

    def children(self) -> list[Node]:
        return list(self.members)


Member = Union[Declaration, VariableAssignment, IfClause]
TopLevelMember = Union[VariableAssignment, Stylerule]


# ---------------------------------------------------------------------------
# Traversal helpers
# ---------------------------------------------------------------------------


def walk(node: Node) -> Iterator[Node]:
    """Yield *node* and all of its descendants depth-first in document order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children()))


def collect_diagnostics(root: Node) -> list[Diagnostic]:
    """Return every diagnostic attached anywhere under *root*."""
    return [n.error for n in walk(root) if n.error is not None]


def has_errors(root: Node) -> bool:
    """Return True if any node under *root* carries a diagnostic."""
    return any(n.error is not None for n in walk(root))
