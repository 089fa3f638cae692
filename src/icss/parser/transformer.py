"""Lark Transformer that converts an ICSS parse tree into the AST."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import (
    LarkError,
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedInput,
    UnexpectedToken,
)

from icss.model.ast import (
    AddOperation,
    BoolLiteral,
    ColorLiteral,
    Declaration,
    ElseClause,
    Expression,
    IfClause,
    Member,
    MultiplyOperation,
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
)
from icss.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class IcssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into AST nodes, bottom-up."""

    # ---- literals ----

    def pixel_literal(self, items: list[Token]) -> PixelLiteral:
        return PixelLiteral(int(str(items[0])[: -len("px")]))

    def percentage_literal(self, items: list[Token]) -> PercentageLiteral:
        return PercentageLiteral(int(str(items[0])[:-1]))

    def color_literal(self, items: list[Token]) -> ColorLiteral:
        return ColorLiteral(str(items[0]))

    def scalar_literal(self, items: list[Token]) -> ScalarLiteral:
        return ScalarLiteral(int(items[0]))

    def true_literal(self, items: list[Token]) -> BoolLiteral:
        return BoolLiteral(True)

    def false_literal(self, items: list[Token]) -> BoolLiteral:
        return BoolLiteral(False)

    def variable_reference(self, items: list[Token]) -> VariableReference:
        return VariableReference(str(items[0]))

    # ---- operations ----

    def add(self, items: list[Expression]) -> AddOperation:
        return AddOperation(items[0], items[1])

    def subtract(self, items: list[Expression]) -> SubtractOperation:
        return SubtractOperation(items[0], items[1])

    def multiply(self, items: list[Expression]) -> MultiplyOperation:
        return MultiplyOperation(items[0], items[1])

    # ---- selectors ----

    def tag_selector(self, items: list[Token]) -> Selector:
        return Selector(kind="tag", value=str(items[0]))

    def class_selector(self, items: list[Token]) -> Selector:
        return Selector(kind="class", value=str(items[0])[1:])

    def id_selector(self, items: list[Token]) -> Selector:
        return Selector(kind="id", value=str(items[0])[1:])

    # ---- structural ----

    def assignment(self, items: list[object]) -> VariableAssignment:
        return VariableAssignment(str(items[0]), items[1])  # type: ignore[arg-type]

    def declaration(self, items: list[object]) -> Declaration:
        return Declaration(str(items[0]), items[1])  # type: ignore[arg-type]

    def body(self, items: list[Member]) -> list[Member]:
        return list(items)

    def else_clause(self, items: list[object]) -> ElseClause:
        return ElseClause(body=items[0])  # type: ignore[arg-type]

    def if_clause(self, items: list[object]) -> IfClause:
        # Items are: condition, body, optional else clause
        else_clause = items[2] if len(items) > 2 else None
        return IfClause(
            condition=items[0],  # type: ignore[arg-type]
            body=items[1],  # type: ignore[arg-type]
            else_clause=else_clause,  # type: ignore[arg-type]
        )

    def stylerule(self, items: list[object]) -> Stylerule:
        selectors = [item for item in items if isinstance(item, Selector)]
        return Stylerule(selectors=selectors, body=items[-1])  # type: ignore[arg-type]

    def stylesheet(self, items: list[TopLevelMember]) -> Stylesheet:
        return Stylesheet(members=list(items))

    def start(self, items: list[Stylesheet]) -> Stylesheet:
        return items[0]


def _describe(error: UnexpectedInput) -> str:
    if isinstance(error, UnexpectedCharacters):
        return f"unexpected character {error.char!r}"
    if isinstance(error, UnexpectedEOF):
        return "unexpected end of input"
    if isinstance(error, UnexpectedToken):
        token = error.token
        found = "end of input" if token.type == "$END" else repr(str(token))
        expected = ", ".join(sorted(error.expected))
        return f"unexpected {found}; expected one of: {expected}"
    return str(error)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        lexer="contextual",
        start="start",
    )


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse ICSS source text into a Stylesheet AST."""
    try:
        tree = _parser().parse(source)
    except UnexpectedInput as e:
        raise ParseError(_describe(e), line=e.line, column=e.column) from e
    except LarkError as e:
        raise ParseError(str(e)) from e
    return IcssTransformer().transform(tree)
