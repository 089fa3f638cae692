"""CLI command: icss inspect -- display the stylesheet AST."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from icss.generator import render_literal
from icss.model.ast import (
    Declaration,
    ElseClause,
    Expression,
    IfClause,
    Literal,
    Node,
    Operation,
    Stylerule,
    Stylesheet,
    VariableAssignment,
    VariableReference,
)
from icss.parser import ParseError
from icss.pipeline import CompilationError, Compiler


def format_expression(expression: Expression) -> str:
    if isinstance(expression, Literal):
        return f"{type(expression).__name__}({render_literal(expression)})"
    if isinstance(expression, VariableReference):
        return expression.name
    if isinstance(expression, Operation):
        lhs = format_expression(expression.lhs)
        rhs = format_expression(expression.rhs)
        return f"({lhs} {expression.symbol} {rhs})"
    raise TypeError(f"Unexpected expression: {expression!r}")


def format_tree(node: Node, depth: int = 0) -> list[str]:
    """Render *node* and its members as indented lines."""
    pad = "  " * depth
    if isinstance(node, Stylesheet):
        lines = [f"{pad}Stylesheet"]
    elif isinstance(node, Stylerule):
        lines = [f"{pad}Stylerule {node.selector_text}"]
    elif isinstance(node, Declaration):
        lines = [f"{pad}Declaration {node.property}: {format_expression(node.expression)}"]
    elif isinstance(node, VariableAssignment):
        lines = [f"{pad}Assignment {node.name} := {format_expression(node.expression)}"]
    elif isinstance(node, IfClause):
        lines = [f"{pad}If [{format_expression(node.condition)}]"]
    elif isinstance(node, ElseClause):
        lines = [f"{pad}Else"]
    else:
        raise TypeError(f"Unexpected node: {node!r}")

    if node.error is not None:
        lines[0] += f"  !! {node.error.message}"
    for child in node.children():
        if isinstance(child, Expression):
            continue
        lines.extend(format_tree(child, depth + 1))
    return lines


@click.command()
@click.argument("icssfile", type=click.Path(exists=True))
@click.option(
    "--evaluated",
    is_flag=True,
    help="Show the tree after checking and evaluation instead of as parsed.",
)
def inspect(icssfile: str, evaluated: bool) -> None:
    """Parse and check an ICSS file, then display its syntax tree.

    Nodes that carry a diagnostic are marked with ``!!``.
    """
    source_path = Path(icssfile)
    compiler = Compiler()

    try:
        source = source_path.read_text(encoding="utf-8")
        stylesheet = compiler.parse(source)
        if evaluated:
            compiler.check_or_raise(stylesheet)
            compiler.evaluate(stylesheet)
        else:
            compiler.check(stylesheet)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except CompilationError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)

    click.echo(f"Rules: {len(stylesheet.rules)}")
    click.echo()
    for line in format_tree(stylesheet):
        click.echo(line)
