"""CSS generator: serialises an evaluated stylesheet to text."""

from __future__ import annotations

from icss.config import CompilerConfig
from icss.model.ast import (
    BoolLiteral,
    ColorLiteral,
    Declaration,
    Expression,
    PercentageLiteral,
    PixelLiteral,
    ScalarLiteral,
    Stylerule,
    Stylesheet,
)


class GenerationError(Exception):
    """Raised when the stylesheet still holds unevaluated structure."""


def render_literal(expression: Expression) -> str:
    """Render a folded literal as CSS value text."""
    if isinstance(expression, PixelLiteral):
        return f"{expression.value}px"
    if isinstance(expression, PercentageLiteral):
        return f"{expression.value}%"
    if isinstance(expression, ColorLiteral):
        return expression.value
    if isinstance(expression, ScalarLiteral):
        return str(expression.value)
    if isinstance(expression, BoolLiteral):
        return "TRUE" if expression.value else "FALSE"
    raise GenerationError(f"Expression was not evaluated: {expression!r}")


class Generator:
    """Turn rules and literal declarations into CSS text."""

    def __init__(self, indent: str = "  ", rule_separator: str = "\n") -> None:
        self.indent = indent
        self.rule_separator = rule_separator

    def generate(self, stylesheet: Stylesheet) -> str:
        blocks: list[str] = []
        for member in stylesheet.members:
            if not isinstance(member, Stylerule):
                raise GenerationError(
                    f"Only style rules may remain after evaluation, found {member!r}"
                )
            blocks.append(self._generate_rule(member))
        return self.rule_separator.join(blocks)

    def _generate_rule(self, rule: Stylerule) -> str:
        lines = [f"{rule.selector_text} {{"]
        for member in rule.body:
            if not isinstance(member, Declaration):
                raise GenerationError(
                    f"Only declarations may remain in rule '{rule.selector_text}', "
                    f"found {type(member).__name__}"
                )
            lines.append(self._generate_declaration(member))
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _generate_declaration(self, declaration: Declaration) -> str:
        value = render_literal(declaration.expression)
        return f"{self.indent}{declaration.property}: {value};"


def generate(stylesheet: Stylesheet, config: CompilerConfig | None = None) -> str:
    """Generate CSS text for an evaluated *stylesheet*."""
    config = config or CompilerConfig()
    return Generator(indent=config.indent, rule_separator=config.rule_separator).generate(
        stylesheet
    )
