"""Tests for CSS text generation."""

import pytest

from icss.config import CompilerConfig
from icss.generator import GenerationError, Generator, generate, render_literal
from icss.model import (
    AddOperation,
    BoolLiteral,
    ColorLiteral,
    Declaration,
    IfClause,
    PercentageLiteral,
    PixelLiteral,
    ScalarLiteral,
    Selector,
    Stylerule,
    Stylesheet,
    VariableAssignment,
    VariableReference,
)


def _rule(*body, selectors=None) -> Stylerule:
    return Stylerule(selectors=selectors or [Selector("tag", "p")], body=list(body))


class TestRenderLiteral:
    @pytest.mark.parametrize(
        "literal, text",
        [
            (PixelLiteral(10), "10px"),
            (PixelLiteral(-5), "-5px"),
            (PercentageLiteral(50), "50%"),
            (ColorLiteral("#AbC"), "#AbC"),
            (ScalarLiteral(3), "3"),
            (BoolLiteral(True), "TRUE"),
            (BoolLiteral(False), "FALSE"),
        ],
    )
    def test_literal_text(self, literal, text):
        assert render_literal(literal) == text

    def test_unfolded_expression_rejected(self):
        with pytest.raises(GenerationError):
            render_literal(AddOperation(PixelLiteral(1), PixelLiteral(2)))

    def test_variable_reference_rejected(self):
        with pytest.raises(GenerationError):
            render_literal(VariableReference("X"))


class TestGenerator:
    def test_single_rule(self):
        sheet = Stylesheet(members=[_rule(Declaration("width", PixelLiteral(10)))])
        assert generate(sheet) == "p {\n  width: 10px;\n}\n"

    def test_rules_separated_by_blank_line(self):
        sheet = Stylesheet(
            members=[
                _rule(Declaration("width", PixelLiteral(1))),
                _rule(Declaration("color", ColorLiteral("#fff")), selectors=[Selector("id", "menu")]),
            ]
        )
        assert generate(sheet) == (
            "p {\n  width: 1px;\n}\n"
            "\n"
            "#menu {\n  color: #fff;\n}\n"
        )

    def test_declaration_order_preserved(self):
        sheet = Stylesheet(
            members=[
                _rule(
                    Declaration("color", ColorLiteral("#000")),
                    Declaration("width", PixelLiteral(2)),
                    Declaration("color", ColorLiteral("#111")),
                )
            ]
        )
        lines = generate(sheet).splitlines()
        assert lines[1:4] == ["  color: #000;", "  width: 2px;", "  color: #111;"]

    def test_selector_list_joined(self):
        rule = _rule(
            Declaration("width", PixelLiteral(1)),
            selectors=[Selector("tag", "a"), Selector("class", "menu")],
        )
        assert generate(Stylesheet(members=[rule])).startswith("a, .menu {\n")

    def test_empty_rule(self):
        assert generate(Stylesheet(members=[_rule()])) == "p {\n}\n"

    def test_empty_stylesheet(self):
        assert generate(Stylesheet(members=[])) == ""

    def test_custom_indent_and_separator(self):
        sheet = Stylesheet(
            members=[
                _rule(Declaration("width", PixelLiteral(1))),
                _rule(Declaration("width", PixelLiteral(2))),
            ]
        )
        config = CompilerConfig(indent="\t", rule_separator="")
        assert generate(sheet, config) == "p {\n\twidth: 1px;\n}\np {\n\twidth: 2px;\n}\n"

    def test_generator_attributes(self):
        gen = Generator(indent="    ")
        assert gen.indent == "    "
        assert gen.rule_separator == "\n"


class TestLeftovers:
    def test_top_level_assignment_rejected(self):
        sheet = Stylesheet(members=[VariableAssignment("X", PixelLiteral(1))])
        with pytest.raises(GenerationError):
            generate(sheet)

    def test_if_clause_rejected(self):
        sheet = Stylesheet(members=[_rule(IfClause(condition=BoolLiteral(True), body=[]))])
        with pytest.raises(GenerationError, match="IfClause"):
            generate(sheet)

    def test_unfolded_declaration_rejected(self):
        sheet = Stylesheet(members=[_rule(Declaration("width", VariableReference("W")))])
        with pytest.raises(GenerationError):
            generate(sheet)
