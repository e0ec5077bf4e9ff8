"""Tests for syntax tree rendering."""

from __future__ import annotations

from minicalc.core.expression_lang.parser import parse
from minicalc.core.expression_lang.printer import pretty_print


class TestPrettyPrint:
    def test_number(self) -> None:
        assert pretty_print(parse("5").root) == "\n".join(
            [
                "└──NumberExpression",
                "   └──NumberToken 5",
            ]
        )

    def test_binary(self) -> None:
        assert pretty_print(parse("1+2").root) == "\n".join(
            [
                "└──BinaryExpression",
                "   ├──NumberExpression",
                "   │  └──NumberToken 1",
                "   ├──PlusToken",
                "   └──NumberExpression",
                "      └──NumberToken 2",
            ]
        )

    def test_parenthesized(self) -> None:
        assert pretty_print(parse("(3)").root) == "\n".join(
            [
                "└──ParenthesizedExpression",
                "   ├──OpenParanthesisToken",
                "   ├──NumberExpression",
                "   │  └──NumberToken 3",
                "   └──CloseParanthesisToken",
            ]
        )

    def test_missing_number_has_no_value(self) -> None:
        lines = pretty_print(parse("").root).splitlines()
        assert lines[-1] == "   └──NumberToken"

    def test_token_leaf(self) -> None:
        tree = parse("1")
        assert pretty_print(tree.end_of_file_token) == "└──EndOfFileToken"

    def test_long_chain(self) -> None:
        lines = pretty_print(parse("+".join(["1"] * 1500)).root).splitlines()
        assert lines[0] == "└──BinaryExpression"
        assert sum(1 for line in lines if line.endswith("PlusToken")) == 1499
        assert sum(1 for line in lines if line.endswith("NumberToken 1")) == 1500
