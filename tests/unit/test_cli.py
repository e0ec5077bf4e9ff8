"""Tests for the minicalc command line."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from minicalc._version import get_version
from minicalc.cli import app

runner = CliRunner()


@pytest.fixture
def no_tree_config(config_file: Path) -> Path:
    """A config file that turns tree printing off."""
    config_file.write_text("[minicalc]\nshow_tree = false\n")
    return config_file


def _lines(output: str) -> list[str]:
    return [line.rstrip() for line in output.splitlines() if line.strip()]


# ---------------------------------------------------------------------------
# minicalc eval
# ---------------------------------------------------------------------------


class TestEval:
    def test_result(self, config_file: Path) -> None:
        result = runner.invoke(app, ["--config", str(config_file), "eval", "1+2*3", "--no-tree"])
        assert result.exit_code == 0
        assert _lines(result.output) == ["7"]

    def test_tree_printed_by_default(self, config_file: Path) -> None:
        result = runner.invoke(app, ["--config", str(config_file), "eval", "(1+2)*3"])
        assert result.exit_code == 0
        lines = _lines(result.output)
        assert lines[0] == "└──BinaryExpression"
        assert "ParenthesizedExpression" in result.output
        assert lines[-1] == "9"

    def test_config_disables_tree(self, no_tree_config: Path) -> None:
        result = runner.invoke(app, ["--config", str(no_tree_config), "eval", "5/2"])
        assert result.exit_code == 0
        assert _lines(result.output) == ["2"]

    def test_diagnostics(self, no_tree_config: Path) -> None:
        result = runner.invoke(app, ["--config", str(no_tree_config), "eval", "1+"])
        assert result.exit_code == 1
        assert _lines(result.output) == [
            "Error: Unexpected token <EndOfFileToken>, expected <NumberToken>"
        ]

    def test_bad_characters(self, no_tree_config: Path) -> None:
        result = runner.invoke(app, ["--config", str(no_tree_config), "eval", "[1]"])
        assert result.exit_code == 1
        assert "Error: Bad character input->  `[`" in result.output
        assert "Error: Bad character input->  `]`" in result.output

    def test_division_by_zero(self, no_tree_config: Path) -> None:
        result = runner.invoke(app, ["--config", str(no_tree_config), "eval", "4/0"])
        assert result.exit_code == 1
        assert "Evaluation error: Division by zero" in result.output

    def test_invalid_config(self, config_file: Path) -> None:
        config_file.write_text("[minicalc]\nmax_int = -5\n")
        result = runner.invoke(app, ["--config", str(config_file), "eval", "1"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_max_int_from_config(self, config_file: Path) -> None:
        config_file.write_text("[minicalc]\nshow_tree = false\nmax_int = 50\n")
        result = runner.invoke(app, ["--config", str(config_file), "eval", "51"])
        assert result.exit_code == 1
        assert "The number 51 is not a valid Int" in result.output


# ---------------------------------------------------------------------------
# minicalc tree
# ---------------------------------------------------------------------------


class TestTree:
    def test_tree_only(self, config_file: Path) -> None:
        result = runner.invoke(app, ["--config", str(config_file), "tree", "7"])
        assert result.exit_code == 0
        assert _lines(result.output) == ["└──NumberExpression", "   └──NumberToken 7"]

    def test_tree_with_diagnostics(self, config_file: Path) -> None:
        result = runner.invoke(app, ["--config", str(config_file), "tree", "(7"])
        assert result.exit_code == 1
        assert "└──ParenthesizedExpression" in result.output
        assert "expected <CloseParanthesisToken>" in result.output


# ---------------------------------------------------------------------------
# minicalc repl
# ---------------------------------------------------------------------------


class TestRepl:
    def test_session_ends_on_empty_line(self, no_tree_config: Path) -> None:
        result = runner.invoke(
            app,
            ["--config", str(no_tree_config), "repl"],
            input="1+2\n10-2-3\n\n99\n",
        )
        assert result.exit_code == 0
        assert "3" in result.output
        assert "5" in result.output
        assert "99" not in result.output

    def test_session_survives_errors(self, no_tree_config: Path) -> None:
        result = runner.invoke(
            app,
            ["--config", str(no_tree_config), "repl"],
            input="1/0\n@\n6*7\n",
        )
        assert result.exit_code == 0
        assert "Evaluation error: Division by zero" in result.output
        assert "Error: Bad character input->  `@`" in result.output
        assert "42" in result.output

    def test_custom_prompt(self, config_file: Path) -> None:
        config_file.write_text('[minicalc]\nprompt = "calc> "\nshow_tree = false\n')
        result = runner.invoke(app, ["--config", str(config_file), "repl"], input="2*2\n")
        assert result.exit_code == 0
        assert "calc> 4" in result.output


class TestVersion:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "minicalc version" in result.output
        assert get_version() in result.output

    def test_help_summary(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "minicalc: integer arithmetic" in result.output


class TestLongInput:
    def test_long_chain(self, config_file: Path) -> None:
        expression = "+".join(["2"] * 2000)
        result = runner.invoke(app, ["--config", str(config_file), "eval", expression, "--no-tree"])
        assert result.exit_code == 0
        assert _lines(result.output) == ["4000"]

    def test_deep_nesting_reports_diagnostic(self, no_tree_config: Path) -> None:
        expression = "(" * 400 + "1" + ")" * 400
        result = runner.invoke(app, ["--config", str(no_tree_config), "eval", expression])
        assert result.exit_code == 1
        assert "Parentheses nested deeper than" in result.output
