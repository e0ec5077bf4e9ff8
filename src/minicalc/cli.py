"""
minicalc CLI.

Commands:
- eval: Evaluate one expression
- tree: Show the syntax tree of one expression
- repl: Read and evaluate lines until an empty line
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from minicalc._version import get_version
from minicalc.core.config import DEFAULT_CONFIG_FILE, CalcConfig, load_config
from minicalc.core.errors import EvaluationError
from minicalc.core.expression_lang import evaluate, parse, pretty_print
from minicalc.core.ir.syntax import SyntaxTree

logger = logging.getLogger(__name__)

console = Console(highlight=False, soft_wrap=True)

TREE_STYLE = "bright_black"
ERROR_STYLE = "red"


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        typer.echo(f"minicalc version {get_version()}")
        raise typer.Exit()


app = typer.Typer(
    help="minicalc: integer arithmetic with +, -, *, / and parentheses",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    config_file: Path = typer.Option(
        Path(DEFAULT_CONFIG_FILE),
        "--config",
        "-c",
        help="TOML file with a [minicalc] section",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (overrides the config file)",
    ),
) -> None:
    """minicalc CLI main callback for global options."""
    try:
        config = load_config(config_file)
        if log_level is not None:
            config = CalcConfig.model_validate({**config.model_dump(), "log_level": log_level})
    except ValidationError as e:
        console.print(f"Invalid configuration: {e}", style=ERROR_STYLE, markup=False)
        raise typer.Exit(code=1)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.debug(f"Loaded configuration: {config}")
    ctx.obj = config


def _print_tree(tree: SyntaxTree) -> None:
    console.print(pretty_print(tree.root), style=TREE_STYLE, markup=False)


def _print_diagnostics(diagnostics: tuple[str, ...]) -> None:
    for diagnostic in diagnostics:
        console.print(diagnostic, style=ERROR_STYLE, markup=False)


def run_line(line: str, config: CalcConfig, show_tree: bool | None = None) -> bool:
    """Run one line through the pipeline and print the outcome.

    Returns:
        True when a result was printed, False on diagnostics or an
        evaluation error.
    """
    tree = parse(line, max_int=config.max_int)

    if show_tree is None:
        show_tree = config.show_tree
    if show_tree:
        _print_tree(tree)

    if tree.has_errors:
        _print_diagnostics(tree.diagnostics)
        return False

    try:
        result = evaluate(tree.root)
    except EvaluationError as e:
        console.print(f"Evaluation error: {e}", style=ERROR_STYLE, markup=False)
        return False

    console.print(str(result), markup=False)
    return True


@app.command(name="eval")
def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to evaluate, e.g. '(1 + 2) * 3'"),
    no_tree: bool = typer.Option(
        False,
        "--no-tree",
        help="Do not print the syntax tree, even if show_tree is set in the config",
    ),
) -> None:
    """Evaluate a single expression."""
    config: CalcConfig = ctx.obj
    if not run_line(expression, config, show_tree=config.show_tree and not no_tree):
        raise typer.Exit(code=1)


@app.command(name="tree")
def tree_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to parse"),
) -> None:
    """Print the syntax tree and any diagnostics without evaluating."""
    config: CalcConfig = ctx.obj
    syntax_tree = parse(expression, max_int=config.max_int)
    _print_tree(syntax_tree)
    if syntax_tree.has_errors:
        _print_diagnostics(syntax_tree.diagnostics)
        raise typer.Exit(code=1)


@app.command(name="repl")
def repl_command(ctx: typer.Context) -> None:
    """Read expressions line by line. An empty line ends the session."""
    config: CalcConfig = ctx.obj

    while True:
        try:
            line = console.input(config.prompt)
        except EOFError:
            break

        if not line.strip():
            break

        run_line(line, config)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
