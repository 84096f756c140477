"""CLI entry point for numeral-calc.

Invoked as::

    numcalc [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m numcalc.cli.main

Commands
--------
eval        Evaluate a single expression
parse       Dump the parsed expression to JSON or YAML
repl        Evaluate expressions read line by line from stdin
demo        Evaluate the reference sample expressions
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from numcalc.dispatcher import Calculator

console = Console()
err_console = Console(stderr=True)

DEMO_EXPRESSIONS: tuple[str, ...] = (
    "1 + 2",
    "VI / III",
    "I - II",
    "I + 1",
    "1",
    "1 + 2 + 3",
)

_system_option = click.option(
    "--system",
    "systems",
    multiple=True,
    type=click.Choice(["roman", "arabic"], case_sensitive=False),
    help="Numeral system to try, in order (repeatable; defaults to roman, arabic)",
)


def _make_calculator(systems: tuple[str, ...]) -> "Calculator":
    """Build a Calculator trying ``systems`` in order, or the defaults."""
    from numcalc.dispatcher import Calculator
    from numcalc.interpreters import get_interpreter

    if not systems:
        return Calculator()
    return Calculator([get_interpreter(name) for name in systems])


def _print_error(message: str) -> None:
    err_console.print(Text.assemble(("Error:", "red"), " ", message))


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="numeral-calc")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log interpreter trials to stderr")
def cli(verbose: bool) -> None:
    """Two-operand arithmetic in Roman or Arabic numerals."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from numcalc import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]numeral-calc[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# eval command
# ---------------------------------------------------------------------------


@cli.command(name="eval")
@click.argument("expression")
@_system_option
def eval_command(expression: str, systems: tuple[str, ...]) -> None:
    """Evaluate EXPRESSION and print the result.

    EXPRESSION is two operands and one of + - * /, e.g. "VI / III".
    """
    from numcalc.errors import CalculatorError

    calculator = _make_calculator(systems)
    try:
        result = calculator.evaluate(expression.strip())
    except CalculatorError as exc:
        _print_error(str(exc))
        sys.exit(1)
    console.print(result, markup=False, highlight=False)


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("expression")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
@_system_option
def parse_command(
    expression: str, output_format: str, output: str | None, systems: tuple[str, ...]
) -> None:
    """Parse EXPRESSION and dump it without evaluating."""
    from numcalc.errors import CalculatorError
    from numcalc.expression import ExpressionSerializer

    calculator = _make_calculator(systems)
    try:
        found = calculator.match(expression.strip())
    except CalculatorError as exc:
        _print_error(str(exc))
        sys.exit(1)

    serializer = ExpressionSerializer()

    if output_format.lower() == "json":
        text = serializer.to_json(found, indent=2)
        lang = "json"
    else:
        text = serializer.to_yaml(found)
        lang = "yaml"

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Expression written to[/green] {output}")
    else:
        console.print(Syntax(text, lang))


# ---------------------------------------------------------------------------
# repl command
# ---------------------------------------------------------------------------


@cli.command(name="repl")
@_system_option
def repl_command(systems: tuple[str, ...]) -> None:
    """Evaluate one expression per line from stdin until end of input.

    Blank lines are skipped.  Errors are reported on stderr and do not
    stop the loop.
    """
    from numcalc.errors import CalculatorError

    calculator = _make_calculator(systems)
    stdin = click.get_text_stream("stdin")
    for line in stdin:
        text = line.strip()
        if not text:
            continue
        try:
            console.print(calculator.evaluate(text), markup=False, highlight=False)
        except CalculatorError as exc:
            _print_error(str(exc))


# ---------------------------------------------------------------------------
# demo command
# ---------------------------------------------------------------------------


@cli.command(name="demo")
def demo_command() -> None:
    """Evaluate the reference sample expressions and tabulate the outcome."""
    from numcalc.dispatcher import Calculator
    from numcalc.errors import CalculatorError

    calculator = Calculator()

    table = Table(title="numeral-calc samples", show_lines=True)
    table.add_column("Input", style="bold")
    table.add_column("Result")

    for source in DEMO_EXPRESSIONS:
        try:
            outcome = Text(calculator.evaluate(source), style="green")
        except CalculatorError as exc:
            outcome = Text(f"{type(exc).__name__}: {exc}", style="red")
        table.add_row(Text(source), outcome)

    console.print(table)


if __name__ == "__main__":
    cli()
