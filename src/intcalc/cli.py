"""
intcalc CLI - Entry point.

Reads expressions from the command line or, when none are given, from
standard input one line at a time, printing each result or error.
"""

from __future__ import annotations

import logging
import sys

import typer

from intcalc._version import get_version
from intcalc.core.errors import CalcError
from intcalc.core.expression_lang import calculate
from intcalc.log_config import Verbosity, configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Evaluate integer arithmetic expressions with checked 64-bit arithmetic.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"intcalc {get_version()}")
        raise typer.Exit()


def run_line(line: str) -> bool:
    """Evaluate one input line and print the outcome. Returns True on success."""
    source = line.strip()
    try:
        result = calculate(source)
    except CalcError as e:
        logger.debug("Calculation failed with %s", e.kind)
        typer.echo(f"An error occurred while calculating: {source}: {e}")
        return False
    typer.echo(f"{source} = {result}")
    return True


@app.command()
def run(
    expressions: list[str] | None = typer.Argument(
        None,
        help="Expressions to evaluate. Reads lines from stdin when omitted.",
        show_default=False,
    ),
    verbosity: Verbosity = typer.Option(
        Verbosity.WARN,
        "--verbosity",
        "-v",
        envvar="INTCALC_VERBOSITY",
        case_sensitive=False,
        help="Diagnostic log level (written to stderr).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Evaluate expressions and print "<input> = <result>" for each."""
    configure_logging(verbosity)

    if expressions:
        results = [run_line(expression) for expression in expressions]
        if not all(results):
            raise typer.Exit(code=1)
        return

    for line in sys.stdin:
        run_line(line)
    logger.info("End of input")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
