"""Tests for the intcalc command line loop."""

import pytest
from typer.testing import CliRunner

from intcalc.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


def test_reads_lines_from_stdin(cli_runner: CliRunner):
    """Each stdin line is evaluated and printed in order."""
    result = cli_runner.invoke(app, [], input="-1+5*(2+1)-3\n  5   *(3-  5) +1  \n")
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "-1+5*(2+1)-3 = 11",
        "5   *(3-  5) +1 = -9",
    ]


def test_bad_line_does_not_stop_loop(cli_runner: CliRunner):
    """Errors are reported and the next line is still evaluated."""
    result = cli_runner.invoke(app, [], input="-2+10/(5-5)\n5**(3-  5) +1\n1+1\n")
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "An error occurred while calculating: -2+10/(5-5): Division by zero",
        "An error occurred while calculating: 5**(3-  5) +1: Unexpected token in factor: Asterisk",
        "1+1 = 2",
    ]


def test_blank_line_is_an_error(cli_runner: CliRunner):
    result = cli_runner.invoke(app, [], input="\n")
    assert result.exit_code == 0
    assert result.stdout == "An error occurred while calculating: : Unexpected token in factor: Eof\n"


def test_last_line_without_newline(cli_runner: CliRunner):
    result = cli_runner.invoke(app, [], input="2*21")
    assert result.stdout == "2*21 = 42\n"


def test_empty_stdin(cli_runner: CliRunner):
    result = cli_runner.invoke(app, [], input="")
    assert result.exit_code == 0
    assert result.stdout == ""


def test_expressions_as_arguments(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["1+2", "(3)*4"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["1+2 = 3", "(3)*4 = 12"]


def test_argument_failure_sets_exit_code(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["1/0", "2"])
    assert result.exit_code == 1
    assert result.stdout.splitlines() == [
        "An error occurred while calculating: 1/0: Division by zero",
        "2 = 2",
    ]


def test_leading_minus_after_separator(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--", "-1+5*(2+1)-3"])
    assert result.exit_code == 0
    assert result.stdout == "-1+5*(2+1)-3 = 11\n"


def test_verbosity_keeps_stdout_clean(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--verbosity", "TRACE", "1+2"])
    assert result.exit_code == 0
    assert result.stdout == "1+2 = 3\n"


def test_verbosity_from_environment(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["7"], env={"INTCALC_VERBOSITY": "debug"})
    assert result.exit_code == 0
    assert result.stdout == "7 = 7\n"


def test_invalid_verbosity(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--verbosity", "loud", "1"])
    assert result.exit_code == 2


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.startswith("intcalc ")
