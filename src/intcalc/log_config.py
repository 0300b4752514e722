"""
Logging configuration for intcalc.

Diagnostics go to stderr through a rich handler so they never mix with
results printed on stdout.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from rich.console import Console
from rich.logging import RichHandler

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class Verbosity(StrEnum):
    """Diagnostic verbosity accepted on the command line."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def level(self) -> int:
        return _LEVELS[self]


_LEVELS: dict[Verbosity, int] = {
    Verbosity.TRACE: TRACE,
    Verbosity.DEBUG: logging.DEBUG,
    Verbosity.INFO: logging.INFO,
    Verbosity.WARN: logging.WARNING,
    Verbosity.ERROR: logging.ERROR,
}


def configure_logging(verbosity: Verbosity) -> None:
    """Install a stderr rich handler on the ``intcalc`` logger."""
    logger = logging.getLogger("intcalc")
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(verbosity.level)
