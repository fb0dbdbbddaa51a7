"""Logging helpers used by the sqlquirks CLI.

Configures console logging with Rich and provides a filter that annotates
third-party log records (SQLAlchemy, psycopg...) with a short prefix used by
console formatting.
"""

from __future__ import annotations

import logging
import platform
import sys
from typing import TYPE_CHECKING, Literal, TypeAlias

import pyarrow
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "sqlquirks"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[sqlalchemy]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode it is set to DEBUG and includes
    source file/line information; otherwise a short third-party prefix is
    applied.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line summary and DEBUG-level environment diagnostics.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        logger_levels: Mapping of logger names to their configured numeric levels.
    """
    logger.info(
        "sqlquirks %s, console=%s", app_version, logging.getLevelName(level)
    )
    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("SQLAlchemy: %s", sqlalchemy.__version__)
    logger.debug("pyarrow: %s", pyarrow.__version__)
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
    )
