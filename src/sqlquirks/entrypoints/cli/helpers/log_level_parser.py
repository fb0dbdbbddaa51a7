"""Helpers for parsing logger-level CLI options.

Parses options of the form NAME=LEVEL (repeatable or comma/space-separated)
into a mapping of logger names to numeric logging levels.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING, "psycopg": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Split a raw option value on commas and whitespace, dropping empties."""
    values = value if isinstance(value, (tuple, list)) else [value]
    return [s for v in values for s in re.split(r"[,\s]+", v) if s]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        if not isinstance(lvl := logging.getLevelName(level_str.strip().upper()), int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
