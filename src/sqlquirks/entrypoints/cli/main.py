"""sqlquirks CLI entry point.

Defines the top-level ``sqlquirks`` command (via Click-Extra) and registers
its subcommands.

Currently available groups
- ``sqlquirks backends``: list and check backends, drop leftover test tables.

Examples
    $ sqlquirks --version
    $ sqlquirks backends list
    $ ADBC_JDBC_POSTGRESQL_URL=localhost:5432/postgres sqlquirks backends check pg
"""

import logging

import click
import click_extra as clickx

from sqlquirks import __version__
from sqlquirks.adapters.redactor import RedactorMode
from sqlquirks.logging import config_console_handler, log_startup

from .backends import backends as backends_group
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)


HELP = """sqlquirks command-line interface.

    Shows which database backends the conformance suite can reach from this
    environment and what each backend's quirks predict (catalog, identifier
    case folding, timestamp precision).
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    context_settings={"auto_envvar_prefix": "SQLQUIRKS"},
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L sqlalchemy=INFO -L psycopg=DEBUG)."
    ),
    default=("sqlalchemy=WARNING", "psycopg=WARNING"),
    envvar="SQLQUIRKS_LOGGER_LEVEL",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--redactor-mode",
    "redactor_mode",
    type=click.Choice([mode.value for mode in RedactorMode], case_sensitive=False),
    help=(
        "How connection strings are redacted in output. "
        "'lenient' hides passwords, 'strict' also hides user names."
    ),
    default=RedactorMode.LENIENT.value,
    show_envvar=True,
    show_default=True,
)
@clickx.pass_context
def sqlquirks(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
    redactor_mode: str,
) -> None:
    """sqlquirks command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler and root logger
    use_color = ctx.color is not False  # None or True => allow color
    handler = config_console_handler(level=level, debug_mode=debug, color=use_color)
    logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)

    # 2) Set 3rd-party logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger, app_version=__version__, level=level, logger_levels=logger_levels
    )

    ctx.ensure_object(dict)
    ctx.obj["redactor_mode"] = RedactorMode(redactor_mode.lower())

    ctx.call_on_close(logging.shutdown)


sqlquirks.add_command(backends_group)
