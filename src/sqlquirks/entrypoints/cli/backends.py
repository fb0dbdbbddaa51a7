"""``sqlquirks backends``: inspect the quirks of each registered backend.

Commands
- ``list``: every backend with its configuration status and the answers its
  quirks give (catalog, identifier case, timestamp unit).
- ``check NAME``: open and close a database for one backend.
- ``drop-table NAME TABLE``: best-effort cleanup of a leftover test table.

Exit codes
- ``check`` exits with ``EXIT_SKIPPED`` when the backend is not configured,
  so CI scripts can tell "skipped" from "failed" (exit code 1).
- ``drop-table`` exits 0 whether or not the table existed.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click
import click_extra as clickx

from sqlquirks.adapters.db.dialects import UnsupportedDialect
from sqlquirks.adapters.quirks import all_quirks, quirks_for
from sqlquirks.adapters.redactor import Redactor, RedactorMode
from sqlquirks.config import BackendStatus
from sqlquirks.interfaces.errors import BackendConnectionError, BackendUnavailable

from .helpers import error, success, warn

if TYPE_CHECKING:
    from sqlquirks.adapters.quirks import SqlAlchemyQuirks

EXIT_SKIPPED = 3
SAMPLE_IDENTIFIER = "SampleName"


def _redactor(ctx: click.Context) -> Redactor:
    mode = (ctx.obj or {}).get("redactor_mode", RedactorMode.LENIENT)
    return Redactor(mode)


def _get_quirks(name: str) -> SqlAlchemyQuirks:
    try:
        return quirks_for(name)
    except UnsupportedDialect as e:
        raise click.BadParameter(str(e), param_hint="NAME") from e


def _describe(quirks: SqlAlchemyQuirks, redactor: Redactor) -> dict[str, Any]:
    configured = quirks.status is BackendStatus.CONFIGURED
    return {
        "name": quirks.name,
        "label": quirks.label,
        "status": quirks.status.value,
        "env_var": quirks.settings.url_var,
        "connection": (
            redactor.sanitize(quirks.connection_string()) if configured else None
        ),
        "catalog": quirks.default_catalog(),
        "identifier_case": (
            f"{SAMPLE_IDENTIFIER} -> {quirks.case_fold_table_name(SAMPLE_IDENTIFIER)}"
        ),
        "timestamp_unit": quirks.default_timestamp_unit().value,
    }


@click.group(cls=clickx.ExtraGroup)
def backends() -> None:
    """Inspect backend quirks."""


@backends.command("list")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON on stdout.")
@click.pass_context
def list_backends(ctx: click.Context, as_json: bool) -> None:
    """List registered backends and whether they are configured."""
    redactor = _redactor(ctx)
    rows = [_describe(quirks, redactor) for quirks in all_quirks()]
    if as_json:
        click.echo(json.dumps(rows, indent=2))
        return
    for row in rows:
        click.secho(f"{row['label']} ({row['name']})", bold=True)
        click.echo(f"  Status     : {row['status']}")
        click.echo(f"  Connection : {row['connection'] or 'set ' + row['env_var']}")
        click.echo(f"  Catalog    : {row['catalog']}")
        click.echo(f"  Identifiers: {row['identifier_case']}")
        click.echo(f"  Timestamps : {row['timestamp_unit']}")


@backends.command()
@click.argument("name")
@click.pass_context
def check(ctx: click.Context, name: str) -> None:
    """Open a database for backend NAME and close it again."""
    quirks = _get_quirks(name)
    try:
        with quirks.init_database():
            pass
    except BackendUnavailable as e:
        warn(f"Skipped: {e}")
        ctx.exit(EXIT_SKIPPED)
    except BackendConnectionError as e:
        error(_redactor(ctx).sanitize(str(e)))
        raise click.ClickException(
            f"{quirks.label} is configured but not reachable."
        ) from e
    success(f"{quirks.label} reachable")


@backends.command("drop-table")
@click.argument("name")
@click.argument("table")
@click.pass_context
def drop_table(ctx: click.Context, name: str, table: str) -> None:
    """Drop TABLE on backend NAME, ignoring a missing table."""
    quirks = _get_quirks(name)
    try:
        result = quirks.cleanup_table(table)
    except BackendUnavailable as e:
        warn(f"Skipped: {e}")
        ctx.exit(EXIT_SKIPPED)
    except BackendConnectionError as e:
        raise click.ClickException(_redactor(ctx).sanitize(str(e))) from e
    if result.dropped:
        success(f"Dropped {table}")
    else:
        warn(f"{table} not dropped: {result.error}")
