"""Backend quirks implementations and their registry.

Add a backend by implementing ``SqlAlchemyQuirks`` (or ``ValidationQuirks``
directly), adding its name to ``DialectName`` and registering the class in
``QUIRKS_BY_DIALECT``. The shared suite needs no changes.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from sqlquirks.adapters.db.dialects import DialectName
from sqlquirks.adapters.quirks.base import SqlAlchemyQuirks
from sqlquirks.adapters.quirks.postgres import PostgresQuirks
from sqlquirks.adapters.quirks.sqlite import SqliteQuirks

__all__ = [
    "PostgresQuirks",
    "QUIRKS_BY_DIALECT",
    "SqlAlchemyQuirks",
    "SqliteQuirks",
    "all_quirks",
    "quirks_for",
]

QUIRKS_BY_DIALECT: Mapping[DialectName, type[PostgresQuirks] | type[SqliteQuirks]] = (
    MappingProxyType(
        {
            DialectName.POSTGRES: PostgresQuirks,
            DialectName.SQLITE: SqliteQuirks,
        }
    )
)


def quirks_for(
    name: str, environ: Mapping[str, str] | None = None
) -> SqlAlchemyQuirks:
    """Return quirks for the backend called ``name`` (aliases accepted).

    Args:
        name: Backend name, e.g. ``"postgresql"``, ``"pg"`` or ``"sqlite"``.
        environ: Mapping to read configuration from. Defaults to ``os.environ``.

    Raises:
        UnsupportedDialect: If no quirks exist for ``name``.
    """
    return QUIRKS_BY_DIALECT[DialectName.from_string(name)].from_environ(environ)


def all_quirks(environ: Mapping[str, str] | None = None) -> list[SqlAlchemyQuirks]:
    """Return quirks for every registered backend, configured or not."""
    return [cls.from_environ(environ) for cls in QUIRKS_BY_DIALECT.values()]
