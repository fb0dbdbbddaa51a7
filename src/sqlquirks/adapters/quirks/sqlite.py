"""SQLite quirks.

``SQLQUIRKS_SQLITE_URL`` holds the path of the database file; SQLite has no
credentials. Use a file rather than ``:memory:``: cleanup opens its own
connection, which would otherwise see a different, empty database.
"""

from __future__ import annotations

from collections.abc import Mapping

import pyarrow as pa
from sqlalchemy.engine import URL

from sqlquirks.adapters.db.dialects import DialectName, IdentifierCase
from sqlquirks.adapters.quirks.base import SqlAlchemyQuirks
from sqlquirks.config import BackendSettings, EnvVars
from sqlquirks.interfaces.arrow_types import ArrowTypeId, TimeUnit
from sqlquirks.interfaces.sql_quirks import SqlQuirks, default_arrow_type_to_sql_type_name

SQLITE_URL_ENV_VAR = "SQLQUIRKS_SQLITE_URL"

ENV_VARS = EnvVars(url=SQLITE_URL_ENV_VAR)

JDBC_SCHEME = "jdbc:sqlite"
DRIVER_NAME = "sqlite+pysqlite"
DEFAULT_CATALOG = "main"


def _integer_name(data_type: pa.DataType) -> str:
    # NUMERIC affinity would turn integers above 2**63 - 1 into REAL
    if pa.types.is_uint64(data_type):
        return "TEXT"
    return default_arrow_type_to_sql_type_name(data_type)


SQL_QUIRKS = SqlQuirks.with_overrides(
    {
        ArrowTypeId.INT: _integer_name,
        ArrowTypeId.UTF8: "TEXT",
        ArrowTypeId.LARGE_UTF8: "TEXT",
        ArrowTypeId.BINARY: "BLOB",
        ArrowTypeId.LARGE_BINARY: "BLOB",
        ArrowTypeId.FIXED_SIZE_BINARY: "BLOB",
    }
)


class SqliteQuirks(SqlAlchemyQuirks):
    """Quirks for SQLite (stdlib ``sqlite3`` through SQLAlchemy)."""

    name = DialectName.SQLITE.value
    label = "SQLite"
    identifier_case = IdentifierCase.PRESERVE

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> SqliteQuirks:
        """Build quirks from ``SQLQUIRKS_SQLITE_URL``."""
        return cls(BackendSettings.from_environ(ENV_VARS, environ))

    def connection_string(self) -> str:
        return f"{JDBC_SCHEME}:{self.settings.require_url(self.label)}"

    def engine_url(self) -> URL:
        return URL.create(DRIVER_NAME, database=self.settings.require_url(self.label))

    @property
    def sql_quirks(self) -> SqlQuirks:
        return SQL_QUIRKS

    def default_catalog(self) -> str:
        return DEFAULT_CATALOG

    def case_fold_table_name(self, name: str) -> str:
        return self.identifier_case.fold(name)

    def case_fold_column_name(self, name: str) -> str:
        return self.identifier_case.fold(name)

    def default_timestamp_unit(self) -> TimeUnit:
        # SQLAlchemy stores SQLite DATETIME as ISO text with microseconds
        return TimeUnit.MICROSECOND
