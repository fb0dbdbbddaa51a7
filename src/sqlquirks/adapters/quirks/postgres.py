"""PostgreSQL quirks.

Configuration comes from three values shared with the existing JDBC test
infrastructure:

- ``ADBC_JDBC_POSTGRESQL_URL``: ``host[:port]/database``, no scheme;
- ``ADBC_JDBC_POSTGRESQL_USER``;
- ``ADBC_JDBC_POSTGRESQL_PASSWORD``.

An absent or empty URL means PostgreSQL is not available here and every
operation that needs a connection raises ``BackendUnavailable``.
"""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urlencode

from sqlalchemy.engine import URL, make_url

from sqlquirks.adapters.db.dialects import DialectName, IdentifierCase
from sqlquirks.adapters.quirks.base import SqlAlchemyQuirks
from sqlquirks.config import BackendSettings, EnvVars
from sqlquirks.interfaces.arrow_types import ArrowTypeId, TimeUnit
from sqlquirks.interfaces.sql_quirks import SqlQuirks

POSTGRESQL_URL_ENV_VAR = "ADBC_JDBC_POSTGRESQL_URL"
POSTGRESQL_USER_ENV_VAR = "ADBC_JDBC_POSTGRESQL_USER"
POSTGRESQL_PASSWORD_ENV_VAR = "ADBC_JDBC_POSTGRESQL_PASSWORD"

ENV_VARS = EnvVars(
    url=POSTGRESQL_URL_ENV_VAR,
    user=POSTGRESQL_USER_ENV_VAR,
    password=POSTGRESQL_PASSWORD_ENV_VAR,
)

JDBC_SCHEME = "jdbc:postgresql"
DRIVER_NAME = "postgresql+psycopg"
DEFAULT_CATALOG = "postgres"

SQL_QUIRKS = SqlQuirks.with_overrides({ArrowTypeId.UTF8: "TEXT"})


class PostgresQuirks(SqlAlchemyQuirks):
    """Quirks for PostgreSQL (psycopg 3 through SQLAlchemy).

    Args:
        settings: Resolved connection settings.
        catalog: Catalog reported for unqualified objects. Defaults to
            ``"postgres"``, the database of a stock installation.
    """

    name = DialectName.POSTGRES.value
    label = "PostgreSQL"
    identifier_case = IdentifierCase.LOWER

    def __init__(
        self, settings: BackendSettings, *, catalog: str = DEFAULT_CATALOG
    ) -> None:
        super().__init__(settings)
        self._catalog = catalog

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> PostgresQuirks:
        """Build quirks from ``ADBC_JDBC_POSTGRESQL_*`` values."""
        return cls(BackendSettings.from_environ(ENV_VARS, environ))

    def _credentials(self) -> dict[str, str]:
        params = {"user": self.settings.user, "password": self.settings.password}
        return {key: value for key, value in params.items() if value is not None}

    def connection_string(self) -> str:
        url = self.settings.require_url(self.label)
        query = urlencode(self._credentials())
        return f"{JDBC_SCHEME}://{url}?{query}" if query else f"{JDBC_SCHEME}://{url}"

    def engine_url(self) -> URL:
        url = self.settings.require_url(self.label)
        return make_url(f"{DRIVER_NAME}://{url}").set(
            username=self.settings.user, password=self.settings.password
        )

    @property
    def sql_quirks(self) -> SqlQuirks:
        return SQL_QUIRKS

    def default_catalog(self) -> str:
        return self._catalog

    def case_fold_table_name(self, name: str) -> str:
        return self.identifier_case.fold(name)

    def case_fold_column_name(self, name: str) -> str:
        return self.identifier_case.fold(name)

    def default_timestamp_unit(self) -> TimeUnit:
        return TimeUnit.MICROSECOND
