"""Shared bootstrap and cleanup for SQLAlchemy-backed quirks.

Backends differ in how their settings become a URL, but opening a database
and dropping a table work the same way through SQLAlchemy. Subclasses supply
the URLs (``engine_url`` and ``connection_string``) and every answer of the
contract that is pure backend knowledge.
"""

from __future__ import annotations

import abc
import logging
from typing import TYPE_CHECKING

import pyarrow as pa
from sqlalchemy.exc import DBAPIError, OperationalError

from sqlquirks.adapters.db.database import Database
from sqlquirks.adapters.db.ddl import drop_table_sql
from sqlquirks.adapters.db.engine import make_engine, probe
from sqlquirks.adapters.redactor import DEFAULT_REDACTOR
from sqlquirks.interfaces.errors import BackendConnectionError
from sqlquirks.interfaces.quirks import CleanupOutcome, CleanupResult, ValidationQuirks

if TYPE_CHECKING:
    from sqlalchemy.engine import URL

    from sqlquirks.config import BackendSettings, BackendStatus

logger = logging.getLogger(__name__)


class SqlAlchemyQuirks(ValidationQuirks):
    """Quirks whose database handle is a SQLAlchemy engine."""

    def __init__(self, settings: BackendSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> BackendSettings:
        """Resolved connection settings."""
        return self._settings

    @property
    def status(self) -> BackendStatus:
        """Whether this backend is configured in the current environment."""
        return self._settings.status

    @abc.abstractmethod
    def engine_url(self) -> URL:
        """SQLAlchemy URL for the configured backend.

        Raises:
            BackendUnavailable: If the backend is not configured.
        """

    @abc.abstractmethod
    def connection_string(self) -> str:
        """Connection string in the backend's native URL scheme.

        Raises:
            BackendUnavailable: If the backend is not configured.
        """

    def redacted_connection_string(self) -> str:
        """``connection_string()`` with credentials masked, for display."""
        return DEFAULT_REDACTOR.sanitize(self.connection_string())

    def init_database(self, memory_pool: pa.MemoryPool | None = None) -> Database:
        url = self.engine_url()
        engine = make_engine(url)
        try:
            probe(engine)
        except OperationalError as e:
            engine.dispose()
            raise BackendConnectionError(
                self.label, self.redacted_connection_string()
            ) from e
        except BaseException:
            engine.dispose()
            raise
        logger.info(
            "Opened %s database at %s", self.label, self.redacted_connection_string()
        )
        if memory_pool is None:
            memory_pool = pa.default_memory_pool()
        return Database(
            engine=engine, sql_quirks=self.sql_quirks, memory_pool=memory_pool
        )

    def cleanup_table(self, name: str) -> CleanupResult:
        engine = make_engine(self.engine_url(), pooled=False)
        try:
            try:
                conn = engine.connect()
            except OperationalError as e:
                raise BackendConnectionError(
                    self.label, self.redacted_connection_string()
                ) from e
            with conn:
                try:
                    with conn.begin():
                        conn.exec_driver_sql(drop_table_sql(name))
                except DBAPIError as e:
                    message = str(e.orig) if e.orig is not None else str(e)
                    logger.debug("DROP TABLE %s failed: %s", name, message)
                    return CleanupResult(name, CleanupOutcome.FAILED, message.strip())
        finally:
            engine.dispose()
        logger.debug("Dropped table %s", name)
        return CleanupResult(name, CleanupOutcome.DROPPED)
