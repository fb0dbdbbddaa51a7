"""The backend-quirks contract.

A conformance suite written against ``ValidationQuirks`` never branches on the
backend it is testing. Everything that legitimately differs between backends
is asked of the active quirks object instead:

- **setup**: ``init_database`` opens a database handle (or signals that the
  backend is not configured here, see ``BackendUnavailable``);
- **assertions**: ``default_catalog``, ``case_fold_table_name``,
  ``case_fold_column_name`` and ``default_timestamp_unit`` predict what the
  backend will report back;
- **DDL**: ``sql_quirks`` names SQL types for Arrow columns;
- **teardown**: ``cleanup_table`` drops tables the test created, reporting
  the outcome as a value so teardown can never mask the real test result.

Every member is abstract. A backend that forgets one fails at instantiation
instead of silently inheriting an answer that is wrong for it.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pyarrow as pa

    from sqlquirks.adapters.db.database import Database
    from sqlquirks.interfaces.arrow_types import TimeUnit
    from sqlquirks.interfaces.sql_quirks import SqlQuirks


class CleanupOutcome(Enum):
    """Outcome of a best-effort table cleanup."""

    DROPPED = "dropped"
    FAILED = "failed"


@dataclass(frozen=True)
class CleanupResult:
    """Result of ``ValidationQuirks.cleanup_table``.

    Attributes:
        table: Name passed to ``cleanup_table``.
        outcome: Whether the DROP succeeded.
        error: Driver error message when the DROP failed, otherwise ``None``.
    """

    table: str
    outcome: CleanupOutcome
    error: str | None = None

    @property
    def dropped(self) -> bool:
        """True if the table was dropped."""
        return self.outcome is CleanupOutcome.DROPPED


class ValidationQuirks(abc.ABC):
    """Backend-specific answers needed by the shared conformance suite.

    Implementations are stateless apart from constants and their resolved
    settings, so one instance may serve a whole test run and be called
    concurrently for distinct table names.
    """

    #: Registry name of the backend (e.g. ``"postgresql"``).
    name: str
    #: Human-readable label used in messages (e.g. ``"PostgreSQL"``).
    label: str

    @abc.abstractmethod
    def init_database(self, memory_pool: pa.MemoryPool | None = None) -> Database:
        """Open a database handle for a test.

        The caller owns the returned handle and must close it.

        Args:
            memory_pool: Arrow memory pool for columnar results. Defaults to
                pyarrow's default pool.

        Returns:
            A connected ``Database``.

        Raises:
            BackendUnavailable: If the backend is not configured in this
                environment. Suites should skip, not fail.
            BackendConnectionError: If the backend is configured but
                unreachable.
        """

    @abc.abstractmethod
    def cleanup_table(self, name: str) -> CleanupResult:
        """Drop a table created by a test, best effort.

        A table that does not exist (or any other failure of the DROP itself)
        yields a ``FAILED`` result instead of an exception.

        Args:
            name: Table name, as used unquoted in the test's DDL.

        Returns:
            The cleanup outcome, for the caller to log.

        Raises:
            BackendUnavailable: If the backend is not configured.
            BackendConnectionError: If no connection could be opened at all.
        """

    @abc.abstractmethod
    def default_catalog(self) -> str:
        """Catalog the suite should expect for unqualified objects."""

    @abc.abstractmethod
    def case_fold_table_name(self, name: str) -> str:
        """Normalize an unquoted table name the way the backend stores it."""

    @abc.abstractmethod
    def case_fold_column_name(self, name: str) -> str:
        """Normalize an unquoted column name the way the backend stores it."""

    @abc.abstractmethod
    def default_timestamp_unit(self) -> TimeUnit:
        """Native precision of the backend's timestamp columns."""

    @property
    @abc.abstractmethod
    def sql_quirks(self) -> SqlQuirks:
        """SQL-generation quirks (Arrow-to-SQL type names) for DDL."""
