"""Database handle returned by ``ValidationQuirks.init_database``.

The handle bundles what a test needs to talk to one backend: a SQLAlchemy
engine, the backend's ``SqlQuirks`` (for DDL) and the Arrow memory pool used
for columnar results. It is owned by the caller and must be closed, either
explicitly or by using it as a context manager.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pyarrow as pa
from sqlalchemy import text

from sqlquirks.adapters.db.ddl import create_table_sql, insert_sql

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Connection, Engine

    from sqlquirks.interfaces.sql_quirks import SqlQuirks

logger = logging.getLogger(__name__)

# Python ints above 2**63 - 1 cannot be bound by sqlite3 or as a PostgreSQL bigint
UINT64_BIND_TYPE = pa.decimal128(20, 0)


def _python_values(column: pa.ChunkedArray) -> list:
    if pa.types.is_uint64(column.type):
        column = column.cast(UINT64_BIND_TYPE)
    return column.to_pylist()


@dataclass
class Database:
    """An open database for one test.

    Attributes:
        engine: Engine connected to the backend.
        sql_quirks: Type-name mapping to use when generating DDL.
        memory_pool: Pool that Arrow result arrays are allocated from.
    """

    engine: Engine
    sql_quirks: SqlQuirks
    memory_pool: pa.MemoryPool = field(default_factory=pa.default_memory_pool)

    def connect(self) -> Connection:
        """Open a connection. Use it as a context manager."""
        return self.engine.connect()

    def ingest(self, table_name: str, data: pa.Table) -> int:
        """Create ``table_name`` from ``data``'s schema and insert its rows.

        Both statements run in one transaction.

        Returns:
            Number of rows inserted.
        """
        create = create_table_sql(table_name, data.schema, self.sql_quirks)
        logger.debug("ingest: %s", create)
        columns = [_python_values(column) for column in data.columns]
        params = [
            {f"p{i}": value for i, value in enumerate(row)} for row in zip(*columns)
        ]
        with self.engine.begin() as conn:
            conn.execute(text(create))
            if params:
                conn.execute(text(insert_sql(table_name, data.schema)), params)
        return len(params)

    def fetch_arrow_table(self, sql: str) -> pa.Table:
        """Run a query and return its result as an Arrow table.

        Column types are inferred from the Python values the driver returns.
        """
        with self.engine.connect() as conn:
            result = conn.exec_driver_sql(sql)
            names = list(result.keys())
            rows = result.all()
        columns = list(zip(*rows)) if rows else [() for _ in names]
        arrays = [pa.array(list(col), memory_pool=self.memory_pool) for col in columns]
        return pa.table(arrays, names=names)

    def close(self) -> None:
        """Dispose the engine and every pooled connection."""
        self.engine.dispose()

    def __enter__(self) -> Database:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
