"""Database engine factory and helpers.

This module centralizes creation of SQLAlchemy Engines for the quirks
implementations and applies backend-specific tuning:

- **SQLite**: adds connection PRAGMAs to enforce foreign keys and wait on
  locks held by a concurrent cleanup connection.
- **Other backends**: no tuning applied here.

Engines built for a single operation (a cleanup, a reachability probe) should
be created with ``pooled=False`` so that disposing them closes every DBAPI
connection immediately.
"""

from __future__ import annotations

import sqlite3
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.pool import NullPool

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite"}
SQLITE_BUSY_TIMEOUT_MS = 5000


def is_sqlite(url: str | URL) -> bool:
    """Return True if the given SQLAlchemy URL or string corresponds to SQLite.

    Args:
        url: A database URL string or SQLAlchemy :class:`URL`.

    Returns:
        bool: True if the backend is SQLite, otherwise False.
    """
    u = url if isinstance(url, URL) else make_url(url)
    return u.get_backend_name() in SQLITE_NAMES


def make_engine(url: str | URL, *, pooled: bool = True) -> Engine:
    """Create a SQLAlchemy Engine for the given URL.

    If the backend is SQLite, applies:
        - ``foreign_keys=ON`` (enforce referential integrity)
        - ``busy_timeout`` (wait instead of failing on a locked database)
        - a ``Decimal`` adapter storing decimals as text

    Args:
        url: Database connection URL (str or :class:`URL`).
        pooled: If False, use ``NullPool`` so connections are closed on release.

    Returns:
        Engine: Configured SQLAlchemy Engine.
    """

    kwargs = {} if pooled else {"poolclass": NullPool}
    engine = create_engine(url, **kwargs)

    if is_sqlite(url):
        # sqlite3 has no Decimal adapter; the registration is process-wide
        sqlite3.register_adapter(Decimal, str)

        @event.listens_for(engine, "connect")
        def _sqlite_pragmas(dbapi_conn: SQLiteConnection, conn_record):  # type: ignore #pylint: disable=W0613
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            cur.execute(f"PRAGMA busy_timeout={SQLITE_BUSY_TIMEOUT_MS};")
            cur.close()

    return engine


def probe(engine: Engine) -> None:
    """Open a connection and run a trivial statement.

    Raises:
        sqlalchemy.exc.OperationalError: If the database cannot be reached.
    """
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))  # pragma: no mutate
