"""Global pytest fixtures for sqlquirks."""

from __future__ import annotations

from collections.abc import Mapping

import pytest

from sqlquirks.adapters.db.dialects import DialectName
from tests.fixtures.postgres import DOCKER_UP

pytest_plugins = [
    "pytester",
    "sqlquirks.testing.fixtures",
    "tests.fixtures.sqlite",
    "tests.fixtures.postgres",
]


@pytest.fixture
def quirks_environ(
    request: pytest.FixtureRequest, sqlite_environ: dict[str, str]
) -> Mapping[str, str]:
    """Point each backend at a throwaway database.

    SQLite always gets a fresh file. PostgreSQL gets the session container
    when Docker is available; otherwise it stays unconfigured, so every test
    that needs a connection is reported as skipped.
    """
    environ = dict(sqlite_environ)
    callspec = getattr(request.node, "callspec", None)
    backend = callspec.params.get("quirks") if callspec else None
    if backend == DialectName.POSTGRES.value and DOCKER_UP:
        environ.update(request.getfixturevalue("pg_environ"))
    return environ
