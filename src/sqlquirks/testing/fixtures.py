"""Fixtures that bind a conformance suite to backend quirks.

- ``quirks``: the active ``ValidationQuirks``. Tests requesting it are
  parametrized over every registered backend unless they parametrize it
  themselves (``indirect=True``) with backend names.
- ``quirks_environ``: mapping configuration is read from. Override it in a
  ``conftest.py`` to point the suite at throwaway databases.
- ``database``: an open handle, closed after the test. A backend that is not
  configured turns into a *skipped* test, never a failure.
- ``cleanup_table``: register table names to drop after the test. Cleanup
  outcomes are logged, never raised.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import TYPE_CHECKING

import pytest

from sqlquirks.adapters.db.dialects import DialectName
from sqlquirks.adapters.quirks import quirks_for
from sqlquirks.interfaces.errors import BackendUnavailable

if TYPE_CHECKING:
    from sqlquirks.adapters.db.database import Database
    from sqlquirks.interfaces.quirks import CleanupResult, ValidationQuirks

## adjust pylint to deal with fixtures
# pylint: disable=redefined-outer-name

logger = logging.getLogger(__name__)

QUIRKS_FIXTURE = "quirks"


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize ``quirks`` over all registered backends by default."""
    if QUIRKS_FIXTURE not in metafunc.fixturenames:
        return
    for marker in metafunc.definition.iter_markers("parametrize"):
        argnames = marker.args[0] if marker.args else marker.kwargs.get("argnames", "")
        if isinstance(argnames, str):
            argnames = [a.strip() for a in argnames.split(",")]
        if QUIRKS_FIXTURE in argnames:
            return
    names = [dialect.value for dialect in DialectName]
    metafunc.parametrize(QUIRKS_FIXTURE, names, ids=names, indirect=True)


@contextmanager
def skip_unavailable() -> Iterator[None]:
    """Turn ``BackendUnavailable`` raised inside the block into a pytest skip."""
    try:
        yield
    except BackendUnavailable as e:
        pytest.skip(str(e))


def log_cleanup(result: CleanupResult) -> None:
    """Log the outcome of a table cleanup."""
    if result.dropped:
        logger.debug("cleanup: dropped %s", result.table)
    else:
        logger.info("cleanup: %s not dropped: %s", result.table, result.error)


@pytest.fixture
def quirks_environ() -> Mapping[str, str]:
    """Configuration mapping for the quirks; ``os.environ`` by default."""
    return os.environ


@pytest.fixture
def quirks(
    request: pytest.FixtureRequest, quirks_environ: Mapping[str, str]
) -> ValidationQuirks:
    """Quirks for the backend named by the fixture parameter."""
    return quirks_for(request.param, quirks_environ)


@pytest.fixture
def database(quirks: ValidationQuirks) -> Iterator[Database]:
    """Open database for the active backend, skipped when not configured."""
    with skip_unavailable():
        db = quirks.init_database()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def cleanup_table(quirks: ValidationQuirks) -> Iterator[Callable[[str], str]]:
    """Register tables to drop at teardown.

    Example:
        ```py
        def test_ingest(database, cleanup_table):
            name = cleanup_table("ingest_target")
            database.ingest(name, table)
        ```
    """
    names: list[str] = []

    def register(name: str) -> str:
        names.append(name)
        return name

    yield register

    for name in reversed(names):
        try:
            result = quirks.cleanup_table(name)
        except BackendUnavailable:
            # the test itself was skipped for the same reason
            return
        log_cleanup(result)
