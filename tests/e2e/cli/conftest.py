"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages at every
level, a CliRunner, and environments that configure or unconfigure backends.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from sqlquirks.adapters.quirks.postgres import (
    POSTGRESQL_PASSWORD_ENV_VAR,
    POSTGRESQL_URL_ENV_VAR,
    POSTGRESQL_USER_ENV_VAR,
)
from sqlquirks.adapters.quirks.sqlite import SQLITE_URL_ENV_VAR
from sqlquirks.entrypoints.cli.main import sqlquirks

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages on a project and a third-party logger."""
    logger = logging.getLogger("sqlquirks.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and the sections Click-Extra keeps."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    sqlquirks.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(sqlquirks, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def unconfigured_env():
    """Environment in which no backend is configured."""
    return {
        POSTGRESQL_URL_ENV_VAR: "",
        POSTGRESQL_USER_ENV_VAR: None,
        POSTGRESQL_PASSWORD_ENV_VAR: None,
        SQLITE_URL_ENV_VAR: "",
    }


@pytest.fixture
def sqlite_env(unconfigured_env, tmp_path):
    """Environment with SQLite configured and PostgreSQL not configured."""
    return {**unconfigured_env, SQLITE_URL_ENV_VAR: str(tmp_path / "cli.db")}


@pytest.fixture
def unreachable_pg_env(unconfigured_env):
    """PostgreSQL configured against a port nothing listens on."""
    return {
        **unconfigured_env,
        POSTGRESQL_URL_ENV_VAR: "127.0.0.1:1/postgres",
        POSTGRESQL_USER_ENV_VAR: "alice",
        POSTGRESQL_PASSWORD_ENV_VAR: "s3cret",
    }
