"""Configuration utilities for sqlquirks.

Each backend is configured by three named values: its URL, a user and a
password. They are read from an explicit mapping (``os.environ`` by default)
into a frozen ``BackendSettings``. The URL is the only value that decides
whether a backend is available; credentials are passed through unvalidated.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from sqlquirks.interfaces.errors import BackendUnavailable


class BackendStatus(Enum):
    """Whether a backend can be used in the current environment."""

    CONFIGURED = "configured"
    NOT_CONFIGURED = "not configured"


@dataclass(frozen=True)
class EnvVars:
    """Names of the configuration values for one backend."""

    url: str
    user: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class BackendSettings:
    """Resolved connection parameters for one backend.

    Attributes:
        url: Backend endpoint without scheme (e.g. ``localhost:5432/db``) or,
            for file-based backends, a path. ``None`` or blank means
            "not configured".
        user: User name, if any.
        password: Password, if any.
        url_var: Name of the value the URL was read from, used in messages.
    """

    url: str | None
    user: str | None = None
    password: str | None = None
    url_var: str = "URL"

    @classmethod
    def from_environ(
        cls, env_vars: EnvVars, environ: Mapping[str, str] | None = None
    ) -> BackendSettings:
        """Read settings for a backend from an environment mapping.

        Args:
            env_vars: Names of the backend's configuration values.
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            The resolved settings. Missing values resolve to ``None``.
        """
        env = os.environ if environ is None else environ
        return cls(
            url=env.get(env_vars.url),
            user=env.get(env_vars.user) if env_vars.user else None,
            password=env.get(env_vars.password) if env_vars.password else None,
            url_var=env_vars.url,
        )

    @property
    def status(self) -> BackendStatus:
        """``NOT_CONFIGURED`` when the URL is absent or blank."""
        if self.url is None or not self.url.strip():
            return BackendStatus.NOT_CONFIGURED
        return BackendStatus.CONFIGURED

    def require_url(self, backend: str) -> str:
        """Return the URL, or signal that the backend should be skipped.

        Args:
            backend: Human-readable backend label for the message.

        Raises:
            BackendUnavailable: If the URL is absent or blank.
        """
        if self.status is BackendStatus.NOT_CONFIGURED:
            raise BackendUnavailable(backend, self.url_var)
        assert self.url is not None
        return self.url.strip()
