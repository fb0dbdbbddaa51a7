"""Exceptions raised across the quirks contract.

The contract distinguishes exactly three failure modes:

- ``BackendUnavailable``: the backend is not configured in this environment.
  Callers treat it as "skip this backend", never as a failure.
- ``BackendConnectionError``: the backend is configured but cannot be reached
  (or refused the bootstrap). Fatal for that backend; never retried here.
- ``UnsupportedArrowType``: no SQL type name exists for an Arrow type.

Cleanup failures are reported as values instead
(see `sqlquirks.interfaces.quirks.CleanupResult`).
"""


class QuirksError(Exception):
    """Base class for sqlquirks errors."""


class BackendUnavailable(QuirksError):
    """The backend is not configured in this environment.

    Attributes:
        backend (str): Human-readable backend label (e.g. "PostgreSQL").
        env_var (str): Name of the configuration value that was missing.
    """

    def __init__(self, backend: str, env_var: str):
        super().__init__(f"{backend} not found, set {env_var}")
        self.backend = backend
        self.env_var = env_var


class BackendConnectionError(QuirksError):
    """The backend is configured but a connection could not be established.

    Attributes:
        backend (str): Human-readable backend label.
        target (str): Redacted connection string that was attempted.
    """

    def __init__(self, backend: str, target: str):
        super().__init__(f"Cannot connect to {backend} at {target}")
        self.backend = backend
        self.target = target


class UnsupportedArrowType(QuirksError):
    """No SQL type name is known for the given Arrow type.

    Attributes:
        data_type (str): String form of the offending Arrow type.
    """

    def __init__(self, data_type: object):
        super().__init__(f"No SQL type name mapping for Arrow type '{data_type}'.")
        self.data_type = str(data_type)
