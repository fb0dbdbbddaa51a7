"""Dialect names and identifier case rules.

``DialectName`` is the set of backends sqlquirks ships quirks for, with the
aliases users are likely to type (``pg``, ``postgres+psycopg``...).
``IdentifierCase`` captures how a backend normalizes *unquoted* identifiers,
which is the one piece of dialect knowledge the suite needs to predict the
names the backend reports back from its catalog.
"""

from __future__ import annotations

import string
from enum import Enum

from sqlquirks.interfaces.errors import QuirksError

_ASCII_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ASCII_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class UnsupportedDialect(QuirksError):
    """Raised when an unsupported database dialect is encountered."""


class DialectName(str, Enum):
    """Enumeration of backends with a quirks implementation.

    Attributes:
        POSTGRES: PostgreSQL dialect (``"postgresql"``).
        SQLITE:   SQLite dialect (``"sqlite"``).
    """

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def from_string(cls, dialect_str: str) -> DialectName:
        """Normalize and convert an arbitrary dialect string to DialectName.

        Accepts common aliases and driver-qualified names (e.g., 'postgres',
        'postgresql+psycopg', 'sqlite', 'sqlite+pysqlite').

        Raises:
            UnsupportedDialect: if the dialect is not recognized or supported.
        """

        raw = (dialect_str or "").strip().lower()
        base = raw.split("+", 1)[0]

        if base in {"postgres", "postgresql", "pg"}:
            return cls.POSTGRES
        if base in {"sqlite"}:
            return cls.SQLITE

        raise UnsupportedDialect(f"Unsupported dialect: {dialect_str!r}")


class IdentifierCase(Enum):
    """How a backend normalizes unquoted identifiers.

    PostgreSQL folds to lower case, the SQL standard (and e.g. Oracle) to
    upper case, SQLite keeps identifiers as written. PostgreSQL leaves
    non-ASCII letters alone, so folding here does too.
    """

    LOWER = "lower"
    UPPER = "upper"
    PRESERVE = "preserve"

    def fold(self, name: str) -> str:
        """Apply this rule to ``name``. Only ASCII letters change case."""
        if self is IdentifierCase.LOWER:
            return name.translate(_ASCII_TO_LOWER)
        if self is IdentifierCase.UPPER:
            return name.translate(_ASCII_TO_UPPER)
        return name
