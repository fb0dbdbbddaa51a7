"""Regex-based redaction of secrets in connection strings.

Quirks assemble connection strings with credentials embedded either as
``user:password@`` userinfo (SQLAlchemy URLs) or as ``?user=..&password=..``
query parameters (JDBC-style strings). Anything that is logged or shown on a
terminal goes through ``Redactor.sanitize`` first.

Two modes are supported: ``LENIENT`` masks passwords and tokens, ``STRICT``
also masks user names.
"""

import re
from enum import Enum

# pylint: disable=too-few-public-methods

PLACEHOLDER = "***"
SECRET_KEYWORDS = [
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "api_key",
    "access_token",
]
STRICT_MODE_ADDITIONAL_KEYWORDS = ["user", "username", "uid"]


def _keyword_pattern(keywords: list[str]) -> str:
    return "|".join(kw.replace("_", "[-_]?") for kw in keywords)


SECRET_KEYWORDS_PATTERN = _keyword_pattern(SECRET_KEYWORDS)
STRICT_MODE_SECRET_KEYWORDS_PATTERN = _keyword_pattern(
    SECRET_KEYWORDS + STRICT_MODE_ADDITIONAL_KEYWORDS
)
QUERY_STRING_PATTERN = re.compile(
    rf"([?&;](?:{SECRET_KEYWORDS_PATTERN})=)[^&#\s;]*", re.IGNORECASE
)
STRICT_MODE_QUERY_STRING_PATTERN = re.compile(
    rf"([?&;](?:{STRICT_MODE_SECRET_KEYWORDS_PATTERN})=)[^&#\s;]*", re.IGNORECASE
)
KEY_VALUE_SECRET_PATTERN = re.compile(
    rf"(\b(?:{SECRET_KEYWORDS_PATTERN})\s*:\s*)\S+", re.IGNORECASE
)
URL_PASSWORD_PATTERN = re.compile(r"(?<=://)([^:@/]+):([^@/]+)@")
URL_USER_PATTERN = re.compile(r"(?<=://)([^:@/]+)(?=:(?:\*\*\*|[^@/]*)@)")


class RedactorMode(Enum):
    """Redaction strictness.

    Modes:
    - LENIENT: redact passwords/tokens but keep user names visible.
    - STRICT: redact passwords/tokens and also user names.
    """

    LENIENT = "lenient"
    STRICT = "strict"


class Redactor:
    """Masks credentials in connection strings and free-form messages."""

    def __init__(self, mode: RedactorMode = RedactorMode.LENIENT) -> None:
        self._mode = mode

    @property
    def mode(self) -> RedactorMode:
        """Return the redaction mode."""
        return self._mode

    def sanitize(self, raw: str) -> str:
        """Return ``raw`` with credentials replaced by ``***``."""
        strict = self._mode is RedactorMode.STRICT
        sanitized = URL_PASSWORD_PATTERN.sub(rf"\1:{PLACEHOLDER}@", str(raw))
        if strict:
            sanitized = URL_USER_PATTERN.sub(PLACEHOLDER, sanitized)
        query_pattern = (
            STRICT_MODE_QUERY_STRING_PATTERN if strict else QUERY_STRING_PATTERN
        )
        sanitized = query_pattern.sub(rf"\1{PLACEHOLDER}", sanitized)
        return KEY_VALUE_SECRET_PATTERN.sub(rf"\1{PLACEHOLDER}", sanitized)


DEFAULT_REDACTOR = Redactor()
