"""CLI helpers for sqlquirks.

Message emitters that write to stderr with emoji→ASCII fallbacks, and the
parser for ``-L NAME=LEVEL`` logger-level options.
"""

from .messages import error, success, warn

__all__ = ["error", "success", "warn"]
