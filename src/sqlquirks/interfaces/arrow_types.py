"""Columnar type vocabulary shared by the quirks contract.

The contract speaks in Arrow terms: type mappings are keyed by an
``ArrowTypeId`` (the *kind* of an Arrow type, ignoring parameters such as bit
width or time zone) and timestamp precision is an Arrow ``TimeUnit``. Both are
thin enumerations over pyarrow so the suite can build schemas directly from
them.
"""

from __future__ import annotations

from enum import Enum

import pyarrow as pa
import pyarrow.types as pat


class ArrowTypeId(str, Enum):
    """Kind of an Arrow data type, independent of its parameters.

    View layouts share the id of the type they view: ``string_view`` is
    ``UTF8`` and ``binary_view`` is ``BINARY``.
    """

    NULL = "null"
    STRUCT = "struct"
    LIST = "list"
    LARGE_LIST = "large_list"
    FIXED_SIZE_LIST = "fixed_size_list"
    UNION = "union"
    MAP = "map"
    DICTIONARY = "dictionary"
    INT = "int"
    FLOATING_POINT = "floating_point"
    UTF8 = "utf8"
    LARGE_UTF8 = "large_utf8"
    BINARY = "binary"
    LARGE_BINARY = "large_binary"
    FIXED_SIZE_BINARY = "fixed_size_binary"
    BOOL = "bool"
    DECIMAL = "decimal"
    DATE = "date"
    TIME = "time"
    TIMESTAMP = "timestamp"
    INTERVAL = "interval"
    DURATION = "duration"


class TimeUnit(str, Enum):
    """Arrow time unit, valued with pyarrow's unit codes."""

    SECOND = "s"
    MILLISECOND = "ms"
    MICROSECOND = "us"
    NANOSECOND = "ns"

    def timestamp(self, tz: str | None = None) -> pa.TimestampType:
        """Return a pyarrow timestamp type with this unit."""
        return pa.timestamp(self.value, tz=tz)


# Order matters only where predicates overlap; pyarrow's do not.
_PREDICATES = (
    (pat.is_null, ArrowTypeId.NULL),
    (pat.is_boolean, ArrowTypeId.BOOL),
    (pat.is_integer, ArrowTypeId.INT),
    (pat.is_floating, ArrowTypeId.FLOATING_POINT),
    (pat.is_decimal, ArrowTypeId.DECIMAL),
    (pat.is_string, ArrowTypeId.UTF8),
    (pat.is_string_view, ArrowTypeId.UTF8),
    (pat.is_large_string, ArrowTypeId.LARGE_UTF8),
    (pat.is_binary, ArrowTypeId.BINARY),
    (pat.is_binary_view, ArrowTypeId.BINARY),
    (pat.is_large_binary, ArrowTypeId.LARGE_BINARY),
    (pat.is_fixed_size_binary, ArrowTypeId.FIXED_SIZE_BINARY),
    (pat.is_date, ArrowTypeId.DATE),
    (pat.is_time, ArrowTypeId.TIME),
    (pat.is_timestamp, ArrowTypeId.TIMESTAMP),
    (pat.is_duration, ArrowTypeId.DURATION),
    (pat.is_interval, ArrowTypeId.INTERVAL),
    (pat.is_list, ArrowTypeId.LIST),
    (pat.is_large_list, ArrowTypeId.LARGE_LIST),
    (pat.is_fixed_size_list, ArrowTypeId.FIXED_SIZE_LIST),
    (pat.is_struct, ArrowTypeId.STRUCT),
    (pat.is_map, ArrowTypeId.MAP),
    (pat.is_union, ArrowTypeId.UNION),
    (pat.is_dictionary, ArrowTypeId.DICTIONARY),
)


def type_id_of(data_type: pa.DataType) -> ArrowTypeId:
    """Classify a pyarrow data type.

    Args:
        data_type: Any pyarrow ``DataType``.

    Returns:
        The ``ArrowTypeId`` of the type.

    Raises:
        ValueError: If the type belongs to none of the known kinds (e.g. an
            extension type or a kind introduced by a newer pyarrow).
    """
    for predicate, type_id in _PREDICATES:
        if predicate(data_type):
            return type_id
    raise ValueError(f"Unknown Arrow type kind: {data_type}")
