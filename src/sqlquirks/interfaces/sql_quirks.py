"""Arrow-to-SQL type name mapping with per-backend overrides.

A backend rarely disagrees with the SQL standard on *every* type; usually it
needs one or two different names (PostgreSQL has no ``CLOB``, SQLite prefers
``TEXT``). ``SqlQuirks`` therefore carries a single mapping function that is
built from an override table layered over a fallback mapping, normally
``default_arrow_type_to_sql_type_name``. Overrides compose: the fallback of one
override layer may itself be another override layer.

Example:
    ```py
    quirks = SqlQuirks.with_overrides({ArrowTypeId.UTF8: "TEXT"})
    quirks.sql_type_name(pa.string())   # 'TEXT'
    quirks.sql_type_name(pa.int64())    # 'BIGINT' (from the default table)
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

import pyarrow as pa

from sqlquirks.interfaces.arrow_types import ArrowTypeId, type_id_of
from sqlquirks.interfaces.errors import UnsupportedArrowType

ArrowToSqlTypeNameMapping = Callable[[pa.DataType], str]
TypeNameOverride = str | ArrowToSqlTypeNameMapping

# 2**64 - 1 has 20 decimal digits
UINT64_SQL_TYPE_NAME = "DECIMAL(20, 0)"

__all__ = [
    "ArrowToSqlTypeNameMapping",
    "DEFAULT_SQL_TYPE_NAMES",
    "SUPPORTED_TYPE_IDS",
    "SqlQuirks",
    "UINT64_SQL_TYPE_NAME",
    "default_arrow_type_to_sql_type_name",
    "override_mapping",
]


def _integer_name(data_type: pa.DataType) -> str:
    # unsigned types need the next wider signed type; uint64 has none
    if pa.types.is_uint64(data_type):
        return UINT64_SQL_TYPE_NAME
    width = data_type.bit_width
    if not pa.types.is_signed_integer(data_type):
        width *= 2
    if width <= 16:
        return "SMALLINT"
    if width <= 32:
        return "INTEGER"
    return "BIGINT"


def _floating_name(data_type: pa.DataType) -> str:
    return "REAL" if data_type.bit_width <= 32 else "DOUBLE PRECISION"


def _decimal_name(data_type: pa.DataType) -> str:
    return f"DECIMAL({data_type.precision}, {data_type.scale})"


def _timestamp_name(data_type: pa.DataType) -> str:
    return "TIMESTAMP WITH TIME ZONE" if data_type.tz else "TIMESTAMP"


DEFAULT_SQL_TYPE_NAMES: Mapping[ArrowTypeId, TypeNameOverride] = MappingProxyType(
    {
        ArrowTypeId.BOOL: "BOOLEAN",
        ArrowTypeId.INT: _integer_name,
        ArrowTypeId.FLOATING_POINT: _floating_name,
        ArrowTypeId.DECIMAL: _decimal_name,
        ArrowTypeId.UTF8: "CLOB",
        ArrowTypeId.LARGE_UTF8: "CLOB",
        ArrowTypeId.BINARY: "BLOB",
        ArrowTypeId.LARGE_BINARY: "BLOB",
        ArrowTypeId.FIXED_SIZE_BINARY: "BLOB",
        ArrowTypeId.DATE: "DATE",
        ArrowTypeId.TIME: "TIME",
        ArrowTypeId.TIMESTAMP: _timestamp_name,
        ArrowTypeId.DURATION: "INTERVAL",
        ArrowTypeId.INTERVAL: "INTERVAL",
    }
)

SUPPORTED_TYPE_IDS = frozenset(DEFAULT_SQL_TYPE_NAMES)


def _resolve(override: TypeNameOverride, data_type: pa.DataType) -> str:
    return override(data_type) if callable(override) else override


def default_arrow_type_to_sql_type_name(data_type: pa.DataType) -> str:
    """Map an Arrow type to a standard SQL type name.

    Args:
        data_type: The Arrow type of a column.

    Returns:
        The SQL type name to use in DDL.

    Raises:
        UnsupportedArrowType: For nested, union, dictionary and null types,
            which have no portable SQL column type.
    """
    try:
        type_id = type_id_of(data_type)
    except ValueError as e:
        raise UnsupportedArrowType(data_type) from e
    if (override := DEFAULT_SQL_TYPE_NAMES.get(type_id)) is None:
        raise UnsupportedArrowType(data_type)
    return _resolve(override, data_type)


def override_mapping(
    overrides: Mapping[ArrowTypeId, TypeNameOverride],
    fallback: ArrowToSqlTypeNameMapping = default_arrow_type_to_sql_type_name,
) -> ArrowToSqlTypeNameMapping:
    """Build a mapping that consults ``overrides`` before ``fallback``.

    Args:
        overrides: SQL type names (or functions producing them) keyed by
            type id. Only the listed ids are affected.
        fallback: Mapping used for every other type.

    Returns:
        A new mapping function. The ``overrides`` mapping is copied, so later
        changes to it do not leak into the result.
    """
    table = dict(overrides)

    def mapping(data_type: pa.DataType) -> str:
        try:
            override = table.get(type_id_of(data_type))
        except ValueError:
            override = None
        if override is None:
            return fallback(data_type)
        return _resolve(override, data_type)

    return mapping


@dataclass(frozen=True)
class SqlQuirks:
    """SQL-generation capabilities a backend hands to the driver layer.

    Attributes:
        arrow_to_sql_type_name_mapping: Function used when generating DDL to
            name the SQL type of an Arrow column.
    """

    arrow_to_sql_type_name_mapping: ArrowToSqlTypeNameMapping = (
        default_arrow_type_to_sql_type_name
    )

    @classmethod
    def with_overrides(
        cls,
        overrides: Mapping[ArrowTypeId, TypeNameOverride],
        fallback: ArrowToSqlTypeNameMapping = default_arrow_type_to_sql_type_name,
    ) -> SqlQuirks:
        """Return quirks whose mapping layers ``overrides`` over ``fallback``."""
        return cls(override_mapping(overrides, fallback))

    def sql_type_name(self, data_type: pa.DataType) -> str:
        """Return the SQL type name for ``data_type``.

        Raises:
            UnsupportedArrowType: If the mapping yields nothing usable.
        """
        if not (name := self.arrow_to_sql_type_name_mapping(data_type)):
            raise UnsupportedArrowType(data_type)
        return name
