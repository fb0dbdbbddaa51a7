"""DDL/DML text for tables described by an Arrow schema.

Identifiers are emitted *unquoted*, exactly as the conformance suite writes
them, so the backend applies its own case folding (see
``ValidationQuirks.case_fold_table_name``). Column types come from the
backend's ``SqlQuirks``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pyarrow as pa

    from sqlquirks.interfaces.sql_quirks import SqlQuirks


def create_table_sql(name: str, schema: pa.Schema, sql_quirks: SqlQuirks) -> str:
    """Render ``CREATE TABLE`` for ``schema``.

    Raises:
        UnsupportedArrowType: If a field's type has no SQL type name.
        ValueError: If the schema has no fields.
    """
    if len(schema) == 0:
        raise ValueError(f"Cannot create table {name!r} without columns")
    columns = ", ".join(
        f"{field.name} {sql_quirks.sql_type_name(field.type)}" for field in schema
    )
    return f"CREATE TABLE {name} ({columns})"


def insert_sql(name: str, schema: pa.Schema) -> str:
    """Render a parametrized ``INSERT`` with positional binds ``:p0``, ``:p1``..."""
    columns = ", ".join(field.name for field in schema)
    binds = ", ".join(f":p{i}" for i in range(len(schema)))
    return f"INSERT INTO {name} ({columns}) VALUES ({binds})"


def drop_table_sql(name: str) -> str:
    """Render ``DROP TABLE``. No ``IF EXISTS``: a missing table is an error."""
    return f"DROP TABLE {name}"
