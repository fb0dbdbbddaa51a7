"""Unit tests for DDL/DML generation."""

import pyarrow as pa
import pytest

from sqlquirks.adapters.db.ddl import create_table_sql, drop_table_sql, insert_sql
from sqlquirks.interfaces.arrow_types import ArrowTypeId
from sqlquirks.interfaces.errors import UnsupportedArrowType
from sqlquirks.interfaces.sql_quirks import SqlQuirks

SCHEMA = pa.schema([("ID", pa.int64()), ("Name", pa.string()), ("seen", pa.timestamp("us"))])


def test_create_table_uses_default_names():
    """Without overrides the default table is used; identifiers stay unquoted."""
    assert create_table_sql("Users", SCHEMA, SqlQuirks()) == (
        "CREATE TABLE Users (ID BIGINT, Name CLOB, seen TIMESTAMP)"
    )


def test_create_table_uses_backend_overrides():
    """Overrides from the backend's SqlQuirks are honored."""
    quirks = SqlQuirks.with_overrides({ArrowTypeId.UTF8: "TEXT"})
    assert create_table_sql("Users", SCHEMA, quirks) == (
        "CREATE TABLE Users (ID BIGINT, Name TEXT, seen TIMESTAMP)"
    )


def test_create_table_rejects_unmapped_types():
    """Unsupported column types surface UnsupportedArrowType."""
    schema = pa.schema([("tags", pa.list_(pa.string()))])
    with pytest.raises(UnsupportedArrowType):
        create_table_sql("t", schema, SqlQuirks())


def test_create_table_rejects_empty_schema():
    """A table needs at least one column."""
    with pytest.raises(ValueError):
        create_table_sql("t", pa.schema([]), SqlQuirks())


def test_insert_uses_positional_binds():
    """Binds are named by position, independent of column names."""
    assert insert_sql("Users", SCHEMA) == (
        "INSERT INTO Users (ID, Name, seen) VALUES (:p0, :p1, :p2)"
    )


def test_drop_table():
    """DROP TABLE without IF EXISTS."""
    assert drop_table_sql("Users") == "DROP TABLE Users"
