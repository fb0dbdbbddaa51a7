"""Adapters (infrastructure) for sqlquirks.

Concrete backend quirks (PostgreSQL, SQLite), SQLAlchemy engine wiring, the
database handle, DDL generation and secret redaction.

Dependency rule: may import `sqlquirks.interfaces`; the interfaces must not
import this package at runtime.
"""
