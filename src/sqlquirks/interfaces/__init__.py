"""Interfaces (contracts) for sqlquirks.

Defines the backend-quirks contract consumed by the shared conformance suite,
the columnar type model it speaks in, and the small DTOs and errors that cross
the boundary between the suite and backend adapters.

Dependency rule: this package does not import from `sqlquirks.adapters` or
`sqlquirks.entrypoints` at runtime.
"""
