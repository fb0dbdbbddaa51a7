"""sqlquirks test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Invariants every quirks implementation must honor, run against each backend.
- integration/  : Real databases (SQLite files, PostgreSQL via Testcontainers).
- e2e/          : The ``sqlquirks`` CLI invoked through Click's runner.
- fixtures/     : pytest plugins shared by all layers (no tests here).
- helpers/      : Shared utilities (no tests here).

Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
