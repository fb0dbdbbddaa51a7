"""pytest integration for suites written against the quirks contract.

Enable it from a ``conftest.py``:

    pytest_plugins = ["sqlquirks.testing.fixtures"]
"""
