"""Entrypoints (inbound adapters) for sqlquirks.

Currently only the ``sqlquirks`` command-line interface.
"""
