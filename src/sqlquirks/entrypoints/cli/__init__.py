"""Command-line interface for sqlquirks."""
