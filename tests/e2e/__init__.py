"""End-to-end tests.

Purpose
- Drive the installed `sqlquirks` command the way a user or CI script does.

Guidelines
- Invoke through Click's CliRunner; assert on exit codes and visible output.
- Configure backends through the environment only.
"""
