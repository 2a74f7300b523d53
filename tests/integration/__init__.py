"""Integration tests.

Purpose
- Exercise the SQLAlchemy adapters and Alembic migrations against real SQLite.

Guidelines
- Use realistic configuration and setup/teardown per test.
- Minimize mocking; prefer a migrated database file from the fixtures.
- Marked 'integration'; slower than unit tests but reliable.
"""
