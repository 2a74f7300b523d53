"""Database plumbing: engine factory, shared metadata and Alembic migrations."""
