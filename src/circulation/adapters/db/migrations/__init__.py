"""Alembic migration scripts for the circulation schema."""
