"""Shared pytest fixtures, loaded through `pytest_plugins` in the root conftest."""
