"""Command-line interface for the circulation service."""
