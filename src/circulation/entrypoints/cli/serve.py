"""``circulation serve``: run the HTTP API with uvicorn."""

from __future__ import annotations

import logging

import click
import uvicorn

from circulation import config
from circulation.bootstrap import bootstrap_in_memory
from circulation.entrypoints.api import create_app

from .helpers import load_container, sanitize_url

logger = logging.getLogger(__name__)


@click.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address.")
@click.option("--port", default=8000, show_default=True, type=int, help="Bind port.")
@click.option(
    "--in-memory",
    is_flag=True,
    help="Serve from in-memory repositories instead of CIRCULATION_DB_URL.",
)
def serve(host: str, port: int, in_memory: bool) -> None:
    """Serve the borrowing API over HTTP."""
    if in_memory:
        container = bootstrap_in_memory()
        logger.warning("Serving from in-memory repositories; nothing is persisted.")
    else:
        container = load_container()
        logger.info("Serving from %s", sanitize_url(config.get_db_url()))
    app = create_app(container.message_bus)
    # log_config=None keeps the logging set up by the `circulation` group
    uvicorn.run(app, host=host, port=port, log_config=None)
