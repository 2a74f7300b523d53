"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from circulation import __version__
from circulation.service_layer.messagebus import MessageBus

from . import routes
from .error_handlers import register_error_handlers

logger = logging.getLogger(__name__)


def create_app(bus: MessageBus) -> FastAPI:
    """Build the API around an already wired message bus.

    Args:
        bus: Message bus from `circulation.bootstrap`. Its unit of work also
            serves the read-only item lookups.
    """
    app = FastAPI(title="Circulation API", version=__version__)
    app.state.bus = bus
    app.include_router(routes.router)
    register_error_handlers(app)
    logger.debug("API created with %s", type(bus.uow).__name__)
    return app
