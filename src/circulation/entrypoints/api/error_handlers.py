"""Translate circulation errors into JSON error responses.

Every error body has the shape ``{"error": {"code": ..., "message": ...}}``.
Known errors map to a fixed status and code (see `ERROR_MAP`); request
validation failures become 400s with field details; anything else is a 500
that never exposes internal details.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from circulation.domain.errors import HoldNotPlacedError, HoldOwnershipError
from circulation.interfaces.repositories import (
    ConcurrentModificationError,
    DuplicateBarcodeError,
)
from circulation.service_layer.errors import (
    HoldNotFoundError,
    ItemNotAvailableError,
    ItemNotFoundError,
    ItemNotOnHoldError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

# More specific classes first; the first isinstance match wins.
ERROR_MAP: tuple[tuple[type[Exception], int, str], ...] = (
    (HoldNotFoundError, status.HTTP_404_NOT_FOUND, "HOLD_NOT_FOUND"),
    (ItemNotAvailableError, status.HTTP_404_NOT_FOUND, "ITEM_NOT_AVAILABLE"),
    (ItemNotOnHoldError, status.HTTP_404_NOT_FOUND, "ITEM_NOT_ON_HOLD"),
    (ItemNotFoundError, status.HTTP_404_NOT_FOUND, "ITEM_NOT_FOUND"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
    (HoldOwnershipError, status.HTTP_400_BAD_REQUEST, "HOLD_OWNERSHIP"),
    (HoldNotPlacedError, status.HTTP_409_CONFLICT, "HOLD_NOT_PLACED"),
    (DuplicateBarcodeError, status.HTTP_409_CONFLICT, "DUPLICATE_BARCODE"),
    (
        ConcurrentModificationError,
        status.HTTP_409_CONFLICT,
        "CONCURRENT_MODIFICATION",
    ),
)


def error_body(code: str, message: str, **extra: object) -> dict:
    """Build the JSON error envelope."""
    return {"error": {"code": code, "message": message, **extra}}


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI app."""
    _register_known_error_handlers(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_known_error_handlers(app: FastAPI) -> None:
    async def known_error_handler(request: Request, exc: Exception) -> JSONResponse:
        for exc_type, status_code, code in ERROR_MAP:
            if isinstance(exc, exc_type):
                logger.info(
                    "%s on %s: %s", type(exc).__name__, request.url.path, exc
                )
                return JSONResponse(
                    status_code=status_code, content=error_body(code, str(exc))
                )
        # Registered types are all listed in ERROR_MAP.
        raise exc  # pragma: no cover

    for exc_type, _, _ in ERROR_MAP:
        app.add_exception_handler(exc_type, known_error_handler)


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Validation error on %s: %s", request.url.path, exc.errors())
        details = [
            {
                "field": ".".join(str(loc) for loc in err["loc"]),
                "message": err["msg"],
                "type": err["type"],
            }
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                "VALIDATION_ERROR", "Invalid request data", details=details
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
