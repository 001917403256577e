"""Map domain exceptions to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from pulsa.core.exceptions import (
    InsufficientFundsError,
    PulsaError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _status_for(exc: PulsaError) -> int:
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, InsufficientFundsError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if isinstance(exc, StorageError) and exc.is_not_found:
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, StorageError) and exc.is_in_use:
        return status.HTTP_409_CONFLICT
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def pulsa_error_handler(request: Request, exc: PulsaError) -> JSONResponse:
    """Render a PulsaError as ``{"detail": message, **details}``."""
    status_code = _status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, **exc.details},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the PulsaError handler on the application."""
    app.add_exception_handler(PulsaError, pulsa_error_handler)  # type: ignore[arg-type]
