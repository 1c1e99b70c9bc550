"""
Application exceptions and their HTTP mapping.

Services raise these exceptions for rejected mutations; the handler
registered by ``register_exception_handlers`` turns them into JSON
responses shaped like FastAPI's own ``HTTPException`` bodies
(``{"detail": "..."}``).  Query views do not raise: they return empty
results which the endpoints map to 404.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class SafetyAlertsError(Exception):
    """Base class for errors reported to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SafetyAlertsError):
    """A required field or parameter is blank or zero."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(SafetyAlertsError):
    """No entry matches the natural key."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(SafetyAlertsError):
    """The entry already exists, or the update would change nothing."""

    status_code = status.HTTP_409_CONFLICT


class PersistenceError(SafetyAlertsError):
    """The in-memory change succeeded but the data file was not written."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handler mapping ``SafetyAlertsError`` to responses."""

    @app.exception_handler(SafetyAlertsError)
    async def handle_safety_alerts_error(request: Request, exc: SafetyAlertsError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.warning(
                "%s %s rejected with %s: %s",
                request.method,
                request.url.path,
                exc.status_code,
                exc.message,
            )
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})
