"""
Main entrypoint for the SafetyNet Alerts API.

This module assembles the FastAPI application, sets up logging,
registers the exception handlers and includes the versioned router.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn safety_alerts_api.app.main:app --reload

The data file configured in ``core.config`` is loaded when the
application starts.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.datastore import init_datastore
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_datastore()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that the data file load is reported.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)
    return app


app = create_app()
