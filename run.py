"""Entry point for the SafetyNet Alerts API.

This script starts the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host, port, data file and log level are read from environment
variables (``HOST``, ``PORT``, ``DATA_FILE``, ``LOG_LEVEL``...); see
``safety_alerts_api/app/core/config.py`` for the full list.

Mutations are written back to ``DATA_OUTPUT_FILE``.  When it is not
set they overwrite ``DATA_FILE``, by default the ``data/data.json``
bundled inside the installed package; point ``DATA_OUTPUT_FILE`` at a
writable copy to keep the bundled dataset pristine.

Usage:
    DATA_OUTPUT_FILE=./data.json python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from safety_alerts_api.app.core.config import settings
from safety_alerts_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
