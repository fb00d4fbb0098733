"""Entry point for the 42Sports backend server.

Serves the FastAPI application with Uvicorn on the host and port
from the settings (``HOST`` and ``PORT`` environment variables, or a
``.env`` file next to this script).  Defaults are ``0.0.0.0`` and
``3000``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from sports_backend.app.core.config import settings
from sports_backend.app.core.logging_config import uvicorn_log_config
from sports_backend.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=uvicorn_log_config(settings.log_level, settings.log_file),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
