"""
Main entrypoint for the 42Sports backend.

This module assembles the FastAPI application: it sets up logging,
allows cross-origin requests, installs the not-found error handler and
mounts the health check at ``/`` and the entity routers under ``/api``.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn sports_backend.app.main:app --reload

Each application owns its own ``Stores``.  Pass ``stores`` to
``create_app`` to share or pre-populate them; otherwise a fresh, empty
set is created.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.endpoints import health
from .api.router import router as api_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.network import startup_banner
from .services import RecordNotFound, Stores

logger = logging.getLogger(__name__)


async def record_not_found_handler(request: Request, exc: RecordNotFound) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)})


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Announce where phones on the same network can reach the server.
    for line in startup_banner(settings.port, settings.project_name):
        logger.info(line)
    yield


def create_app(stores: Optional[Stores] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    stores : Optional[Stores]
        Collections backing the API.  A new, empty ``Stores`` is used
        when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.stores = stores if stores is not None else Stores()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RecordNotFound, record_not_found_handler)

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
