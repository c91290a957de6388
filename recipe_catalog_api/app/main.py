"""
Main entrypoint for the Recipe Catalog API.

This module assembles the FastAPI application, sets up logging,
wires the in-memory repositories and services, and includes the
versioned routers.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``
so it can be served directly, e.g.::

    uvicorn recipe_catalog_api.app.main:app --reload

Every application instance owns its own storage and signing key.
Tests build isolated instances with ``create_app(Settings(...))``.
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.errors import register_exception_handlers
from .api.v1.router import router as v1_router
from .container import ServiceContainer, build_container
from .core.config import Settings, settings as default_settings
from .core.errors import DuplicateError
from .core.logging_config import setup_logging
from .schemas.user import UserInput


logger = logging.getLogger(__name__)


def _bootstrap_admin(container: ServiceContainer) -> None:
    """Create the administrator account named in the settings, if any."""
    config = container.settings
    if not (config.admin_username and config.admin_password):
        return
    data = UserInput(
        username=config.admin_username,
        email=config.admin_email or f"{config.admin_username}@localhost",
        password=config.admin_password,
        role="admin",
    )
    try:
        container.user_service.create_user(data)
    except DuplicateError:
        logger.info("Administrator %s already exists", config.admin_username)
    else:
        logger.info("Created administrator %s", config.admin_username)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the values read from the
        environment by ``core.config``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.state.container = build_container(settings)
    _bootstrap_admin(app.state.container)

    register_exception_handlers(app)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        # Outermost handler: an unexpected error in one request is logged
        # and answered with 500 instead of propagating further.
        start = time.perf_counter()
        logger.info("Started %s %s", request.method, request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": "Internal server error"},
            )
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Completed %s %s with %d in %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can find it.
app = create_app()
