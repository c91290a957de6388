"""Entry point for the Recipe Catalog API.

Launches the FastAPI application with Uvicorn.  Host, port and log
level come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``);
see ``recipe_catalog_api/app/core/config.py`` for every supported
variable.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from recipe_catalog_api.app.core.config import settings
from recipe_catalog_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    logging.getLogger(__name__).info("Serving %s on %s:%d", settings.project_name, settings.host, settings.port)
    asyncio.run(run_api())


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
