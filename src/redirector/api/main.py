import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from redirector.api.routes import public_redirects
from redirector.app_shell.config import get_settings
from redirector.components.redirects import ConfigError, Configuration
from redirector.rules.loader import load_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Load config from disk on startup unless one was supplied (fail-fast)
    if app.state.redirect_config is None:
        settings = get_settings()
        try:
            app.state.redirect_config = load_config(settings.config_path)
            logger.info(f"Config loaded from {settings.config_path}")
        except (ConfigError, FileNotFoundError) as e:
            logger.critical(f"Config load failed: {e}")
            sys.exit(1)

    config: Configuration = app.state.redirect_config
    logger.info(
        f"Redirecting to {config.destination} "
        f"(default status {int(config.redirect_status)}, {len(config.redirects)} rules)"
    )

    yield
    # Shutdown cleanup if needed


def create_app(config: Configuration | None = None) -> FastAPI:
    """
    Build the redirector application.

    With no config, the file named by the settings is loaded at startup.
    """
    app = FastAPI(
        title="Redirector",
        version="0.1.0",
        lifespan=lifespan,
        # every path redirects, so no docs routes
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.redirect_config = config

    app.include_router(public_redirects.router)

    return app


app = create_app()
