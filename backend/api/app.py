"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from shared.config import Settings, get_settings

from .dependencies import init_container
from .errors import register_exception_handlers
from .middleware.cors import CORSMiddleware, options_no_content
from .responses import JSONResponse
from .routes import health
from modules.diagnostics.routes import router as diagnostics_router
from modules.reactions.routes import router as reactions_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to build services with (defaults to get_settings())

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    init_container(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        Runs startup and shutdown logic.
        """
        logging.basicConfig(level=settings.log_level.upper())
        logger.info(
            f"Starting {settings.app_name} on {settings.host}:{settings.port} "
            f"({settings.environment})"
        )
        if settings.auth_diagnostics_enabled:
            logger.warning("Auth diagnostics endpoint is enabled at /api/debug-auth")
        yield
        logger.info(f"Shutting down {settings.app_name}")

    app = FastAPI(
        title=settings.app_name,
        description="Chat backend: message reactions and auth diagnostics",
        version=settings.app_version,
        lifespan=lifespan,
        default_response_class=JSONResponse,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Added first so it sits inside CORS
    app.middleware("http")(options_no_content)

    # Configure CORS (reflects the request origin when the regex matches)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app, settings)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(reactions_router, prefix="/api/reactions", tags=["reactions"])
    if settings.auth_diagnostics_enabled:
        app.include_router(diagnostics_router, prefix="/api/debug-auth", tags=["diagnostics"])

    return app


# Application instance for uvicorn
app = create_app()
