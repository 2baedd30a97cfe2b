"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers)
- Logging configuration
- The shared upstream HTTP client and the two API clients built on it

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.core.config import Settings, settings
from app.infrastructure.pokedex.species_info_client import PokeApiSpeciesInfoClient
from app.infrastructure.pokedex.translation_client import FunTranslationsClient
from app.interfaces.health import router as health_router
from app.interfaces.pokedex.router import router as pokedex_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware

logger = logging.getLogger(__name__)


def _build_lifespan(config: Settings):
    """Build a lifespan that owns the shared upstream HTTP client."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        timeout = config.upstream_timeout_seconds
        async with httpx.AsyncClient(timeout=timeout) as http_client:
            app.state.species_client = PokeApiSpeciesInfoClient(
                http_client, config.pokeapi_base_url, timeout=timeout
            )
            app.state.translation_client = FunTranslationsClient(
                http_client, config.funtranslations_base_url, timeout=timeout
            )
            logger.info(
                "Upstream clients ready (timeout=%.1fs)",
                config.upstream_timeout_seconds,
            )
            yield
        logger.info("Upstream HTTP client closed")

    return lifespan


def create_app(config: Settings = settings) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        config: Settings to build the application from.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=config.log_level)

    app = FastAPI(
        title=config.project_name,
        version=config.version,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
        lifespan=_build_lifespan(config),
    )

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(pokedex_router)

    return app


app = create_app()
