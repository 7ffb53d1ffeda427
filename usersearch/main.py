"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (search, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Dataset and token store adapters, built once from settings

No business logic belongs here.
"""

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from usersearch.core.config import Settings, settings as default_settings
from usersearch.infrastructure.search.token_store import StaticTokenStore
from usersearch.infrastructure.search.xml_user_repository import XmlUserRepository
from usersearch.interfaces.health import router as health_router
from usersearch.interfaces.search.router import router as search_router
from usersearch.shared.errors.handlers import register_error_handlers
from usersearch.shared.logging import configure_logging
from usersearch.shared.security.headers import SecurityHeadersMiddleware
from usersearch.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to build the app from. Defaults to the
            environment-loaded settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Adapters ---
    app.state.settings = settings
    app.state.user_repository = XmlUserRepository(settings.dataset_path)
    app.state.token_store = StaticTokenStore(settings.access_tokens)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(search_router, prefix=settings.api_prefix)

    return app


app = create_app()
