# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

# Local application imports
from .api.controllers import produits_router, files_router, users_router, account_router, spa_router
from .api.controllers.spa_controller import ERROR_MESSAGE
from .api.middleware import CookiePolicyMiddleware, HstsMiddleware, JwtMiddleware, UnhandledErrorMiddleware
from .core.config import Settings, get_settings
from .core.cors import cors_policy_for
from .di.container import get_container, reset_container
from .infrastructure.db import close_database, get_database, initialize_document_store
from .infrastructure.http_client_factory import close_shared_http_client
from .infrastructure.storage import close_blob_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Startup creates the product container if it is missing and builds the
    DI container (store clients are singletons from here on). A failure
    here aborts startup.
    """
    settings = get_settings()

    await initialize_document_store(
        get_database(),
        settings.cosmos_db_container_name,
        settings.cosmos_db_partition_key,
    )
    get_container()
    logger.info(f"Application started in {settings.environment} mode")

    yield

    await close_shared_http_client()
    close_database()
    close_blob_database()
    reset_container()
    logger.info("Application shutdown complete")


async def handle_unexpected_error(request: Request, exception: Exception) -> JSONResponse:
    """Production handler: log the failure, answer with the generic error payload"""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exception}", exc_info=exception)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": ERROR_MESSAGE, "error_path": "/error"},
    )


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Middleware runs in this order on the way in: CORS, HSTS (production),
    HTTPS redirect, the production error handler, cookie policy, JWT bearer
    resolution. The error handler sits inside CORS so 500 responses keep
    their CORS headers. Routers follow, with the static/SPA fallback router
    registered last.

    Returns:
        Configured FastAPI application instance
    """
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title="Calicot WebApp API",
        version="1.0.0",
        description="Product catalog backend: document store, blob files and authentication",
        lifespan=lifespan,
        # Development gets the traceback page
        debug=settings.is_development,
    )

    if not settings.is_development:
        application.add_exception_handler(Exception, handle_unexpected_error)

    # add_middleware wraps outermost last, so register innermost first
    application.add_middleware(JwtMiddleware)
    application.add_middleware(CookiePolicyMiddleware)
    if not settings.is_development:
        application.add_middleware(UnhandledErrorMiddleware, handler=handle_unexpected_error)
    if settings.force_https:
        application.add_middleware(HTTPSRedirectMiddleware)
    if not settings.is_development:
        application.add_middleware(HstsMiddleware)

    cors_policy = cors_policy_for(settings.is_development)
    application.add_middleware(CORSMiddleware, **cors_policy.middleware_options())
    logger.info(f"Using CORS policy {cors_policy.name}")

    application.include_router(produits_router, prefix="/produits")
    application.include_router(files_router, prefix="/files")
    application.include_router(users_router, prefix="/users")
    application.include_router(account_router, prefix="/account")
    application.include_router(spa_router)

    return application


# Create application instance
app = create_application()
