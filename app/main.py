# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts up Leaflings, connects all the different parts together,
# and makes sure everything is ready to handle requests from the mobile app and the back office.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with middleware setup, repository bindings,
# router registration, exception handlers, static image serving and lifespan management.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn, slowapi
# - app.shared.config.settings
# - app.shared.infrastructure.database (connection, session)
# - All module routers via app.api.v1.router
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - tests/conftest.py (create_application)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.middleware.error_handling import register_exception_handlers
from app.api.middleware.logging import RequestLoggingMiddleware
from app.api.v1.router import api_router
from app.modules.advertising.domain.repositories import AdRepository
from app.modules.advertising.infrastructure.database.ad_repository_impl import AdRepositoryImpl
from app.modules.payments.domain.repositories import PaymentRepository
from app.modules.payments.infrastructure.database.payment_repository_impl import PaymentRepositoryImpl
from app.modules.plant_catalog.domain.repositories import PlantRepository, PlantTaskRepository
from app.modules.plant_catalog.infrastructure.database.plant_repository_impl import (
    PlantRepositoryImpl,
    PlantTaskRepositoryImpl,
)
from app.modules.plant_journal.domain.repositories import (
    DiaryRepository,
    LogRepository,
    UserPlantRepository,
    WarningRepository,
)
from app.modules.plant_journal.infrastructure.database.journal_repository_impl import (
    DiaryRepositoryImpl,
    LogRepositoryImpl,
    UserPlantRepositoryImpl,
    WarningRepositoryImpl,
)
from app.modules.user_management.domain.repositories import AdminRepository, UserRepository
from app.modules.user_management.infrastructure.database.user_repository_impl import (
    AdminRepositoryImpl,
    UserRepositoryImpl,
)
from app.shared.config.settings import Settings, get_settings
from app.shared.core.rate_limiter import limiter
from app.shared.infrastructure.storage.image_storage import ImageStorage
from app.shared.utils.logging import setup_logging

logger = logging.getLogger(__name__)

# Repository interfaces and the implementations FastAPI injects for them
REPOSITORY_BINDINGS = {
    UserRepository: UserRepositoryImpl,
    AdminRepository: AdminRepositoryImpl,
    PlantRepository: PlantRepositoryImpl,
    PlantTaskRepository: PlantTaskRepositoryImpl,
    UserPlantRepository: UserPlantRepositoryImpl,
    DiaryRepository: DiaryRepositoryImpl,
    LogRepository: LogRepositoryImpl,
    WarningRepository: WarningRepositoryImpl,
    AdRepository: AdRepositoryImpl,
    PaymentRepository: PaymentRepositoryImpl,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Handles startup and shutdown events for the FastAPI application:
    database engine and sessions, image directory and the PayPal client.
    """
    from app.shared.infrastructure.database.connection import close_database, init_database
    from app.shared.infrastructure.database.session import initialize_sessions
    from app.shared.infrastructure.external_apis.paypal_client import close_paypal_client, get_paypal_client

    settings = get_settings()
    logger.info("🌱 Leaflings API starting up...")

    await init_database()
    logger.info("✅ Database connection initialized")

    initialize_sessions()
    logger.info("✅ Session manager initialized")

    get_paypal_client()
    logger.info("✅ PayPal client initialized")

    ImageStorage.from_settings(settings).ensure_directory()
    logger.info(f"✅ Image directory ready: {settings.images_path}")

    try:
        yield
    finally:
        logger.info("🔄 Leaflings API shutting down...")
        await close_paypal_client()
        await close_database()
        logger.info("✅ Leaflings API shutdown complete")


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with all necessary
    middleware, routers, and settings based on the current environment.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or get_settings()
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Response-Time"],
    )

    # Outermost, so every log line of the request carries its id
    app.add_middleware(RequestLoggingMiddleware)

    # =========================================================================
    # DEPENDENCIES, RATE LIMITING & EXCEPTION HANDLERS
    # =========================================================================

    for interface, implementation in REPOSITORY_BINDINGS.items():
        app.dependency_overrides[interface] = implementation

    app.state.limiter = limiter
    register_exception_handlers(app)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_router, prefix="/api")

    storage = ImageStorage.from_settings(settings)
    storage.ensure_directory()
    app.mount(f"/{storage.url_prefix}", StaticFiles(directory=str(storage.base_dir)), name="images")

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": "/api/health",
            "api_base": "/api",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    logger.info(f"Application created ({settings.ENVIRONMENT})")
    return app


def main():
    """
    Run the application with uvicorn (``python -m app.main`` or the ``leaflings`` script).
    """
    settings = get_settings()
    uvicorn.run(
        "app.main:create_application",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
