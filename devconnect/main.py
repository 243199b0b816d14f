"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from devconnect.api.error_handlers import register_exception_handlers
from devconnect.api.v1 import profile_router
from devconnect.core.config import get_settings
from devconnect.infrastructure.db.mongo_connection import close_mongo_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Closes the MongoDB connection on shutdown."""
    logger.info("Profile API started")
    yield
    close_mongo_client()
    logger.info("Profile API stopped")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - Exception handlers
    - API route registration
    - Lifespan handler that closes the MongoDB connection

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title="DevConnect Profile API",
        description="Developer profiles with experience, education, social links and avatars",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(profile_router, prefix="/api/profile")

    @application.get("/")
    async def root():
        """Root endpoint - service banner."""
        return {
            "status": "running",
            "service": "DevConnect Profile API",
            "version": "1.0.0",
            "docs": "/docs"
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
