# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import user_router, examples_router
from .api.exception_handlers import register_exception_handlers
from .api.middleware import RequestLoggingMiddleware
from .core.config import get_settings, MONGO_BACKEND
from .core.logging_config import setup_logging
from .di.container import get_container, reset_container
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the DI container up front so a bad storage configuration fails
    at startup, and closes the MongoDB client on shutdown.
    """
    settings = get_settings()
    get_container()
    logger.info(f"{settings.app_name} started (user repository: {settings.user_repository_backend})")

    yield

    if settings.user_repository_backend == MONGO_BACKEND:
        close_database()
        reset_container()
        logger.info("MongoDB connection closed")

    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - Request logging and CORS middleware
    - Exception handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    application = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        description="In-memory user CRUD API with HTTP error code examples",
        lifespan=lifespan
    )

    application.add_middleware(RequestLoggingMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(user_router, prefix="/users")
    application.include_router(examples_router, prefix="/examples")

    return application


# Create application instance
app = create_application()
