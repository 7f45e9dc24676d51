# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from .api.v1 import register_error_handlers, user_router
from .core.logging_config import configure_logging
from .infrastructure.db import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    The DI container and MongoDB client are created lazily on first request;
    shutdown closes the client if one was opened.
    """
    logger.info("User service starting")

    yield

    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - JSON error envelope for unhandled exceptions
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    configure_logging()

    application = FastAPI(
        title="User Service API",
        version="1.0.0",
        description="User management: registration, lookup, login and token refresh",
        lifespan=lifespan
    )

    register_error_handlers(application)
    application.include_router(user_router)

    return application


# Create application instance
app = create_application()
