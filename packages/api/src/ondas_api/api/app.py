"""FastAPI application factory and configuration."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from ondas import create_finder
from rich.console import Console
from rich.logging import RichHandler

from ondas_api.api.container import Services
from ondas_api.api.exceptions import register_exception_handlers
from ondas_api.api.routes import health, radio
from ondas_api.settings import Settings, get_settings


def setup_logging() -> None:
    """Configure logging with Rich handler for all loggers including uvicorn."""
    settings = get_settings()
    console = Console(force_terminal=True)

    handler = RichHandler(
        console=console, rich_tracebacks=True, show_path=False, markup=False
    )
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s", datefmt="[%X]"))

    # Configure root logger
    logging.root.handlers = [handler]
    logging.root.setLevel(settings.log_level)

    # Configure uvicorn loggers to use Rich
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = [handler]
        uvicorn_logger.propagate = False

    # httpx logs every request at INFO; per-attempt detail is logged by ondas
    logging.getLogger("httpx").setLevel(logging.WARNING)


setup_logging()
logger = logging.getLogger(__name__)


def create_services(settings: Settings) -> Services:
    """Create all application services with proper dependency wiring.

    Args:
        settings: Application settings.

    Returns:
        Services container with all application services.
    """
    config = settings.search_config()
    logger.info(
        "Radio mirrors: %s (timeout %.1fs)", ", ".join(config.mirrors), config.timeout
    )
    return Services(station_finder=create_finder(config))


def create_api_router() -> APIRouter:
    """Create the API router with all routes under /api prefix."""
    api_router = APIRouter(prefix="/api")
    api_router.include_router(health.router)
    api_router.include_router(radio.router)
    return api_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logger.info("Starting application...")

    services = create_services(get_settings())
    app.state.services = services
    logger.info("Services initialized")

    yield

    services.close()


def create_app() -> FastAPI:
    """Create and configure the main FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="ondas",
        description="Radio station search API for signage screens",
        version=version("ondas"),
        lifespan=lifespan,
        debug=settings.debug,
    )

    # Register exception handlers
    register_exception_handlers(app)

    # CORS middleware (type ignore needed due to Starlette typing limitations)
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API routes under /api prefix
    app.include_router(create_api_router())

    return app


# Create app instance for uvicorn
app = create_app()
