"""
Marketplace reservations - FastAPI Backend Application
"""

from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from marketplace_api import __version__
from marketplace_api.config import settings
from marketplace_api.api import reservations
from marketplace_api.reservations.registry import ProviderRegistry


def configure_logging() -> None:
    """Configure structured logging"""
    logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.log_format == "console"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting marketplace reservations API", version=__version__)
    app.state.reservation_registry = ProviderRegistry()
    yield
    logger.info("Shutting down marketplace reservations API")


# Create FastAPI application
app = FastAPI(
    title="Marketplace Reservations",
    description="Reservation provider layer for the local marketplace storefront",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health():
    """Basic health check"""
    return {"status": "healthy", "service": "reservations", "version": __version__}


app.include_router(reservations.router, prefix="/reservations", tags=["Reservations"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "marketplace_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )
