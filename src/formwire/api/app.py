"""
FastAPI application exposing the multipart parser over HTTP.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from ..version import API_VERSION, PARSER_VERSION
from ..config import settings
from ..logging_config import setup_logging
from .routes import health, version, multipart
from .middleware import setup_logging_middleware, setup_error_handling_middleware

setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log service startup and shutdown."""
    logger.info(
        "Starting formwire API",
        version=API_VERSION,
        parser_version=PARSER_VERSION,
        log_level=settings.log_level,
        max_body_size_mb=settings.max_body_size_mb,
        max_parts=settings.max_parts,
    )
    yield
    logger.info("Shutting down formwire API")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI app instance
    """
    app = FastAPI(
        title="formwire",
        description="Parse and re-serialize multipart/form-data bodies",
        version=API_VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # First added = outermost
    setup_error_handling_middleware(app)
    setup_logging_middleware(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(version.router, prefix="/api/v1", tags=["Version"])
    app.include_router(multipart.router, prefix="/api/v1/multipart", tags=["Multipart"])

    return app


app = create_app()


def main() -> None:
    """
    Entry point for running the API server directly.

    For development use. In production, run uvicorn against formwire.api.app:app.
    """
    import uvicorn

    uvicorn.run(
        "formwire.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
