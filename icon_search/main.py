"""Main FastAPI application for Icon Search."""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import health_router, search_router
from .config import Settings, get_settings
from .core.engine import SearchEngine
from .loader import DataLoadError, load_data
from .models.response import ErrorResponse

# Configure structured logging
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
        structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use; defaults to the cached environment settings

    Returns:
        Configured application; the index is loaded on startup
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager."""
        logger.info("Starting Icon Search service", version=settings.app_version)

        app.state.engine = None
        app.state.load_error = None
        try:
            index, config = load_data(settings.index_path, settings.search_config_path)
            app.state.engine = SearchEngine(index, config)
            logger.info("Search engine ready", **app.state.engine.get_stats())
        except DataLoadError as e:
            # Keep serving so health checks can report the failure
            app.state.load_error = str(e)
            logger.error("Failed to load icon data", path=e.path, error=e.reason)

        yield

        logger.info("Shutting down Icon Search service")

    app = FastAPI(
        title=settings.app_name,
        description="Relevance-ranked search over a precomputed icon metadata index",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    @app.middleware("http")
    async def log_requests(request: Request, call_next) -> Response:
        """Log all HTTP requests."""
        start_time = time.time()

        logger.info(
            "Request started",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else None,
        )

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            "Request completed",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            process_time_ms=round(process_time * 1000, 2)
        )

        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle global exceptions."""
        logger.error(
            "Unhandled exception",
            method=request.method,
            url=str(request.url),
            error=str(exc),
            exc_info=True
        )

        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal Server Error",
                message="An unexpected error occurred",
                details={"exception": str(exc)} if settings.debug else None
            ).model_dump(mode="json")
        )

    app.include_router(search_router)
    app.include_router(health_router)

    @app.get("/", summary="Root endpoint", description="Get basic information about the API")
    async def root() -> dict:
        """Root endpoint with basic API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "description": "Relevance-ranked search over a precomputed icon metadata index",
            "docs_url": "/docs",
            "health_url": "/api/v1/health",
            "endpoints": {
                "search": "/api/v1/search?q=home&category=ui&top_k=300",
                "expand": "/api/v1/expand?q=home",
                "categories": "/api/v1/categories",
            },
            "status": "running"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "icon_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
