import asyncio
import logging
import os
from contextlib import asynccontextmanager, suppress

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import Scope

from .api.v1 import api_router
from .config import get_settings
from .exceptions import NoDataFoundError, StoreUnavailableError, TrendStoryError, ValidationError
from .services.repository_sync_service import RepositorySyncService


def apply_logging_preferences(settings):
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.debug else logging.WARNING)


settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(message)s"
)

apply_logging_preferences(settings)

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
        structlog.processors.JSONRenderer() if settings.log_format == "json" else structlog.dev.ConsoleRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger(__name__)


class DatasetStaticFiles(StaticFiles):
    """Static files whose directory only appears after the first dataset sync."""

    async def get_response(self, path: str, scope: Scope):
        if not os.path.isdir(self.directory):
            raise StarletteHTTPException(status_code=404)
        return await super().get_response(path, scope)

    async def check_config(self) -> None:
        if os.path.isdir(self.directory):
            await super().check_config()


def error_body(message: str, code: int) -> dict:
    return {"error": message, "code": code}


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    apply_logging_preferences(settings)
    logger.info(
        "Starting Trend Story API",
        version="0.1.0",
        address=f"http://{settings.api_host}:{settings.api_port}",
        endpoints=["GET /latest", "GET /dates", "GET /date/{yyyymmdd}", "GET /images/*"],
    )

    sync_task = None
    if settings.sync_enabled:
        sync_service = RepositorySyncService(
            repository_url=settings.repository_url,
            repository_path=settings.repository_path,
            interval_minutes=settings.sync_interval_minutes,
            git_executable=settings.git_executable,
        )
        sync_task = asyncio.create_task(sync_service.run_forever())

    yield

    if sync_task is not None:
        sync_task.cancel()
        with suppress(asyncio.CancelledError):
            await sync_task
    logger.info("Shutting down Trend Story API")


def create_application() -> FastAPI:
    app = FastAPI(
        title="Trend Story API",
        description="Read-only API over the daily trend story dataset",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=settings.allowed_methods,
        allow_headers=settings.allowed_headers,
    )

    @app.exception_handler(TrendStoryError)
    async def trend_story_exception_handler(request: Request, exc: TrendStoryError):
        if isinstance(exc, StoreUnavailableError):
            logger.error(
                "Trend store unavailable",
                path=request.url.path,
                error=exc.message,
                details=exc.details,
            )
            message = StoreUnavailableError.public_message
        elif isinstance(exc, ValidationError):
            message = exc.message
        elif isinstance(exc, NoDataFoundError):
            logger.info("Request returned no data", path=request.url.path, error=exc.message)
            message = exc.message
        else:
            logger.error("Request failed", path=request.url.path, error=exc.message, details=exc.details)
            message = exc.message
        return JSONResponse(status_code=exc.status_code, content=error_body(message, exc.status_code))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = exc.detail if isinstance(exc.detail, str) else "Error"
        return JSONResponse(status_code=exc.status_code, content=error_body(message, exc.status_code))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception occurred",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content=error_body("Internal Server Error", 500))

    app.include_router(api_router)

    app.mount("/images", DatasetStaticFiles(directory=settings.images_dir, check_dir=False), name="images")

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "trend_story.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level="info",
        access_log=False,
    )
