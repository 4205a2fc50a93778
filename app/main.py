import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import get_settings
from app.core.exceptions import (
    CodecError,
    EmptyInputError,
    EngineNotFoundError,
    InvalidFormatError,
)
from app.core.logging_config import configure_logging
from app.db.session import init_db
from app.models.schemas import ErrorResponse

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown."""
    # Startup
    configure_logging(settings)
    await init_db()
    logger.info("%s started (%s)", settings.app_name, settings.app_env)
    yield
    # Shutdown


def _status_for(exc: CodecError) -> int:
    if isinstance(exc, EngineNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, InvalidFormatError):
        return 422
    return status.HTTP_400_BAD_REQUEST


async def codec_error_handler(request: Request, exc: CodecError) -> JSONResponse:
    """Render codec errors as ErrorResponse bodies."""
    if not isinstance(exc, EmptyInputError):
        logger.info("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)

    body = ErrorResponse(
        error=type(exc).__name__,
        message=exc.message,
        details=exc.details,
    )
    return JSONResponse(status_code=_status_for(exc), content=body.model_dump())


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Text codec API. Encode and decode text with classical ciphers, "
            "Morse code, numeric codes and binary-to-text encodings over "
            "Latin and Cyrillic input."
        ),
        version="0.1.0",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CodecError, codec_error_handler)

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
