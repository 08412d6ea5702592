"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from product_api.config import Settings, get_settings
from product_api.domain.exceptions import InternalConsistencyError
from product_api.infrastructure.database import build_database
from product_api.infrastructure.identity import InMemoryIdentityRegistry
from product_api.infrastructure.logging.log_config import setup_logging
from product_api.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create the product table."""
    setup_logging(app.state.settings)

    # Schema is created fresh on every start; nothing persists across restarts
    await app.state.database.create_schema()

    yield

    # Shutdown
    await app.state.database.dispose()


async def _internal_consistency_handler(
    request: Request, exc: InternalConsistencyError
) -> JSONResponse:
    logger.error("Consistency fault on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


async def _store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Product store failure on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return await request_validation_exception_handler(request, exc)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    Every call produces an application with its own identity registry and
    its own database handle.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.identity_registry = InMemoryIdentityRegistry()
    app.state.database = build_database(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InternalConsistencyError, _internal_consistency_handler)
    app.add_exception_handler(SQLAlchemyError, _store_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    setup_logging(settings)
    logger.info("listening on %s:%d", settings.host, settings.port)
    uvicorn.run(
        "product_api.main:app",
        host=settings.host,
        port=settings.port,
    )
