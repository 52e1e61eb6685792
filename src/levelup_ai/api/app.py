"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from levelup_ai.api.diet import router as diet_router
from levelup_ai.api.responses import envelope_response
from levelup_ai.api.workout import router as workout_router
from levelup_ai.app_logging import configure_logging
from levelup_ai.config import parse_cors_origins
from levelup_ai.containers import AppContainer
from levelup_ai.domain.errors import ErrorKind
from levelup_ai.domain.responses import ApiResponse

API_PREFIX = "/api/ai"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "LevelUp AI service starting, provider=%s",
            app.state.container.settings.ai_default_provider,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(
        title="LevelUp AI Microservice",
        description="AI-powered fitness and nutrition plans for the LevelUp gym app",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=f"{API_PREFIX}/docs",
        openapi_url=f"{API_PREFIX}/openapi.json",
        redoc_url=None,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Rejected %s %s: invalid input", request.method, request.url.path)
        return envelope_response(
            ApiResponse.failure(
                _describe_validation_errors(exc),
                "Invalid input data",
                kind=ErrorKind.INVALID_ARGUMENT,
            )
        )

    app.include_router(diet_router, prefix=API_PREFIX)
    app.include_router(workout_router, prefix=API_PREFIX)

    @app.get(f"{API_PREFIX}/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """Flatten request validation errors into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)
