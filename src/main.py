"""FastAPI application entry point for the translation web front end."""

from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from uuid6 import uuid7

from src.core.config import settings
from src.core.logging import bind_context, clear_context, setup_logging
from src.schemas import HealthResponse
from src.web import home_router, login_router

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    setup_logging()
    yield


def create_app() -> FastAPI:
    """Application factory for creating the FastAPI instance."""
    app = FastAPI(
        title="Gloss Translation Web",
        description=(
            "Web front end for collaborative Bible translation.\n\n"
            "Views call the translation platform's REST API for sessions, "
            "languages and language members."
        ),
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Tag every log line of a request with a request ID."""
        request_id = request.headers.get("x-request-id") or str(uuid7())
        bind_context(request_id=request_id, path=request.url.path)
        try:
            response = await call_next(request)
        finally:
            clear_context()
        response.headers["x-request-id"] = request_id
        return response

    app.include_router(home_router, tags=["Home"])
    app.include_router(login_router, tags=["Auth"])

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint for container orchestration."""
        return HealthResponse(status="healthy", version=VERSION)

    return app


# Create the app instance
app = create_app()
