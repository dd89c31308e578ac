"""
FastAPI application definition.

This module creates and configures the FastAPI application instance,
including middleware, exception handlers, and router registration.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from geneannot import __version__
from geneannot.annotation import AnnoqClient, PantherClient
from geneannot.annotation.http import build_http_client
from geneannot.api.routes import router
from geneannot.core.config import Config, settings
from geneannot.core.errors import (
    AnnotationServiceError,
    ClientInputError,
    ParseError,
    SessionNotFoundError,
    UploadReadError,
)
from geneannot.core.schemas import ErrorResponse
from geneannot.enrichment import AnnotationPipeline
from geneannot.session import SessionStore

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
        return _error(400, "Invalid request")

    @app.exception_handler(SessionNotFoundError)
    async def session_not_found(request: Request, exc: SessionNotFoundError):
        logger.info(f"Query rejected: {exc}")
        return _error(400, "No genes found in session")

    @app.exception_handler(ClientInputError)
    async def client_input_error(request: Request, exc: ClientInputError):
        logger.info(f"Upload rejected: {exc}")
        return _error(400, "Invalid file")

    @app.exception_handler(UploadReadError)
    async def upload_read_error(request: Request, exc: UploadReadError):
        logger.error(str(exc))
        return _error(500, "Unable to open file")

    @app.exception_handler(ParseError)
    async def parse_error(request: Request, exc: ParseError):
        logger.error(f"Upload parse failed: {exc}")
        return _error(500, "Failed to read CSV file")

    @app.exception_handler(AnnotationServiceError)
    async def annotation_error(request: Request, exc: AnnotationServiceError):
        logger.error(f"Query aborted: {exc}")
        return _error(500, f"Failed to query {exc.service} API")


def create_app(
    config: Optional[Config] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        config: Settings to use (default: the module-level settings)
        transport: Optional httpx transport for outbound calls, used by tests
            to stub the annotation services
    """
    config = config or settings

    http = build_http_client(config.ANNOTATION_TIMEOUT, transport=transport)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        http.close()

    app = FastAPI(
        title="Gene Annotation API",
        description="Combines ANNOq and PANTHER annotations for uploaded gene lists",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.sessions = SessionStore(ttl_seconds=config.SESSION_TTL_SECONDS)
    app.state.pipeline = AnnotationPipeline(
        annoq=AnnoqClient(http, config.ANNOQ_API_URL),
        panther=PantherClient(http, config.PANTHER_API_URL),
    )

    # CORS middleware for frontend integration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    # Register API routes
    app.include_router(router)

    @app.get("/ping")
    async def ping():
        """Health check endpoint."""
        return {"message": "pong"}

    logger.debug(
        f"Annotation endpoints: ANNOq={config.ANNOQ_API_URL} PANTHER={config.PANTHER_API_URL} "
        f"timeout={config.ANNOTATION_TIMEOUT}"
    )
    return app


app = create_app()
