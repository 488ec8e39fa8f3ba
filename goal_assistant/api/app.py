"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..app import Application
from ..errors import BadRequestError
from ..logging_config import get_logger
from .routes import create_chat_router

logger = get_logger(__name__)


async def _bad_request_handler(
    request: Request, exc: RequestValidationError | BadRequestError
) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else str(exc)
    logger.warning("Malformed turn payload", extra={"context": {"errors": errors}})
    return JSONResponse(status_code=400, content={"error": "Bad Request"})


def create_fastapi_app(application: Application | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    application = application or Application()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan."""
        await application.start()
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="Goal Assistant API",
        description="Turn endpoint for the goal-setting assistant",
        version="0.1.0",
        lifespan=lifespan,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=application.settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.add_exception_handler(RequestValidationError, _bad_request_handler)
    fastapi_app.add_exception_handler(BadRequestError, _bad_request_handler)

    fastapi_app.include_router(create_chat_router(application))

    return fastapi_app
