#run it with uvicorn contactform.main:app --reload  (or: python -m contactform)
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
import logging

from contactform.api.api_router import api_router
from contactform.core.config import Settings, get_settings
from contactform.core.errors import StorageError
from contactform.core.submission_service import SubmissionService
from contactform.db.store import SubmissionStore, open_store
from contactform.models.contact import ErrorResponse, HealthResponse

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared store once per process and close it on shutdown"""
    settings: Settings = app.state.settings
    store = app.state.store
    if store is None:
        store = open_store(settings)

    logger.info(f"🚀 Starting database initialization ({settings.storage_backend} store)...")
    try:
        await store.initialize()
    except StorageError as e:
        logger.error(f"❌ Database initialization failed: {e.detail}")
        raise

    app.state.store = store
    app.state.submission_service = SubmissionService(store)
    logger.info(f"Server running at http://{settings.host}:{settings.port}")
    try:
        yield
    finally:
        await store.close()


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies get the same {"error": ...} shape as rule failures"""
    detail = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=f"Invalid request body: {detail}").model_dump(),
    )


async def catch_unhandled_errors(request: Request, call_next):
    """
    Render any uncaught error as a 500 ErrorResponse.

    Runs inside CORSMiddleware so the reply still carries CORS headers; an
    exception handler for Exception would run in ServerErrorMiddleware,
    outside CORS.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        logger.error(f"❌ Unhandled error on {request.method} {request.url.path}: {str(exc)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Internal server error").model_dump(),
        )


def create_app(settings: Optional[Settings] = None, store: Optional[SubmissionStore] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration (defaults to the cached environment settings)
        store: Pre-built store; when omitted one is opened from the settings at startup
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    # Registered first so CORSMiddleware wraps it
    app.middleware("http")(catch_unhandled_errors)

    # WARNING: permissive CORS is for development only.
    # For production, set ALLOWED_ORIGINS to the frontend domain(s),
    # comma-separated or as a JSON list.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(api_router)

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse()

    return app


app = create_app()
