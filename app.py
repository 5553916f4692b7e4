from __future__ import annotations

import contextlib
import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dotenv import load_dotenv

from endpoints.routes import register_routes
from endpoints.schemas import NOT_FOUND, ErrorBody
from persistence.errors import DocumentStoreError
from persistence.paths import ensure_dir
from persistence.repositories import AsyncDiskDocumentRepository
from settings import Settings, get_settings

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_dir(app.state.settings.data_dir)
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    if settings is None:
        load_dotenv("local.env")
        settings = get_settings()

    # FastAPI's own docs/openapi routes would shadow /docs and the document routes.
    app = FastAPI(
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.documents = AsyncDiskDocumentRepository(settings.data_dir)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        if settings.debug_log_requests:
            now = datetime.now(timezone.utc).isoformat()
            logger.info("[%s] %s %s", now, request.method, request.url.path)
        return await call_next(request)

    @app.exception_handler(DocumentStoreError)
    async def document_store_error(request: Request, exc: DocumentStoreError):
        return JSONResponse(ErrorBody(error=exc.message).model_dump(), status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def not_found_fallback(request: Request, exc: StarletteHTTPException):
        # Unknown paths and known paths hit with the wrong method share one response.
        if exc.status_code in (404, 405):
            return JSONResponse(NOT_FOUND.model_dump(), status_code=404)
        return await http_exception_handler(request, exc)

    register_routes(app)

    return app


app = create_app()
