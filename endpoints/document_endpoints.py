from __future__ import annotations

import logging

from fastapi import Depends, Request
from fastapi.responses import JSONResponse, Response

from persistence.repositories import AsyncDocumentRepository

from .deps import document_repository
from .schemas import SAVED, WELCOME

logger = logging.getLogger(__name__)


async def welcome() -> JSONResponse:
    return JSONResponse(WELCOME.model_dump(), status_code=200)


async def get_document(
    doc_id: str,
    repo: AsyncDocumentRepository = Depends(document_repository),
) -> Response:
    # Stored bytes go out untouched; DocumentNotFoundError is rendered by the app's handler.
    raw = await repo.get_document(doc_id)
    return Response(content=raw, status_code=200, media_type="application/json")


async def save_document(
    doc_id: str,
    request: Request,
    repo: AsyncDocumentRepository = Depends(document_repository),
) -> JSONResponse:
    body = await request.body()
    await repo.save_document(doc_id, body)
    logger.info("DOCUMENT SAVED: id=%s bytes=%d", doc_id, len(body))
    return JSONResponse(SAVED.model_dump(), status_code=200)
