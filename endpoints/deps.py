from __future__ import annotations

from fastapi import Request

from persistence.repositories import AsyncDocumentRepository
from settings import Settings


def app_settings(request: Request) -> Settings:
    return request.app.state.settings


def document_repository(request: Request) -> AsyncDocumentRepository:
    return request.app.state.documents
