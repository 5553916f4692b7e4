from __future__ import annotations

from .disk_store import DiskJsonDocumentStore
from .errors import (
    DocumentNotFoundError,
    DocumentStoreError,
    DocumentWriteError,
    InvalidDocumentError,
)
from .interfaces import DocumentStore
from .repositories import AsyncDiskDocumentRepository, AsyncDocumentRepository

__all__ = [
    "DocumentStore",
    "DiskJsonDocumentStore",
    "AsyncDocumentRepository",
    "AsyncDiskDocumentRepository",
    "DocumentStoreError",
    "DocumentNotFoundError",
    "InvalidDocumentError",
    "DocumentWriteError",
]
