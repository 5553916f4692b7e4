from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol

from .disk_store import DiskJsonDocumentStore


class AsyncDocumentRepository(Protocol):
    async def get_document(self, doc_id: str) -> bytes: ...
    async def save_document(self, doc_id: str, raw: bytes) -> None: ...


class AsyncDiskDocumentRepository(AsyncDocumentRepository):
    """
    Async wrapper around the disk-backed document store.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, data_dir: Path) -> None:
        self._store = DiskJsonDocumentStore(data_dir)

    @property
    def store(self) -> DiskJsonDocumentStore:
        return self._store

    async def get_document(self, doc_id: str) -> bytes:
        return await asyncio.to_thread(self._store.read, doc_id)

    async def save_document(self, doc_id: str, raw: bytes) -> None:
        await asyncio.to_thread(self._store.write, doc_id, raw)
