from __future__ import annotations

from typing import Protocol


class DocumentStore(Protocol):
    """
    Minimal DB-friendly interface: whole JSON documents persisted under a numeric id.
    """

    def read(self, doc_id: str) -> bytes:
        """Return the stored document bytes verbatim. Raises DocumentNotFoundError."""
        ...

    def write(self, doc_id: str, raw: bytes) -> None:
        """Validate raw as JSON and replace the stored document. Raises InvalidDocumentError / DocumentWriteError."""
        ...
