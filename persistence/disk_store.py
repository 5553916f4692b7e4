from __future__ import annotations

import logging
from pathlib import Path

from json_store import atomic_write_json, parse_json, read_bytes

from .errors import DocumentNotFoundError, DocumentWriteError, InvalidDocumentError
from .interfaces import DocumentStore
from .paths import document_path, ensure_dir

logger = logging.getLogger(__name__)


class DiskJsonDocumentStore(DocumentStore):
    """
    Stores one JSON document per file: <data_dir>/<id>.json.

    - Reads return the file bytes untouched (no re-serialization).
    - Writes validate, pretty-print (2-space indent) and replace atomically.
    - Last write wins; there is no locking between concurrent writers.
    """

    def __init__(self, data_dir: Path):
        self._data_dir = data_dir

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, doc_id: str) -> Path:
        return document_path(self._data_dir, doc_id)

    def read(self, doc_id: str) -> bytes:
        path = self.path_for(doc_id)
        try:
            return read_bytes(path)
        except FileNotFoundError as e:
            raise DocumentNotFoundError(doc_id) from e
        except OSError as e:
            # Clients only ever see "not found"; keep the real cause in the logs.
            logger.warning("DOCUMENT READ: failed to read %s: %r", path, e)
            raise DocumentNotFoundError(doc_id) from e

    def write(self, doc_id: str, raw: bytes) -> None:
        path = self.path_for(doc_id)
        try:
            payload = parse_json(raw)
        except (ValueError, RecursionError) as e:
            raise InvalidDocumentError() from e

        try:
            ensure_dir(self._data_dir)
            atomic_write_json(path, payload)
        except (OSError, ValueError, RecursionError) as e:
            logger.error("DOCUMENT WRITE: failed to write %s", path, exc_info=True)
            raise DocumentWriteError(doc_id) from e
