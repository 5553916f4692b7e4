from __future__ import annotations


class DocumentStoreError(Exception):
    """Base class for document store failures surfaced to HTTP clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DocumentNotFoundError(DocumentStoreError):
    status_code = 404

    def __init__(self, doc_id: str):
        super().__init__(f"File {doc_id}.json not found")
        self.doc_id = doc_id


class InvalidDocumentError(DocumentStoreError):
    status_code = 400

    def __init__(self) -> None:
        super().__init__("Invalid JSON")


class DocumentWriteError(DocumentStoreError):
    status_code = 500

    def __init__(self, doc_id: str):
        super().__init__("Failed to save file")
        self.doc_id = doc_id
