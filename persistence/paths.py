from __future__ import annotations

import re
from pathlib import Path

DOC_ID_RE = re.compile(r"[0-9]+")


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def is_valid_doc_id(doc_id: str) -> bool:
    return bool(DOC_ID_RE.fullmatch(doc_id))


def document_path(data_dir: Path, doc_id: str) -> Path:
    # ids are digit strings taken verbatim from the URL, so "007" stays "007.json"
    if not is_valid_doc_id(doc_id):
        raise ValueError(f"Invalid document id: {doc_id!r}")
    return data_dir / f"{doc_id}.json"
