from __future__ import annotations

import json
import os
import uuid
from pathlib import Path
from typing import Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_json(raw: bytes | str) -> Any:
    """
    Parse strict JSON.

    Raises ValueError on malformed input, undecodable bytes, or the
    non-standard NaN / Infinity literals.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    return json.loads(raw, parse_constant=_reject_constant)


def dump_json(payload: Any, *, indent: int = 2) -> str:
    """
    Pretty-print JSON, keeping non-ASCII text literal.

    Strings holding lone surrogates (legal as \\u escapes in JSON, not encodable
    as UTF-8) force the whole document to ASCII escapes instead.
    """
    text = json.dumps(payload, indent=indent, ensure_ascii=False)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        text = json.dumps(payload, indent=indent, ensure_ascii=True)
    return text + "\n"


def read_bytes(path: Path) -> bytes:
    """Read a file verbatim. Propagates OSError (FileNotFoundError for missing files)."""
    return path.read_bytes()


def atomic_write_json(path: Path, payload: Any, *, indent: int = 2) -> None:
    """
    Atomically write JSON to disk by writing to a temp file then replacing.

    The temp file name is unique per call so concurrent writers to the same
    path never share one.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f".{path.name}.{uuid.uuid4().hex}.tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            f.write(dump_json(payload, indent=indent))
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
