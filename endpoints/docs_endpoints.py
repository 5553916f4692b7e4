from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from fastapi import Depends
from fastapi.responses import PlainTextResponse, Response

from docs_rewrite import asset_name_from_path, content_type_for, rewrite_asset
from json_store import read_bytes
from settings import Settings

from .deps import app_settings

logger = logging.getLogger(__name__)

ASSET_NOT_FOUND = "Not found"
SWAGGER_LOAD_FAILED = "Cannot load swagger.json"


def _resolve_asset(docs_dir: Path, name: str) -> Path | None:
    """
    Map an asset name onto a file inside docs_dir.

    Returns None for anything that escapes the directory or is not a regular file.
    """
    if "\x00" in name:
        return None
    root = docs_dir.resolve()
    candidate = (root / name).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate


async def swagger_json(settings: Settings = Depends(app_settings)) -> Response:
    try:
        raw = await asyncio.to_thread(read_bytes, settings.swagger_file)
    except OSError as e:
        logger.warning("SWAGGER: failed to read %s: %r", settings.swagger_file, e)
        return PlainTextResponse(SWAGGER_LOAD_FAILED, status_code=500)
    return Response(content=raw, status_code=200, media_type="application/json")


async def docs_asset(rest: str, settings: Settings = Depends(app_settings)) -> Response:
    name = asset_name_from_path(rest)
    path = await asyncio.to_thread(_resolve_asset, settings.docs_dir, name)
    if path is None:
        return PlainTextResponse(ASSET_NOT_FOUND, status_code=404)

    try:
        raw = await asyncio.to_thread(read_bytes, path)
    except OSError as e:
        logger.warning("DOCS: failed to read %s: %r", path, e)
        return PlainTextResponse(ASSET_NOT_FOUND, status_code=404)

    return Response(
        content=rewrite_asset(name, raw),
        status_code=200,
        media_type=content_type_for(name),
    )
