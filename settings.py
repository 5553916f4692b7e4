from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name, "").strip()
    return Path(raw).expanduser() if raw else default


def project_root() -> Path:
    # settings.py lives at the project root
    return Path(__file__).resolve().parent


@dataclass(frozen=True)
class Settings:
    # Network
    host: str
    port: int

    # Storage / static assets
    data_dir: Path
    docs_dir: Path
    swagger_file: Path

    # Logging
    log_level: str
    debug_log_requests: bool


def get_settings() -> Settings:
    root = project_root()

    host = os.getenv("HOST", "0.0.0.0")
    port = _env_int("PORT", 3000)

    data_dir = _env_path("DATA_DIR", root / "data")
    docs_dir = _env_path("DOCS_DIR", root / "swagger-ui")
    swagger_file = _env_path("SWAGGER_FILE", root / "swagger.json")

    log_level = os.getenv("LOG_LEVEL", "info").strip().lower() or "info"
    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", True)

    return Settings(
        host=host,
        port=port,
        data_dir=data_dir,
        docs_dir=docs_dir,
        swagger_file=swagger_file,
        log_level=log_level,
        debug_log_requests=debug_log_requests,
    )
