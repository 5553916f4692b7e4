from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def sandbox_settings(tmp_path: Path):
    """
    Settings pointing every path at a temp project directory so tests never touch real ./data.
    """
    from settings import Settings

    docs_dir = tmp_path / "swagger-ui"
    docs_dir.mkdir()
    return Settings(
        host="127.0.0.1",
        port=3000,
        data_dir=tmp_path / "data",
        docs_dir=docs_dir,
        swagger_file=tmp_path / "swagger.json",
        log_level="info",
        debug_log_requests=True,
    )


@pytest.fixture
def client(sandbox_settings):
    from fastapi.testclient import TestClient

    import app as app_module

    with TestClient(app_module.create_app(sandbox_settings)) as c:
        yield c
