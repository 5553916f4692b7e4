from __future__ import annotations

import re
from pathlib import PurePosixPath

DOCS_PREFIX = "/docs"
SWAGGER_JSON_URL = "/swagger.json"

# Hardcoded example API that ships with swagger-ui-dist's initializer.
UPSTREAM_EXAMPLE_URL = "https://petstore.swagger.io/v2/swagger.json"

INDEX_ASSET = "index.html"
INITIALIZER_ASSET = "swagger-initializer.js"

ATTR_RE = re.compile(r'\b(href|src)="([^"]*)"')
URL_LITERAL_RE = re.compile(r"""\burl\s*:\s*(["'])[^"']*\1""")

BOOTSTRAP_SNIPPET = """
window.onload = function () {
  window.ui = SwaggerUIBundle({
    url: "%s",
    dom_id: "#swagger-ui",
  });
};
""" % SWAGGER_JSON_URL

CONTENT_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".png": "image/png",
    ".json": "application/json",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def content_type_for(asset: str) -> str:
    return CONTENT_TYPES.get(PurePosixPath(asset).suffix.lower(), DEFAULT_CONTENT_TYPE)


def _decode(raw: bytes) -> str:
    # round-trips any non-UTF-8 bytes untouched
    return raw.decode("utf-8", errors="surrogateescape")


def _encode(text: str) -> bytes:
    return text.encode("utf-8", errors="surrogateescape")


def _prefix_relative(value: str) -> str:
    if not value or value.startswith(("http", "#", DOCS_PREFIX)):
        return value
    if value.startswith("./"):
        value = value[2:]
    if value.startswith("/"):
        return DOCS_PREFIX + value
    return f"{DOCS_PREFIX}/{value}"


def rewrite_index_html(raw: bytes) -> bytes:
    """
    Point relative href/src attributes at the /docs mount so the browser
    fetches sibling assets through this service.
    """
    text = _decode(raw)

    def _sub(m: re.Match[str]) -> str:
        return f'{m.group(1)}="{_prefix_relative(m.group(2))}"'

    return _encode(ATTR_RE.sub(_sub, text))


def rewrite_initializer(raw: bytes) -> bytes:
    """Make the Swagger UI initializer load this service's /swagger.json."""
    text = _decode(raw)
    if UPSTREAM_EXAMPLE_URL in text:
        return _encode(text.replace(UPSTREAM_EXAMPLE_URL, SWAGGER_JSON_URL))

    text, n = URL_LITERAL_RE.subn(f'url: "{SWAGGER_JSON_URL}"', text, count=1)
    if n:
        return _encode(text)

    return _encode(text.rstrip("\n") + "\n" + BOOTSTRAP_SNIPPET)


def rewrite_asset(asset: str, raw: bytes) -> bytes:
    """Apply the rewrite matching the asset name; other assets pass through unchanged."""
    if asset == INDEX_ASSET:
        return rewrite_index_html(raw)
    if asset == INITIALIZER_ASSET:
        return rewrite_initializer(raw)
    return raw


def asset_name_from_path(rest: str) -> str:
    """
    Map the part of the URL after "/docs" to an asset name.

    "" and "/" mean the UI entry page; otherwise the leading "/" is dropped.
    """
    name = rest.lstrip("/")
    return name or INDEX_ASSET
