from __future__ import annotations

import argparse
import logging
import socket
from collections.abc import Sequence

import uvicorn
from dotenv import load_dotenv

from app import create_app
from persistence.paths import ensure_dir
from settings import Settings, get_settings

logger = logging.getLogger(__name__)

SWAGGER_PREVIEW_CHARS = 200
ROUTE_PROBE_HOST = "10.255.255.255"


def _route_address() -> str | None:
    # connect() on a UDP socket only picks the outbound interface; nothing is sent.
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            s.connect((ROUTE_PROBE_HOST, 80))
            address = s.getsockname()[0]
    except OSError:
        return None
    return None if address.startswith(("127.", "0.")) else address


def _hostname_addresses() -> list[str]:
    try:
        _name, _aliases, addresses = socket.gethostbyname_ex(socket.gethostname())
    except OSError:
        return []
    return addresses


def get_local_ip() -> str:
    """First non-loopback IPv4 address of this host, or "localhost"."""
    address = _route_address()
    if address:
        return address
    for address in _hostname_addresses():
        if not address.startswith("127."):
            return address
    return "localhost"


def log_swagger_preview(settings: Settings) -> None:
    path = settings.swagger_file
    if not path.is_file():
        logger.warning("swagger.json not found at %s; /swagger.json will return 500", path)
        return
    try:
        preview = path.read_text(encoding="utf-8", errors="replace")[:SWAGGER_PREVIEW_CHARS]
    except OSError as e:
        logger.warning("swagger.json at %s is not readable: %r", path, e)
        return
    logger.info("swagger.json loaded from %s: %s...", path, preview)


def build_arg_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-doc-api",
        description="Run the JSON document HTTP service.",
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host interface to bind (default: {settings.host}).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to bind (default: {settings.port}).",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["debug", "info", "warning", "error"],
        help=f"Application log level (default: {settings.log_level}).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """
    Entry point for running the service.

    Example:
        python -m server --port 3000
    """
    load_dotenv("local.env")
    settings = get_settings()
    args = build_arg_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ensure_dir(settings.data_dir)
    log_swagger_preview(settings)

    ip = get_local_ip()
    logger.info(
        "Server running:\n  - Local:   http://localhost:%d/1\n  - Network: http://%s:%d/1",
        args.port,
        ip,
        args.port,
    )

    uvicorn.run(
        create_app(settings),
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
