from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from fastapi import FastAPI
from starlette.convertors import Convertor, register_url_convertor

from .docs_endpoints import docs_asset, swagger_json
from .document_endpoints import get_document, save_document, welcome

ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


class DigitsConvertor(Convertor[str]):
    """Path segment of ASCII digits, kept as a string so "007" stays "007"."""

    regex = "[0-9]+"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return str(value)


register_url_convertor("digits", DigitsConvertor())


@dataclass(frozen=True)
class RouteEntry:
    kind: str
    methods: list[str]
    path: str
    handler: Callable[..., Any]


# Priority order: Starlette tries routes in registration order and the first full match wins.
# A path match with the wrong method falls through to the Not Found handler.
ROUTES: list[RouteEntry] = [
    RouteEntry("welcome", ANY_METHOD, "/", welcome),
    RouteEntry("welcome", ANY_METHOD, "/hello", welcome),
    RouteEntry("swagger_json", ANY_METHOD, "/swagger.json", swagger_json),
    RouteEntry("docs_ui", ANY_METHOD, "/docs{rest:path}", docs_asset),
    RouteEntry("get_document", ["GET"], "/{doc_id:digits}", get_document),
    RouteEntry("save_document", ["POST"], "/save/{doc_id:digits}", save_document),
]


def register_routes(app: FastAPI, routes: list[RouteEntry] = ROUTES) -> None:
    for entry in routes:
        app.add_api_route(
            entry.path,
            entry.handler,
            methods=entry.methods,
            name=f"{entry.kind}:{entry.path}",
            include_in_schema=False,
        )
