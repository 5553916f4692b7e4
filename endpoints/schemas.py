from __future__ import annotations

from pydantic import BaseModel


class MessageBody(BaseModel):
    message: str


class ErrorBody(BaseModel):
    error: str


WELCOME = MessageBody(message="Welcome to the JSON API!")
SAVED = MessageBody(message="Saved successfully")
NOT_FOUND = ErrorBody(error="Not Found")
