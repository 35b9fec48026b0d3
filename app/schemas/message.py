"""Tagged result values returned across the operation boundary."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class Message(BaseModel):
    kind: str
    message: str

    model_config = {"frozen": True}


class Success(Message):
    # Part of the result vocabulary; no current operation returns it
    kind: Literal["Success"] = "Success"


class Error(Message):
    kind: Literal["Error"] = "Error"


class NotFound(Message):
    kind: Literal["NotFound"] = "NotFound"


class InvalidPayload(Message):
    kind: Literal["InvalidPayload"] = "InvalidPayload"


_KINDS: dict[str, type[Message]] = {
    cls.model_fields["kind"].default: cls for cls in (Success, Error, NotFound, InvalidPayload)
}


def message_for(kind: str, text: str) -> Message:
    """Build the message variant named by ``kind``; unknown kinds become ``Error``."""
    return _KINDS.get(kind, Error)(message=text)
