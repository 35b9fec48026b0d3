from __future__ import annotations

import pytest

from app.core.exceptions import InvalidPayloadError, NotFoundError
from app.schemas.message import Error, InvalidPayload, NotFound, Success, message_for


@pytest.mark.parametrize(
    "kind, expected",
    [
        ("Success", Success(message="ok")),
        ("Error", Error(message="ok")),
        ("NotFound", NotFound(message="ok")),
        ("InvalidPayload", InvalidPayload(message="ok")),
    ],
)
def test_message_for_builds_each_variant(kind: str, expected) -> None:
    assert message_for(kind, "ok") == expected


def test_message_for_unknown_kind_is_error() -> None:
    assert message_for("Exploded", "boom") == Error(message="boom")


def test_success_serialises_with_its_tag() -> None:
    assert Success(message="done").model_dump() == {"kind": "Success", "message": "done"}


def test_exceptions_map_to_their_variant() -> None:
    assert NotFoundError("Vendor not found").to_message() == NotFound(message="Vendor not found")
    assert InvalidPayloadError("x").to_message() == InvalidPayload(message="x")
