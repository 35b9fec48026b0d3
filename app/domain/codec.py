"""Bounded binary codec shared by every stored entity.

A record is encoded as a msgpack array ``[version, field_1, ..., field_n]``
with fields in declaration order. Arrays only, so the bytes never depend on
map ordering and are identical across processes and restarts.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, TypeVar

import msgspec
from pydantic import BaseModel, Field, ValidationError

from app.db.errors import CorruptRecordError, RecordTooLargeError

RECORD_VERSION = 1
MAX_RECORD_SIZE = 512
U64_MAX = (1 << 64) - 1

U64 = Annotated[int, Field(ge=0, le=U64_MAX)]

StorableT = TypeVar("StorableT", bound="Storable")

_encoder = msgspec.msgpack.Encoder()
_decoder = msgspec.msgpack.Decoder()


class Storable(BaseModel):
    """Base for entities that live in a stable map.

    Subclasses only declare fields; field order is the wire order and must
    not change once data has been written.
    """

    MAX_SIZE: ClassVar[int] = MAX_RECORD_SIZE

    model_config = {"frozen": True}

    def to_bytes(self) -> bytes:
        return encode(self)

    @classmethod
    def from_bytes(cls: type[StorableT], data: bytes) -> StorableT:
        return decode(cls, data)

    def encoded_size(self) -> int:
        return len(_encoder.encode(_to_array(self)))

    def fits(self) -> bool:
        """True when the record can be stored without exceeding ``MAX_SIZE``."""
        return self.encoded_size() <= self.MAX_SIZE


def _to_array(record: Storable) -> list[Any]:
    return [RECORD_VERSION, *(getattr(record, name) for name in type(record).model_fields)]


def encode(record: Storable) -> bytes:
    data = _encoder.encode(_to_array(record))
    if len(data) > record.MAX_SIZE:
        raise RecordTooLargeError(
            f"{type(record).__name__} encodes to {len(data)} bytes "
            f"(max {record.MAX_SIZE})"
        )
    return data


def decode(model: type[StorableT], data: bytes) -> StorableT:
    try:
        payload = _decoder.decode(data)
    except msgspec.DecodeError as exc:
        raise CorruptRecordError(f"undecodable {model.__name__} record") from exc

    fields = list(model.model_fields)
    if not isinstance(payload, list) or len(payload) != len(fields) + 1:
        raise CorruptRecordError(f"malformed {model.__name__} record")
    if payload[0] != RECORD_VERSION:
        raise CorruptRecordError(
            f"unsupported {model.__name__} record version {payload[0]!r}"
        )
    try:
        return model.model_validate(dict(zip(fields, payload[1:])))
    except ValidationError as exc:
        raise CorruptRecordError(f"invalid {model.__name__} record") from exc
