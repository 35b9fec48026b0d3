"""Ordered u64 → record map stored in a single region.

Region layout::

    offset 0   magic "VSM" | version u8 | slot_size u32 | count u64
    offset 16  slot[0], slot[1], ...   each: key u64 | length u16 | value

Every slot reserves ``MAX_SIZE`` value bytes, which is why records are
bounded. Slots are appended in insertion order and overwritten in place on
upsert; the key → slot index is rebuilt from the region when the map opens.
"""

from __future__ import annotations

import logging
import struct
from typing import Generic, TypeVar

from app.db.errors import CorruptLayoutError
from app.db.manager import Region
from app.db.memory import PAGE_SIZE
from app.domain.codec import U64_MAX, Storable

logger = logging.getLogger(__name__)

MAGIC = b"VSM"
LAYOUT_VERSION = 1

_HEADER = struct.Struct("<3sBIQ")
_SLOT_HEAD = struct.Struct("<QH")

ValueT = TypeVar("ValueT", bound=Storable)


class StableMap(Generic[ValueT]):
    def __init__(self, region: Region, model: type[ValueT]) -> None:
        self._region = region
        self._model = model
        self._slot_size = _SLOT_HEAD.size + model.MAX_SIZE
        if region.size() == 0:
            region.grow(1)
            self._write_header(0)
            logger.info("Initialised %s map in region %d", model.__name__, region.tag)
        self.reload()

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get(self, key: int) -> ValueT | None:
        slot = self._index.get(key)
        if slot is None:
            return None
        return self._read_slot(slot)[1]

    def contains(self, key: int) -> bool:
        return key in self._index

    __contains__ = contains

    def __len__(self) -> int:
        return len(self._index)

    def iterate(self) -> list[tuple[int, ValueT]]:
        """Eager snapshot of all entries in ascending key order."""
        return [self._read_slot(self._index[key]) for key in sorted(self._index)]

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def insert(self, key: int, value: ValueT) -> None:
        """Upsert ``value`` under ``key``; an existing entry is overwritten."""
        if not 0 <= key <= U64_MAX:
            raise ValueError(f"key {key} is not a u64")
        data = value.to_bytes()
        slot = self._index.get(key)
        if slot is None:
            slot = len(self._index)
            self._ensure_capacity(slot)
            self._write_slot(slot, key, data)
            self._write_header(slot + 1)
            self._index[key] = slot
        else:
            self._write_slot(slot, key, data)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def reload(self) -> None:
        """Rebuild the key index from the region; called on open and after a rollback."""
        magic, version, slot_size, count = _HEADER.unpack(
            self._region.read(0, _HEADER.size)
        )
        if magic != MAGIC or version != LAYOUT_VERSION:
            raise CorruptLayoutError(f"region {self._region.tag} does not hold a stable map")
        if slot_size != self._slot_size:
            raise CorruptLayoutError(
                f"region {self._region.tag}: slot size {slot_size}, expected {self._slot_size}"
            )
        self._index: dict[int, int] = {}
        for slot in range(count):
            key, _ = _SLOT_HEAD.unpack(
                self._region.read(self._slot_offset(slot), _SLOT_HEAD.size)
            )
            self._index[key] = slot

    def _slot_offset(self, slot: int) -> int:
        return _HEADER.size + slot * self._slot_size

    def _ensure_capacity(self, slot: int) -> None:
        needed = -(-(self._slot_offset(slot) + self._slot_size) // PAGE_SIZE)
        if needed > self._region.size():
            self._region.grow(needed - self._region.size())

    def _write_header(self, count: int) -> None:
        self._region.write(
            0, _HEADER.pack(MAGIC, LAYOUT_VERSION, self._slot_size, count)
        )

    def _write_slot(self, slot: int, key: int, data: bytes) -> None:
        self._region.write(self._slot_offset(slot), _SLOT_HEAD.pack(key, len(data)) + data)

    def _read_slot(self, slot: int) -> tuple[int, ValueT]:
        offset = self._slot_offset(slot)
        key, length = _SLOT_HEAD.unpack(self._region.read(offset, _SLOT_HEAD.size))
        data = self._region.read(offset + _SLOT_HEAD.size, length)
        return key, self._model.from_bytes(data)
