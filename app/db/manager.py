"""Partition one raw memory into independently growing regions.

Layout of the raw memory::

    page 0..2   header
                  magic "VRM" | version u8 | bucket_pages u16 | num_buckets u16
                  region sizes   255 x u64 (pages, indexed by tag)
                  bucket table   8192 x u8 (owning tag, 0xFF = free)
    page 3..    buckets of BUCKET_PAGES pages, handed out in order

A region is the concatenation of the buckets it owns, in allocation order.
Buckets are never shared or released, so distinct tags never overlap and a
region's bytes never move.
"""

from __future__ import annotations

import logging
import struct

from app.db.errors import CorruptLayoutError, MemoryAccessError, OutOfMemoryError
from app.db.memory import PAGE_SIZE, PagedMemory

logger = logging.getLogger(__name__)

MAGIC = b"VRM"
LAYOUT_VERSION = 1

MAX_REGIONS = 255
UNALLOCATED = 0xFF
MAX_BUCKETS = 8192
BUCKET_PAGES = 16
BUCKET_SIZE = BUCKET_PAGES * PAGE_SIZE

_HEADER = struct.Struct("<3sBHH")
_SIZES_OFFSET = _HEADER.size
_BUCKETS_OFFSET = _SIZES_OFFSET + MAX_REGIONS * 8
HEADER_PAGES = -(-(_BUCKETS_OFFSET + MAX_BUCKETS) // PAGE_SIZE)
_DATA_OFFSET = HEADER_PAGES * PAGE_SIZE


class Region:
    """Handle to one tagged region; offsets are relative to the region start."""

    def __init__(self, manager: MemoryManager, tag: int) -> None:
        self._manager = manager
        self.tag = tag

    def size(self) -> int:
        return self._manager._sizes[self.tag]

    def grow(self, pages: int) -> int:
        return self._manager._grow(self.tag, pages)

    def read(self, offset: int, length: int) -> bytes:
        out = bytearray()
        for address, chunk in self._spans(offset, length):
            out += self._manager.memory.read(address, chunk)
        return bytes(out)

    def write(self, offset: int, data: bytes) -> None:
        view = memoryview(data)
        for address, chunk in self._spans(offset, len(data)):
            self._manager.memory.write(address, bytes(view[:chunk]))
            view = view[chunk:]

    def _spans(self, offset: int, length: int):
        """Yield (raw address, length) pieces covering the requested range."""
        if offset < 0 or length < 0 or offset + length > self.size() * PAGE_SIZE:
            raise MemoryAccessError(
                f"region {self.tag}: access [{offset}, {offset + length}) outside "
                f"{self.size() * PAGE_SIZE} bytes"
            )
        buckets = self._manager._buckets[self.tag]
        while length > 0:
            index, start = divmod(offset, BUCKET_SIZE)
            chunk = min(length, BUCKET_SIZE - start)
            yield _DATA_OFFSET + buckets[index] * BUCKET_SIZE + start, chunk
            offset += chunk
            length -= chunk

    def __repr__(self) -> str:
        return f"Region(tag={self.tag}, pages={self.size()})"


class MemoryManager:
    def __init__(self, memory: PagedMemory) -> None:
        self.memory = memory
        self._regions: dict[int, Region] = {}
        if memory.size() == 0:
            self._format()
        self.reload()

    def region(self, tag: int) -> Region:
        """Return the handle for ``tag``; the same object on every call."""
        if not 0 <= tag < MAX_REGIONS:
            raise ValueError(f"region tag must be in [0, {MAX_REGIONS}), got {tag}")
        handle = self._regions.get(tag)
        if handle is None:
            handle = self._regions[tag] = Region(self, tag)
        return handle

    def reload(self) -> None:
        """Re-read the header; called on open and after a rollback."""
        magic, version, bucket_pages, num_buckets = _HEADER.unpack(
            self.memory.read(0, _HEADER.size)
        )
        if magic != MAGIC:
            raise CorruptLayoutError(f"bad memory manager magic {magic!r}")
        if version != LAYOUT_VERSION or bucket_pages != BUCKET_PAGES:
            raise CorruptLayoutError(
                f"unsupported layout version={version} bucket_pages={bucket_pages}"
            )
        raw_sizes = self.memory.read(_SIZES_OFFSET, MAX_REGIONS * 8)
        self._sizes = list(struct.unpack(f"<{MAX_REGIONS}Q", raw_sizes))
        self._num_buckets = num_buckets
        self._buckets: dict[int, list[int]] = {tag: [] for tag in range(MAX_REGIONS)}
        owners = self.memory.read(_BUCKETS_OFFSET, num_buckets)
        for bucket, tag in enumerate(owners):
            if tag == UNALLOCATED:
                raise CorruptLayoutError(f"bucket {bucket} below high-water mark is free")
            self._buckets[tag].append(bucket)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _format(self) -> None:
        self.memory.grow(HEADER_PAGES)
        self.memory.write(0, _HEADER.pack(MAGIC, LAYOUT_VERSION, BUCKET_PAGES, 0))
        self.memory.write(_BUCKETS_OFFSET, bytes([UNALLOCATED]) * MAX_BUCKETS)
        logger.info("Formatted memory manager header (%d pages)", HEADER_PAGES)

    def _grow(self, tag: int, pages: int) -> int:
        if pages < 0:
            raise ValueError("pages must be non-negative")
        previous = self._sizes[tag]
        new_size = previous + pages
        owned = self._buckets[tag]
        while len(owned) * BUCKET_PAGES < new_size:
            owned.append(self._allocate_bucket(tag))
        self._sizes[tag] = new_size
        self.memory.write(_SIZES_OFFSET + tag * 8, struct.pack("<Q", new_size))
        return previous

    def _allocate_bucket(self, tag: int) -> int:
        bucket = self._num_buckets
        if bucket >= MAX_BUCKETS:
            logger.error("Bucket table exhausted while growing region %d", tag)
            raise OutOfMemoryError(f"no free bucket for region {tag}")
        required = HEADER_PAGES + (bucket + 1) * BUCKET_PAGES
        if self.memory.size() < required:
            self.memory.grow(required - self.memory.size())
        self.memory.write(_BUCKETS_OFFSET + bucket, bytes([tag]))
        self._num_buckets += 1
        self.memory.write(
            0, _HEADER.pack(MAGIC, LAYOUT_VERSION, BUCKET_PAGES, self._num_buckets)
        )
        return bucket
