"""Durable u64 counter handing out identifiers shared by every collection."""

from __future__ import annotations

import logging
import struct

from app.db.errors import CorruptLayoutError, IdOverflowError
from app.db.manager import Region

logger = logging.getLogger(__name__)

MAGIC = b"VIDC"
LAYOUT_VERSION = 1
U64_MAX = (1 << 64) - 1

_CELL = struct.Struct("<4sB3xQ")


class IdGenerator:
    """Single durable counter; ``next_id()`` persists and returns value + 1.

    The first identifier ever returned is 1. Nothing caches the value, so a
    rolled-back operation leaves the counter exactly where it was.
    """

    def __init__(self, region: Region) -> None:
        self._region = region
        if region.size() == 0:
            region.grow(1)
            self._store(0)
            logger.info("Initialised id counter in region %d", region.tag)
        else:
            self.current()

    def current(self) -> int:
        """Return the last identifier handed out (0 if none yet)."""
        magic, version, value = _CELL.unpack(self._region.read(0, _CELL.size))
        if magic != MAGIC or version != LAYOUT_VERSION:
            raise CorruptLayoutError(
                f"region {self._region.tag} does not hold an id counter"
            )
        return value

    def next_id(self) -> int:
        value = self.current()
        if value >= U64_MAX:
            logger.error("Identifier counter exhausted at %d", value)
            raise IdOverflowError("identifier counter overflow")
        value += 1
        self._store(value)
        return value

    def _store(self, value: int) -> None:
        self._region.write(0, _CELL.pack(MAGIC, LAYOUT_VERSION, value))
