from __future__ import annotations

import pytest

from app.db.errors import CorruptLayoutError, MemoryAccessError, OutOfMemoryError
from app.db.manager import BUCKET_PAGES, BUCKET_SIZE, HEADER_PAGES, MemoryManager
from app.db.memory import PAGE_SIZE, VectorMemory


def test_region_handle_is_idempotent_per_tag() -> None:
    manager = MemoryManager(VectorMemory())
    assert manager.region(10) is manager.region(10)
    assert manager.region(10) is not manager.region(11)


@pytest.mark.parametrize("tag", [-1, 255, 1000])
def test_region_tag_out_of_range(tag: int) -> None:
    manager = MemoryManager(VectorMemory())
    with pytest.raises(ValueError):
        manager.region(tag)


def test_regions_do_not_overlap_when_grown_interleaved() -> None:
    manager = MemoryManager(VectorMemory())
    a, b = manager.region(10), manager.region(11)
    # Alternate growth so the buckets of both regions interleave in raw memory
    for _ in range(3):
        a.grow(BUCKET_PAGES)
        b.grow(BUCKET_PAGES)

    a.write(0, b"A" * (3 * BUCKET_SIZE))
    b.write(0, b"B" * (3 * BUCKET_SIZE))

    assert a.read(0, 3 * BUCKET_SIZE) == b"A" * (3 * BUCKET_SIZE)
    assert b.read(0, 3 * BUCKET_SIZE) == b"B" * (3 * BUCKET_SIZE)


def test_write_across_bucket_boundary() -> None:
    manager = MemoryManager(VectorMemory())
    region, other = manager.region(12), manager.region(13)
    region.grow(BUCKET_PAGES)
    other.grow(1)  # takes the bucket between region 12's two buckets
    region.grow(1)

    region.write(BUCKET_SIZE - 3, b"abcdef")
    assert region.read(BUCKET_SIZE - 3, 6) == b"abcdef"
    assert other.read(0, PAGE_SIZE) == bytes(PAGE_SIZE)


def test_region_access_beyond_size_is_fatal() -> None:
    region = MemoryManager(VectorMemory()).region(0)
    region.grow(1)
    with pytest.raises(MemoryAccessError):
        region.read(PAGE_SIZE, 1)


def test_regions_survive_reopen() -> None:
    memory = VectorMemory()
    manager = MemoryManager(memory)
    manager.region(10).grow(2)
    manager.region(10).write(PAGE_SIZE, b"persisted")
    memory.commit()

    reopened = MemoryManager(memory)
    assert reopened.region(10).size() == 2
    assert reopened.region(10).read(PAGE_SIZE, 9) == b"persisted"
    assert reopened.region(11).size() == 0


def test_substrate_exhaustion_is_fatal() -> None:
    memory = VectorMemory(max_pages=HEADER_PAGES + BUCKET_PAGES)
    region = MemoryManager(memory).region(10)
    region.grow(BUCKET_PAGES)
    with pytest.raises(OutOfMemoryError):
        region.grow(1)


def test_foreign_memory_is_rejected() -> None:
    memory = VectorMemory()
    memory.grow(HEADER_PAGES)
    memory.write(0, b"XYZ")
    with pytest.raises(CorruptLayoutError):
        MemoryManager(memory)
