from __future__ import annotations

import pytest

from app.db.errors import CorruptLayoutError
from app.db.manager import BUCKET_SIZE, MemoryManager
from app.db.memory import VectorMemory
from app.db.stable_map import StableMap
from app.domain import Feedback, Service


def _service(id: int, vendor_id: int = 1, name: str = "Cleaning") -> Service:
    return Service(id=id, vendor_id=vendor_id, name=name, description="d", price=10)


@pytest.fixture
def manager() -> MemoryManager:
    return MemoryManager(VectorMemory())


def test_insert_get_contains(manager: MemoryManager) -> None:
    services = StableMap(manager.region(11), Service)
    services.insert(2, _service(2))

    assert services.get(2) == _service(2)
    assert services.contains(2)
    assert 2 in services
    assert services.get(3) is None
    assert not services.contains(3)
    assert len(services) == 1


def test_insert_overwrites_existing_key(manager: MemoryManager) -> None:
    services = StableMap(manager.region(11), Service)
    services.insert(2, _service(2, name="Old"))
    services.insert(2, _service(2, name="New"))

    assert len(services) == 1
    assert services.get(2).name == "New"


def test_iterate_is_ascending_snapshot(manager: MemoryManager) -> None:
    services = StableMap(manager.region(11), Service)
    for key in (9, 3, 7, 1):
        services.insert(key, _service(key))

    snapshot = services.iterate()
    services.insert(5, _service(5))

    assert [key for key, _ in snapshot] == [1, 3, 7, 9]
    assert [key for key, _ in services.iterate()] == [1, 3, 5, 7, 9]


def test_many_records_span_several_buckets(manager: MemoryManager) -> None:
    services = StableMap(manager.region(11), Service)
    count = 3 * BUCKET_SIZE // 500
    for key in range(1, count + 1):
        services.insert(key, _service(key, vendor_id=key % 4))

    assert len(services) == count
    assert services.get(count) == _service(count, vendor_id=count % 4)
    assert manager.region(11).size() * 4096 >= count * 500


def test_index_is_rebuilt_on_reopen() -> None:
    memory = VectorMemory()
    services = StableMap(MemoryManager(memory).region(11), Service)
    services.insert(4, _service(4))
    services.insert(2, _service(2))
    memory.commit()

    reopened = StableMap(MemoryManager(memory).region(11), Service)
    assert [key for key, _ in reopened.iterate()] == [2, 4]
    assert reopened.get(4) == _service(4)


def test_key_must_be_u64(manager: MemoryManager) -> None:
    services = StableMap(manager.region(11), Service)
    with pytest.raises(ValueError):
        services.insert(-1, _service(1))


def test_region_holding_other_data_is_rejected(manager: MemoryManager) -> None:
    region = manager.region(11)
    region.grow(1)
    region.write(0, b"not a map")
    with pytest.raises(CorruptLayoutError):
        StableMap(region, Service)


def test_regions_keep_collections_apart(manager: MemoryManager) -> None:
    services = StableMap(manager.region(11), Service)
    feedback = StableMap(manager.region(13), Feedback)
    services.insert(1, _service(1))
    feedback.insert(2, Feedback(id=2, vendor_id=1, user_id=3, rating=2.5, comment="", timestamp=1))

    assert services.get(2) is None
    assert feedback.get(1) is None
    assert feedback.get(2).rating == 2.5
