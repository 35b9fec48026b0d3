from __future__ import annotations

import threading

import pytest

from app.db.store import VendorStore, create_store
from app.domain import Feedback, Vendor


def _vendor(id: int) -> Vendor:
    return Vendor(id=id, name="Acme", contact="555-0100", email="a@acme.com", created_at=1)


def test_failed_operation_leaves_no_trace(store: VendorStore) -> None:
    with pytest.raises(RuntimeError):
        with store.atomic():
            vendor_id = store.ids.next_id()
            store.vendors.save(_vendor(vendor_id))
            raise RuntimeError("boom")

    assert store.ids.current() == 0
    assert not store.vendors.exists(1)
    assert store.vendors.count() == 0
    assert not store.memory.has_pending_writes


def test_two_collection_write_commits_together(store: VendorStore) -> None:
    with store.atomic():
        store.vendors.save(_vendor(store.ids.next_id()))

    with pytest.raises(RuntimeError):
        with store.atomic():
            feedback_id = store.ids.next_id()
            store.feedback.save(
                Feedback(id=feedback_id, vendor_id=1, user_id=1, rating=3.0, comment="", timestamp=1)
            )
            raise RuntimeError("crash before the vendor update")

    assert store.feedback.count() == 0
    assert store.vendors.get_by_id(1).ratings == []
    assert store.ids.next_id() == 2


def test_nested_sections_commit_once(store: VendorStore) -> None:
    with store.atomic():
        with store.atomic():
            store.vendors.save(_vendor(store.ids.next_id()))
        assert store.memory.has_pending_writes
    assert not store.memory.has_pending_writes
    assert store.vendors.exists(1)


def test_concurrent_id_allocation_never_repeats(store: VendorStore) -> None:
    issued: list[int] = []

    def worker() -> None:
        for _ in range(50):
            with store.atomic():
                issued.append(store.ids.next_id())

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(issued) == list(range(1, 201))


def test_sql_store_persists_across_restart(sqlite_url: str) -> None:
    store = create_store("sql", sqlite_url)
    with store.atomic():
        store.vendors.save(_vendor(store.ids.next_id()))
        store.vendors.save(_vendor(store.ids.next_id()))

    restarted = create_store("sql", sqlite_url)
    assert [v.id for v in restarted.vendors.list()] == [1, 2]
    with restarted.atomic():
        assert restarted.ids.next_id() == 3


def test_unknown_backend_is_rejected() -> None:
    with pytest.raises(ValueError):
        create_store("tape")
