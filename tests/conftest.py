"""
Pytest configuration for the vendor registry.

Provides fixtures for:
- Volatile (VectorMemory) and SQLite-backed stores
- The operation boundary (VendorRegistry)
- A FastAPI TestClient wired to an isolated store
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from app.db.memory import VectorMemory
from app.db.store import VendorStore, create_store, get_store
from app.services.registry import VendorRegistry


@pytest.fixture
def memory() -> VectorMemory:
    return VectorMemory()


@pytest.fixture
def store(memory: VectorMemory) -> VendorStore:
    return VendorStore(memory)


@pytest.fixture
def registry(store: VendorStore) -> VendorRegistry:
    return VendorRegistry(store)


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    """URL of a fresh SQLite file; open it twice to simulate a restart."""
    return f"sqlite:///{tmp_path / 'registry.db'}"


@pytest.fixture
def sql_store(sqlite_url: str) -> VendorStore:
    return create_store("sql", sqlite_url)


@pytest.fixture
def client(store: VendorStore) -> Generator[TestClient, None, None]:
    from app.main import app

    app.dependency_overrides[get_store] = lambda: store
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def acme_payload() -> dict:
    return {
        "name": "Acme",
        "contact": "555-0100",
        "email": "a@acme.com",
        "services": [],
        "address": "",
    }
