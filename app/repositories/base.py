"""Generic repository over one stable map (one region per entity kind)."""

from __future__ import annotations

from typing import Generic, TypeVar

from app.db.manager import MemoryManager
from app.db.regions import RegionTag
from app.db.stable_map import StableMap
from app.domain.codec import Storable

EntityT = TypeVar("EntityT", bound=Storable)


class BaseRepository(Generic[EntityT]):
    """Keyed by entity id. There is intentionally no delete.

    Subclasses set ``model`` and ``region``; the region tag fixes where the
    collection lives in memory and must never change.
    """

    model: type[EntityT]
    region: RegionTag

    def __init__(self, manager: MemoryManager):
        self._map: StableMap[EntityT] = StableMap(manager.region(self.region), self.model)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, entity_id: int) -> EntityT | None:
        return self._map.get(entity_id)

    def exists(self, entity_id: int) -> bool:
        return self._map.contains(entity_id)

    def count(self) -> int:
        return len(self._map)

    def list(self) -> list[EntityT]:
        """All entities in ascending id order."""
        return [entity for _, entity in self._map.iterate()]

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def save(self, entity: EntityT) -> EntityT:
        self._map.insert(entity.id, entity)
        return entity

    def reload(self) -> None:
        self._map.reload()


class VendorOwnedRepository(BaseRepository[EntityT]):
    """Repository for entities carrying a ``vendor_id`` foreign key."""

    def list_by_vendor(self, vendor_id: int) -> list[EntityT]:
        # Linear scan; there is no secondary index by vendor.
        return [entity for entity in self.list() if entity.vendor_id == vendor_id]
