"""Shared plumbing for the entity services."""

from __future__ import annotations

import logging
import time
from typing import TypeVar

from app.core.exceptions import InvalidPayloadError, NotFoundError
from app.db.store import VendorStore
from app.domain.codec import U64_MAX, Storable
from app.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=Storable)

RECORD_TOO_LARGE = "Payload exceeds maximum record size"
UNENCODABLE_TEXT = "Payload contains text that cannot be encoded"
VENDOR_NOT_FOUND = "Vendor not found"


def now_ns() -> int:
    """Wall-clock timestamp in nanoseconds since the epoch."""
    return time.time_ns()


class BaseService:
    def __init__(self, store: VendorStore):
        self._store = store

    def _require_vendor(self, vendor_id: int) -> None:
        if not self._store.vendors.exists(vendor_id):
            raise NotFoundError(VENDOR_NOT_FOUND)

    def _check_fits(self, candidate: EntityT) -> None:
        """Reject a record that could not be stored once it gets its real id."""
        try:
            fits = candidate.model_copy(update={"id": U64_MAX}).fits()
        except UnicodeEncodeError as exc:
            # lone surrogates pass str validation but have no UTF-8 form
            raise InvalidPayloadError(UNENCODABLE_TEXT) from exc
        if not fits:
            raise InvalidPayloadError(RECORD_TOO_LARGE)

    def _insert_new(self, repo: BaseRepository[EntityT], candidate: EntityT) -> EntityT:
        """Draw the next id and store ``candidate`` under it.

        Call only after every check has passed so a rejected request never
        consumes an identifier.
        """
        entity = candidate.model_copy(update={"id": self._store.ids.next_id()})
        repo.save(entity)
        logger.info("Created %s %d", type(entity).__name__, entity.id)
        return entity
