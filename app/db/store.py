"""Process-wide vendor store: memory, regions, id counter and the four collections."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from app.core.config import settings
from app.db.base import make_engine
from app.db.cell import IdGenerator
from app.db.manager import MemoryManager
from app.db.memory import PagedMemory, SqlPageMemory, VectorMemory
from app.db.regions import RegionTag
from app.repositories.contract import ContractRepository
from app.repositories.feedback import FeedbackRepository
from app.repositories.service import ServiceRepository
from app.repositories.vendor import VendorRepository

logger = logging.getLogger(__name__)


class VendorStore:
    """Owns every piece of durable state.

    All reads and writes go through :meth:`atomic`, which serialises callers
    and commits the memory only when the whole operation succeeded.
    """

    def __init__(self, memory: PagedMemory):
        self.memory = memory
        self._lock = threading.RLock()
        self._depth = 0
        with self._lock:
            try:
                self.manager = MemoryManager(memory)
                self.ids = IdGenerator(self.manager.region(RegionTag.ID_COUNTER))
                self.vendors = VendorRepository(self.manager)
                self.services = ServiceRepository(self.manager)
                self.contracts = ContractRepository(self.manager)
                self.feedback = FeedbackRepository(self.manager)
                memory.commit()
            except Exception:
                memory.rollback()
                raise

    @contextmanager
    def atomic(self) -> Iterator[VendorStore]:
        """Run one operation as a single critical section.

        Nested use joins the outer section; only the outermost commits.
        """
        with self._lock:
            self._depth += 1
            try:
                yield self
                if self._depth == 1:
                    self.memory.commit()
            except BaseException:
                if self._depth == 1:
                    self._rollback()
                raise
            finally:
                self._depth -= 1

    def _rollback(self) -> None:
        if not self.memory.has_pending_writes:
            return
        self.memory.rollback()
        self.manager.reload()
        for repo in (self.vendors, self.services, self.contracts, self.feedback):
            repo.reload()
        logger.warning("Rolled back uncommitted writes")


def create_store(backend: str | None = None, database_url: str | None = None) -> VendorStore:
    """Open the store on the configured backend (``sql`` or ``vector``)."""
    backend = backend or settings.memory_backend
    if backend == "vector":
        memory: PagedMemory = VectorMemory()
    elif backend == "sql":
        memory = SqlPageMemory(make_engine(database_url))
    else:
        raise ValueError(f"unknown memory backend {backend!r}")
    logger.info("Opening vendor store on %s memory", backend)
    return VendorStore(memory)


_store: VendorStore | None = None
_store_lock = threading.Lock()


def get_store() -> VendorStore:
    """FastAPI dependency; opens the process-wide store on first use."""
    global _store
    with _store_lock:
        if _store is None:
            _store = create_store()
        return _store
