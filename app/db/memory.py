"""Raw page-addressed memory: the substrate every region is carved out of.

A memory is a flat byte array that only grows, in whole pages. Writes are
buffered as dirty pages until :meth:`PagedMemory.commit`; a failed operation
calls :meth:`PagedMemory.rollback` and nothing it wrote survives.

Implementations:
  VectorMemory   — volatile, bytearray pages (tests, throwaway runs)
  SqlPageMemory  — durable, one row per page through SQLAlchemy
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from sqlalchemy import Engine

from app.db.base import Base, make_session_factory
from app.db.errors import MemoryAccessError, OutOfMemoryError
from app.db.tables import MemoryHeader, MemoryPage

logger = logging.getLogger(__name__)

PAGE_SIZE = 4096


class PagedMemory(ABC):
    """Write-buffering base shared by all memory implementations."""

    def __init__(self, max_pages: int | None = None) -> None:
        self._max_pages = max_pages
        self._cache: dict[int, bytearray] = {}
        self._dirty: set[int] = set()
        self._committed_pages = self._load_page_count()
        self._pages = self._committed_pages

    # ------------------------------------------------------------------
    # Backend hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _load_page_count(self) -> int: ...

    @abstractmethod
    def _load_page(self, index: int) -> bytes | None:
        """Return the committed bytes of a page, or None if never written."""

    @abstractmethod
    def _persist(self, pages: dict[int, bytes], page_count: int) -> None:
        """Durably store all given pages and the page count in one step."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def size(self) -> int:
        """Current size in pages, including uncommitted growth."""
        return self._pages

    def grow(self, pages: int) -> int:
        """Grow by ``pages`` pages and return the previous size."""
        if pages < 0:
            raise ValueError("pages must be non-negative")
        new_size = self._pages + pages
        if self._max_pages is not None and new_size > self._max_pages:
            raise OutOfMemoryError(
                f"cannot grow memory to {new_size} pages (limit {self._max_pages})"
            )
        previous = self._pages
        self._pages = new_size
        return previous

    def read(self, offset: int, length: int) -> bytes:
        self._check_bounds(offset, length)
        out = bytearray()
        while length > 0:
            index, start = divmod(offset, PAGE_SIZE)
            chunk = min(length, PAGE_SIZE - start)
            out += self._page(index)[start:start + chunk]
            offset += chunk
            length -= chunk
        return bytes(out)

    def write(self, offset: int, data: bytes) -> None:
        self._check_bounds(offset, len(data))
        view = memoryview(data)
        while view:
            index, start = divmod(offset, PAGE_SIZE)
            chunk = min(len(view), PAGE_SIZE - start)
            self._page(index)[start:start + chunk] = view[:chunk]
            self._dirty.add(index)
            offset += chunk
            view = view[chunk:]

    @property
    def has_pending_writes(self) -> bool:
        return bool(self._dirty) or self._pages != self._committed_pages

    def commit(self) -> None:
        if not self.has_pending_writes:
            return
        pages = {index: bytes(self._cache[index]) for index in sorted(self._dirty)}
        self._persist(pages, self._pages)
        logger.debug("Committed %d page(s), size=%d", len(pages), self._pages)
        self._dirty.clear()
        self._committed_pages = self._pages

    def rollback(self) -> None:
        for index in self._dirty:
            self._cache.pop(index, None)
        if self._dirty:
            logger.debug("Discarded %d dirty page(s)", len(self._dirty))
        self._dirty.clear()
        self._pages = self._committed_pages

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_bounds(self, offset: int, length: int) -> None:
        if offset < 0 or length < 0 or offset + length > self._pages * PAGE_SIZE:
            raise MemoryAccessError(
                f"access [{offset}, {offset + length}) outside memory of "
                f"{self._pages * PAGE_SIZE} bytes"
            )

    def _page(self, index: int) -> bytearray:
        page = self._cache.get(index)
        if page is None:
            stored = self._load_page(index)
            page = bytearray(stored) if stored is not None else bytearray(PAGE_SIZE)
            self._cache[index] = page
        return page


class VectorMemory(PagedMemory):
    """Volatile memory; committed pages live in a dict for the process lifetime."""

    def __init__(self, max_pages: int | None = None) -> None:
        self._committed: dict[int, bytes] = {}
        self._committed_count = 0
        super().__init__(max_pages=max_pages)

    def _load_page_count(self) -> int:
        return self._committed_count

    def _load_page(self, index: int) -> bytes | None:
        return self._committed.get(index)

    def _persist(self, pages: dict[int, bytes], page_count: int) -> None:
        self._committed.update(pages)
        self._committed_count = page_count


class SqlPageMemory(PagedMemory):
    """Durable memory stored as ``memory_pages`` rows in any SQLAlchemy database."""

    def __init__(self, engine: Engine, max_pages: int | None = None) -> None:
        Base.metadata.create_all(
            engine, tables=[MemoryPage.__table__, MemoryHeader.__table__]
        )
        self._engine = engine
        self._sessions = make_session_factory(engine)
        super().__init__(max_pages=max_pages)
        logger.info(
            "Opened page memory at %s (%d pages)", engine.url.render_as_string(), self._pages
        )

    def _load_page_count(self) -> int:
        with self._sessions() as session:
            header = session.get(MemoryHeader, 1)
            return 0 if header is None else header.page_count

    def _load_page(self, index: int) -> bytes | None:
        with self._sessions() as session:
            row = session.get(MemoryPage, index)
            return None if row is None else row.data

    def _persist(self, pages: dict[int, bytes], page_count: int) -> None:
        with self._sessions.begin() as session:
            for index, data in pages.items():
                session.merge(MemoryPage(page_index=index, data=data))
            session.merge(MemoryHeader(id=1, page_count=page_count))
