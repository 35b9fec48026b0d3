"""ORM tables backing :class:`app.db.memory.SqlPageMemory`."""

from __future__ import annotations

from sqlalchemy import BigInteger, Integer, LargeBinary
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class MemoryPage(Base):
    __tablename__ = "memory_pages"

    page_index: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    data: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)


class MemoryHeader(Base):
    """Single row (id=1) holding the number of pages the memory has grown to."""

    __tablename__ = "memory_header"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    page_count: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
