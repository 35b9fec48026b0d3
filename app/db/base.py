"""SQLAlchemy engine, session factory and declarative Base for the page store."""


from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from app.core.config import settings


# ---------------------------------------------------------------------------
# Declarative Base
# ---------------------------------------------------------------------------
class Base(DeclarativeBase):
    """All ORM tables inherit from this base."""


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
def make_engine(url: str | None = None) -> Engine:
    """Build a synchronous engine; operations must never suspend mid-write."""
    url = url or settings.database_url
    engine_kwargs: dict = {
        "pool_pre_ping": True,
        "echo": False,
    }
    # SQLite (local dev) is shared by the FastAPI worker threads
    if url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
    return create_engine(url, **engine_kwargs)


# ---------------------------------------------------------------------------
# Session factory
# ---------------------------------------------------------------------------
def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )
