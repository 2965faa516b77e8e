from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


# PUBLIC_INTERFACE
def build_engine(database_url: str) -> Engine:
    """
    Create the SQLAlchemy engine for the given URL.

    SQLite needs check_same_thread=False because FastAPI runs sync handlers in a
    thread pool; an in-memory database must also share one connection.
    """
    kwargs = {"future": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_memory_sqlite(database_url):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    return create_engine(database_url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """
    Dependency that provides a database session from the application's pool
    and ensures proper cleanup.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
