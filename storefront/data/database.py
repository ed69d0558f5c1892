# storefront/data/database.py
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.utils.settings import DATABASE_URL

Base = declarative_base()


def _make_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        # sqlite:// lives inside one connection; share it across the threadpool
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, pool_pre_ping=True)


class Store:
    """
    Explicitly constructed state store: one engine, one session factory.
    Tables are created on construction, so a fresh Store is always empty.
    """

    def __init__(self, url: str | None = None):
        # registers every model on Base.metadata
        import storefront.data.models  # noqa: F401

        self.url = url or DATABASE_URL
        self.engine = _make_engine(self.url)
        self.session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.session_factory()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    store: Store = request.app.state.store
    db = store.session()
    try:
        yield db
    finally:
        db.close()
