from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from lightbnb.config import DATABASE_URL, DEBUG


class Base(DeclarativeBase):
    pass


class Database:
    """Store handle owning the engine and session factory.

    Open it once at startup and close it at shutdown; services never reach
    for a module-level connection, they get a session from here.
    """

    def __init__(self, url: str = DATABASE_URL, echo: bool = DEBUG, **engine_kwargs):
        self.url = url
        self.echo = echo
        self.engine_kwargs = engine_kwargs
        self.engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    def open(self) -> "Database":
        if self.engine is None:
            self.engine = create_engine(self.url, echo=self.echo, **self.engine_kwargs)
            self._session_factory = sessionmaker(
                autocommit=False, autoflush=False, bind=self.engine
            )
        return self

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self._session_factory = None

    def create_all(self) -> None:
        # register every table on Base.metadata
        import lightbnb.database.models  # noqa: F401

        Base.metadata.create_all(bind=self._require_engine())

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self._require_engine())

    def _require_engine(self) -> Engine:
        if self.engine is None:
            raise RuntimeError("Database is not open")
        return self.engine

    @contextmanager
    def session(self) -> Iterator[Session]:
        self._require_engine()
        db = self._session_factory()
        try:
            yield db
        finally:
            db.close()

    def get_db(self) -> Iterator[Session]:
        with self.session() as db:
            yield db

    def __enter__(self) -> "Database":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()
