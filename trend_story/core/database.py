import sqlite3
from functools import lru_cache
from pathlib import Path
from typing import Generator
from urllib.parse import quote

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import NullPool

from ..config import get_settings
from ..exceptions import StoreUnavailableError

Base = declarative_base()


@lru_cache()
def get_engine(database_path: str) -> Engine:
    # `#`, `?` and `%` are URI syntax to SQLite, so the path is percent-encoded
    uri = f"file:{quote(database_path)}?mode=ro"

    # NullPool so every session opens the file afresh after a sync
    return create_engine(
        "sqlite://",
        creator=lambda: sqlite3.connect(uri, uri=True, check_same_thread=False),
        echo=get_settings().debug,
        poolclass=NullPool
    )


def open_session(database_path: str) -> Session:
    if not Path(database_path).is_file():
        raise StoreUnavailableError(
            "Database file not found",
            error_code="STORE_UNAVAILABLE",
            details={"database_path": database_path}
        )
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=get_engine(database_path))
    return session_factory()


def get_db() -> Generator[Session, None, None]:
    db = open_session(get_settings().database_path)
    try:
        yield db
    finally:
        db.close()
