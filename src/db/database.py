"""Generate database sessions for the SQL store"""

import threading
from typing import Generator

from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base

# Key in Session.info holding the lock shared by all sessions of one engine
SESSION_LOCK_KEY = "catalog_lock"


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the engine and make sure all tables exist."""
    if database_url.startswith("sqlite"):
        # One shared connection for in-memory SQLite, otherwise every session sees an empty database
        pool_args = {"poolclass": StaticPool} if ":memory:" in database_url else {}
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            **pool_args,
        )
    else:
        engine = create_engine(database_url, echo=echo)

    # Ensure all tables are created
    Base.metadata.create_all(bind=engine)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """
    Session factory for `engine`.
    ----
    When every session shares a single connection (StaticPool), their transactions would interleave on it.
    Those sessions then carry one common lock, and the repository runs each operation under it.
    """
    info = {}
    if isinstance(engine.pool, StaticPool):
        info[SESSION_LOCK_KEY] = threading.RLock()
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, info=info)


def get_db(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
