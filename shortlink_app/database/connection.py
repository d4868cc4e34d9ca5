from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from shortlink_app.config import settings


def build_engine(database_url: str) -> Engine:
    """
    Create the engine (and its connection pool) for a database URL.

    SQLite gets the thread-sharing flag FastAPI needs and a busy timeout
    so concurrent writers wait for the lock instead of failing.
    Server databases get a bounded pool and pre-ping.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False, "timeout": 30},
        )

    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
    )


# One pool per process, shared by every request
engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a session bound to the shared pool; closed after the request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
