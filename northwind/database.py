"""Database configuration and session management."""

from collections.abc import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from northwind.config import settings


# Base class for ORM models
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass


def build_engine(database_url: str) -> Engine:
    """Create an engine for the given URL.

    Pooling and lock settings only apply to PostgreSQL; SQLite (used by the
    test suite and local scripts) gets a plain engine.
    """
    if not database_url.startswith("postgresql"):
        return create_engine(database_url, echo=settings.database_echo)

    # - isolation_level="READ COMMITTED": readers are not blocked by order writes (MVCC)
    # - lock_timeout: row locks taken by stock updates never wait indefinitely
    return create_engine(
        database_url,
        pool_pre_ping=True,  # Enable connection health checks
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_recycle=settings.database_pool_recycle,
        echo=settings.database_echo,
        isolation_level=settings.database_isolation_level,
        connect_args={"options": f"-c lock_timeout={settings.database_lock_timeout_ms}"},
    )


engine = build_engine(settings.database_url)

# Create session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False,  # Loaded entities stay usable after the order commits
)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency.

    Yields:
        Session: SQLAlchemy database session

    Example:
        for db in get_db():
            db.query(Product).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
