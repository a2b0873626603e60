"""Database connection and session management."""
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from songcatalog.config import get_settings, ConfigurationError

Base = declarative_base()


@lru_cache
def get_engine() -> Engine:
    """Create the engine on first use from DATABASE_URL."""
    database_url = get_settings().database_url
    if not database_url:
        raise ConfigurationError("DATABASE_URL is not set")

    if database_url.startswith("sqlite"):
        # SQLite: no pool settings needed
        options = {
            "connect_args": {"check_same_thread": False}
        }
    else:
        # PostgreSQL: full connection pool
        options = {
            "pool_pre_ping": True,
            "pool_size": 10,
            "max_overflow": 20
        }

    return create_engine(database_url, **options)


@lru_cache
def get_session_factory() -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())


def get_db():
    """Dependency that provides a database session."""
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create all tables that do not exist yet."""
    # Register models on the metadata
    import songcatalog.models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())
