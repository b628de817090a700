from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from taskapi.config import DATABASE_URL

Base = declarative_base()


def make_engine(url: str = DATABASE_URL):
    # Only apply sqlite-specific connect_args when using sqlite
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    # Enable pool_pre_ping to avoid stale connections (useful for cloud DBs)
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


def make_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine):
    """Create missing tables. Errors propagate so a broken store aborts startup."""
    # models must be imported so their tables are registered on Base.metadata
    from taskapi.models import task, user  # noqa: F401

    Base.metadata.create_all(bind=engine)
