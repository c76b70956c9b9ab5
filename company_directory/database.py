"""
Database configuration and connection management.

Builds the SQLAlchemy engine and session factory from settings and
creates the tables on startup.
"""

from typing import Any, Dict

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .logging_config import get_logger
from .models import Base

logger = get_logger(__name__)


def sanitize_url(db_url: str) -> str:
    """Strip credentials from a database URL for logging."""
    if "@" in db_url:
        scheme, _, rest = db_url.partition("://")
        return f"{scheme}://...@{rest.split('@', 1)[1]}"
    return db_url


def get_engine_kwargs(db_url: str, pool_pre_ping: bool = True) -> Dict[str, Any]:
    """
    Get database-specific engine arguments.

    Args:
        db_url: Database connection URL
        pool_pre_ping: Test pooled connections before use

    Returns:
        Keyword arguments for ``create_engine``
    """
    if db_url.startswith("sqlite"):
        kwargs: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live per connection; share one across sessions
        if db_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return kwargs
    return {"pool_pre_ping": pool_pre_ping}


def create_db_engine(db_url: str, pool_pre_ping: bool = True) -> Engine:
    """Create the SQLAlchemy engine for ``db_url``."""
    logger.info("Using database", url=sanitize_url(db_url))
    return create_engine(db_url, echo=False, **get_engine_kwargs(db_url, pool_pre_ping))


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """
    Initialize database tables.

    Uses checkfirst=True to safely handle existing tables.
    """
    logger.info("Initializing database tables")
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Database initialized", tables=sorted(Base.metadata.tables))
