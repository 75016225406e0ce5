"""Database session management for DISC Profile."""

from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from disc_profile.config import get_settings
from disc_profile.utils.logging import get_logger

logger = get_logger(__name__)

# Global engine instance
_engine = None


def get_engine():
    """Get or create the database engine."""
    global _engine

    if _engine is None:
        settings = get_settings()
        db_url = settings.database_url
        engine_kwargs = {}

        if db_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}

        if db_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        elif db_url.startswith("sqlite:///"):
            db_path = db_url.replace("sqlite:///", "")
            if not db_path.startswith("/"):
                # Relative path - make it relative to base_dir
                db_path = settings.base_dir / db_path
            else:
                db_path = Path(db_path)
            db_path.parent.mkdir(parents=True, exist_ok=True)
            db_url = f"sqlite:///{db_path}"

        logger.debug(f"Creating database engine: {db_url}")
        _engine = create_engine(db_url, echo=False, **engine_kwargs)

    return _engine


def init_db() -> None:
    """Initialize the database, creating all tables."""
    engine = get_engine()
    logger.debug("Initializing database...")
    SQLModel.metadata.create_all(engine)


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Get a database session as a context manager."""
    engine = get_engine()
    with Session(engine) as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
