"""SQLite database engine and session management."""

import os
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from mixologist.config import DEFAULT_DB_PATH


def get_database_url(db_path: Path | str | None = None) -> str:
    """
    Get the SQLite database URL.

    Args:
        db_path: Optional path or SQLite URL. If None, uses
                 DATABASE_URL env var or default path.

    Returns:
        SQLite connection URL.
    """
    if isinstance(db_path, str) and db_path.startswith("sqlite"):
        return db_path
    if db_path is not None:
        path = Path(db_path)
    elif os.environ.get("DATABASE_URL"):
        # Support full URL or just path
        url = os.environ["DATABASE_URL"]
        if url.startswith("sqlite"):
            return url
        path = Path(url)
    else:
        path = DEFAULT_DB_PATH

    # Ensure parent directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    return f"sqlite:///{path}"


def create_db_engine(db_path: Path | str | None = None, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine for SQLite.

    Args:
        db_path: Optional path to the database file.
        echo: If True, log all SQL statements.

    Returns:
        SQLAlchemy Engine instance.
    """
    url = get_database_url(db_path)
    return create_engine(
        url,
        echo=echo,
        connect_args={"check_same_thread": False},  # Allow multi-threaded access
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to an engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """
    Initialize the database by creating all tables.

    Args:
        engine: Engine to create the tables on.
    """
    from mixologist.db.models import Base

    Base.metadata.create_all(bind=engine)


@contextmanager
def session_scope(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """
    Transactional session scope.

    Usage:
        with session_scope(factory) as session:
            # use session; commits on success, rolls back on error

    Yields:
        SQLAlchemy Session instance.
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
