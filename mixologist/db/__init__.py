"""Database initialization and persistence layer."""

from mixologist.db.engine import (
    create_db_engine,
    create_session_factory,
    get_database_url,
    init_db,
    session_scope,
)
from mixologist.db.models import Base, FavoriteDB
from mixologist.db.repositories import FavoriteRepository

__all__ = [
    # Engine
    "create_db_engine",
    "create_session_factory",
    "get_database_url",
    "init_db",
    "session_scope",
    # Models
    "Base",
    "FavoriteDB",
    # Repositories
    "FavoriteRepository",
]
