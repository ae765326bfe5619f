"""
Favorites Module
================

Key-value store of favorite cocktails, keyed by case-insensitive name.
Two interchangeable backends are provided; which one is used is decided
once at startup by create_favorites_store().
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from mixologist.core.schema import CocktailProfile
from mixologist.db.engine import create_db_engine, create_session_factory, init_db, session_scope
from mixologist.db.repositories import FavoriteRepository
from mixologist.exceptions import FavoritesStoreError

if TYPE_CHECKING:
    from mixologist.config import Settings

logger = logging.getLogger(__name__)


class FavoritesStore(ABC):
    """Capability interface for favorites persistence."""

    backend: str

    @abstractmethod
    def put(self, profile: CocktailProfile) -> CocktailProfile:
        """Store a snapshot of the profile under its name, replacing any previous one."""
        pass

    @abstractmethod
    def delete(self, name: str) -> bool:
        """Remove a favorite. Returns False if it was not stored."""
        pass

    @abstractmethod
    def get(self, name: str) -> CocktailProfile | None:
        pass

    @abstractmethod
    def get_all(self) -> list[CocktailProfile]:
        pass

    @abstractmethod
    def exists(self, name: str) -> bool:
        pass


class InMemoryFavoritesStore(FavoritesStore):
    """Process-local favorites, lost on exit."""

    backend = "memory"

    def __init__(self) -> None:
        self._items: dict[str, CocktailProfile] = {}

    def put(self, profile: CocktailProfile) -> CocktailProfile:
        self._items[profile.dedup_key] = profile.model_copy(deep=True)
        return profile.model_copy(deep=True)

    def delete(self, name: str) -> bool:
        return self._items.pop(name.strip().lower(), None) is not None

    def get(self, name: str) -> CocktailProfile | None:
        stored = self._items.get(name.strip().lower())
        return stored.model_copy(deep=True) if stored else None

    def get_all(self) -> list[CocktailProfile]:
        return [profile.model_copy(deep=True) for profile in self._items.values()]

    def exists(self, name: str) -> bool:
        return name.strip().lower() in self._items


class SQLFavoritesStore(FavoritesStore):
    """Favorites persisted in SQLite through SQLAlchemy."""

    backend = "sql"

    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    def put(self, profile: CocktailProfile) -> CocktailProfile:
        try:
            with session_scope(self.session_factory) as session:
                return FavoriteRepository(session).upsert(profile)
        except SQLAlchemyError as e:
            raise FavoritesStoreError(f"Could not save favorite '{profile.name}': {e}") from e

    def delete(self, name: str) -> bool:
        try:
            with session_scope(self.session_factory) as session:
                return FavoriteRepository(session).delete(name)
        except SQLAlchemyError as e:
            raise FavoritesStoreError(f"Could not remove favorite '{name}': {e}") from e

    def get(self, name: str) -> CocktailProfile | None:
        try:
            with session_scope(self.session_factory) as session:
                return FavoriteRepository(session).get_by_name(name)
        except SQLAlchemyError as e:
            raise FavoritesStoreError(f"Could not read favorite '{name}': {e}") from e

    def get_all(self) -> list[CocktailProfile]:
        try:
            with session_scope(self.session_factory) as session:
                return FavoriteRepository(session).list_all()
        except SQLAlchemyError as e:
            raise FavoritesStoreError(f"Could not list favorites: {e}") from e

    def exists(self, name: str) -> bool:
        try:
            with session_scope(self.session_factory) as session:
                return FavoriteRepository(session).exists(name)
        except SQLAlchemyError as e:
            raise FavoritesStoreError(f"Could not read favorite '{name}': {e}") from e


def create_sql_store(db_path: Path | str | None = None) -> SQLFavoritesStore:
    """Create the SQLite-backed store, creating tables if needed."""
    engine = create_db_engine(db_path)
    init_db(engine)
    return SQLFavoritesStore(create_session_factory(engine))


def create_favorites_store(
    settings: Settings,
    db_path: Path | str | None = None,
) -> FavoritesStore:
    """
    Select the favorites backend at startup.

    The database comes from ``db_path`` when given, else from
    ``settings.database_url``.

    ``memory`` and ``sql`` force a backend. ``auto`` uses SQLite when the
    database can be initialized and in-memory storage otherwise.

    Raises:
        FavoritesStoreError: If ``sql`` is forced and the database is unusable.
    """
    backend = settings.favorites_backend
    if backend == "memory":
        return InMemoryFavoritesStore()

    try:
        store = create_sql_store(db_path if db_path is not None else settings.database_url or None)
    except (SQLAlchemyError, OSError) as e:
        if backend == "sql":
            raise FavoritesStoreError(f"Favorites database unavailable: {e}") from e
        logger.warning(f"Favorites database unavailable, using in-memory store: {e}")
        return InMemoryFavoritesStore()

    logger.info("Using SQLite favorites store")
    return store


class FavoritesService:
    """Favorite toggling on top of a FavoritesStore."""

    MAX_ATTEMPTS = 2

    def __init__(
        self,
        store: FavoritesStore,
        retry_delay: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.store = store
        self.retry_delay = retry_delay
        self._sleep = sleep

    def toggle(self, profile: CocktailProfile) -> bool:
        """
        Add the profile to favorites, or remove it if already there.

        A failed toggle is retried once after retry_delay seconds.

        Returns:
            True if the cocktail is a favorite afterwards.

        Raises:
            FavoritesStoreError: If both attempts fail.
        """
        for attempt in range(self.MAX_ATTEMPTS):
            try:
                return self._toggle_once(profile)
            except FavoritesStoreError as e:
                if attempt == self.MAX_ATTEMPTS - 1:
                    logger.error(f"Favorite toggle failed for '{profile.name}': {e}")
                    raise
                logger.warning(
                    f"Attempt {attempt + 1}/{self.MAX_ATTEMPTS} to toggle favorite "
                    f"'{profile.name}' failed: {e}. Retrying in {self.retry_delay:.2f}s"
                )
                self._sleep(self.retry_delay)

        raise FavoritesStoreError(f"Favorite toggle failed for '{profile.name}'")

    def _toggle_once(self, profile: CocktailProfile) -> bool:
        if self.store.exists(profile.name):
            self.store.delete(profile.name)
            return False
        self.store.put(profile)
        return True
