"""Repository classes for database operations."""

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from mixologist.core.schema import CocktailProfile
from mixologist.db.models import FavoriteDB


def _utc_now() -> datetime:
    """Return current UTC datetime."""
    return datetime.now(UTC)


def _name_key(name: str) -> str:
    return name.strip().lower()


class FavoriteRepository:
    """Repository for favorite cocktail CRUD operations."""

    def __init__(self, session: Session):
        self.session = session

    def upsert(self, profile: CocktailProfile) -> CocktailProfile:
        """
        Create or replace the favorite stored under the profile's name.

        Args:
            profile: The CocktailProfile to store.

        Returns:
            The stored profile.
        """
        key = _name_key(profile.name)
        db_item = self.session.get(FavoriteDB, key)
        payload = profile.model_dump_json()

        if db_item is None:
            db_item = FavoriteDB(name_key=key, name=profile.name, profile_json=payload)
            self.session.add(db_item)
        else:
            db_item.name = profile.name
            db_item.profile_json = payload
            db_item.updated_at = _utc_now()

        self.session.flush()
        return self._to_domain(db_item)

    def get_by_name(self, name: str) -> CocktailProfile | None:
        """
        Get a favorite by cocktail name (case-insensitive).

        Returns:
            The CocktailProfile if found, None otherwise.
        """
        db_item = self.session.get(FavoriteDB, _name_key(name))
        return self._to_domain(db_item) if db_item else None

    def list_all(self) -> list[CocktailProfile]:
        """List all favorites, oldest first."""
        stmt = select(FavoriteDB).order_by(FavoriteDB.created_at, FavoriteDB.name_key)
        result = self.session.execute(stmt).scalars().all()
        return [self._to_domain(item) for item in result]

    def exists(self, name: str) -> bool:
        return self.session.get(FavoriteDB, _name_key(name)) is not None

    def delete(self, name: str) -> bool:
        """
        Delete a favorite by cocktail name.

        Returns:
            True if deleted, False if not found.
        """
        db_item = self.session.get(FavoriteDB, _name_key(name))
        if db_item is None:
            return False
        self.session.delete(db_item)
        self.session.flush()
        return True

    def _to_domain(self, db_item: FavoriteDB) -> CocktailProfile:
        """Convert database model to domain model."""
        return CocktailProfile.model_validate_json(db_item.profile_json)
