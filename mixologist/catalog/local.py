"""
Local Catalog Module
====================

Read-only access to the curated cocktail collection bundled with the
package. The dataset is a YAML file loaded once and validated into
CocktailProfile records.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from mixologist.core.enums import SearchMode
from mixologist.core.schema import CocktailProfile
from mixologist.exceptions import DatasetError

logger = logging.getLogger(__name__)

DEFAULT_DATASET_PATH = Path(__file__).parent / "data" / "cocktails.yaml"


def load_dataset(path: Path | str) -> list[CocktailProfile]:
    """
    Load and validate a cocktail dataset from a YAML file.

    Args:
        path: Path to the YAML file. It must hold a top-level
              ``cocktails`` list.

    Returns:
        Profiles in file order.

    Raises:
        DatasetError: If the file is missing, unparsable, or holds an
                      entry without a name or ingredients.
    """
    path = Path(path)
    if not path.exists():
        raise DatasetError(f"Cocktail dataset not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise DatasetError(f"Invalid YAML in {path}: {e}") from e

    entries = data.get("cocktails", []) if isinstance(data, dict) else []
    return _validate_entries(entries, source=str(path))


def _validate_entries(entries: list[Any], source: str) -> list[CocktailProfile]:
    profiles: list[CocktailProfile] = []
    for index, entry in enumerate(entries):
        try:
            profile = CocktailProfile.model_validate(entry)
        except ValidationError as e:
            raise DatasetError(f"Invalid cocktail #{index} in {source}: {e}") from e
        if not profile.is_complete:
            raise DatasetError(
                f"Cocktail #{index} in {source} needs a name and at least one ingredient"
            )
        profiles.append(profile)
    return profiles


class LocalCatalog:
    """Substring search over the curated collection."""

    def __init__(
        self,
        profiles: list[CocktailProfile] | None = None,
        dataset_path: Path | str | None = None,
    ) -> None:
        """
        Initialize the catalog.

        Args:
            profiles: Explicit profiles to serve. Takes precedence over
                      dataset_path.
            dataset_path: YAML dataset read by load() or on first use
                          (defaults to the bundled collection).
        """
        self._dataset_path = Path(dataset_path) if dataset_path else DEFAULT_DATASET_PATH
        self._profiles = list(profiles) if profiles is not None else None

    @property
    def is_loaded(self) -> bool:
        return self._profiles is not None

    @property
    def profiles(self) -> list[CocktailProfile]:
        if self._profiles is None:
            self.load()
        return self._profiles

    def load(self) -> list[CocktailProfile]:
        """
        Read and validate the dataset now.

        Raises:
            DatasetError: If the dataset cannot be loaded.
        """
        if self._profiles is None:
            self._profiles = load_dataset(self._dataset_path)
            logger.info(f"Loaded {len(self._profiles)} cocktails from {self._dataset_path}")
        return self._profiles

    def all(self) -> list[CocktailProfile]:
        """Return every cocktail in the collection."""
        return list(self.profiles)

    def get(self, name: str) -> CocktailProfile | None:
        """Return the cocktail whose name matches exactly, ignoring case."""
        key = name.strip().lower()
        for profile in self.profiles:
            if profile.dedup_key == key:
                return profile
        return None

    def search(
        self,
        query: str,
        mode: SearchMode = SearchMode.BY_NAME,
    ) -> list[CocktailProfile]:
        """
        Find cocktails by case-insensitive substring containment.

        Args:
            query: Text to look for.
            mode: Match against the cocktail name or any ingredient name.

        Returns:
            Matching profiles in collection order.
        """
        needle = query.strip().lower()
        if not needle:
            return []

        if mode == SearchMode.BY_INGREDIENT:
            return [
                profile
                for profile in self.profiles
                if any(needle in ingredient.name.lower() for ingredient in profile.ingredients)
            ]
        return [profile for profile in self.profiles if needle in profile.name.lower()]
