"""Enums for cocktail profile and search fields."""

from enum import Enum


class Difficulty(str, Enum):
    """How hard a cocktail is to prepare."""

    EASY = "Easy"
    MEDIUM = "Medium"
    ADVANCED = "Advanced"


class SearchMode(str, Enum):
    """What the search query is matched against."""

    BY_NAME = "name"
    BY_INGREDIENT = "ingredient"


class SearchOutcome(str, Enum):
    """User-visible state of a search."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


class ProfileSource(str, Enum):
    """Where a cocktail profile came from."""

    LOCAL = "local"
    COCKTAILDB = "cocktaildb"
    GENERATED = "generated"
