"""Canonical Pydantic v2 models for Mixologist cocktail profiles."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from mixologist.core.enums import Difficulty, SearchMode, SearchOutcome

DEFAULT_COLOR = "#D0BCFF"

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Spellings seen in generated recipes, including the Portuguese labels
# the first curated dataset was written with
_DIFFICULTY_ALIASES: dict[str, Difficulty] = {
    "easy": Difficulty.EASY,
    "simple": Difficulty.EASY,
    "beginner": Difficulty.EASY,
    "fácil": Difficulty.EASY,
    "facil": Difficulty.EASY,
    "medium": Difficulty.MEDIUM,
    "intermediate": Difficulty.MEDIUM,
    "moderate": Difficulty.MEDIUM,
    "médio": Difficulty.MEDIUM,
    "medio": Difficulty.MEDIUM,
    "advanced": Difficulty.ADVANCED,
    "hard": Difficulty.ADVANCED,
    "difficult": Difficulty.ADVANCED,
    "expert": Difficulty.ADVANCED,
    "avançado": Difficulty.ADVANCED,
    "avancado": Difficulty.ADVANCED,
}


class Ingredient(BaseModel):
    """A single ingredient line of a recipe."""

    model_config = ConfigDict(frozen=True)

    name: str
    amount: str = ""

    @field_validator("name", "amount", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        if isinstance(value, str):
            return value.strip()
        return value


class CocktailProfile(BaseModel):
    """
    Canonical recipe record.

    Profiles are immutable. The only change a caller may make after
    construction is attaching an image, which goes through with_image()
    and yields a new instance.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    iba_classification: str = ""
    preparation_type: str = ""
    glassware: str = ""
    straining_technique: str = ""
    garnish: str = ""
    ingredients: list[Ingredient] = Field(default_factory=list)
    method: str = ""
    history: str = ""
    curiosity: str = ""
    color: str = DEFAULT_COLOR
    image_url: str | None = None
    difficulty: Difficulty = Difficulty.MEDIUM
    abv: str = ""
    pairing: str = ""
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    @field_validator(
        "name",
        "iba_classification",
        "preparation_type",
        "glassware",
        "straining_technique",
        "garnish",
        "method",
        "history",
        "curiosity",
        "abv",
        "pairing",
        mode="before",
    )
    @classmethod
    def none_to_empty(cls, value: Any) -> Any:
        """Null text fields become empty strings."""
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("difficulty", mode="before")
    @classmethod
    def parse_difficulty(cls, value: Any) -> Difficulty:
        """Map free-form difficulty labels onto the enum, defaulting to Medium."""
        if isinstance(value, Difficulty):
            return value
        if isinstance(value, str):
            return _DIFFICULTY_ALIASES.get(value.strip().lower(), Difficulty.MEDIUM)
        return Difficulty.MEDIUM

    @field_validator("color", mode="before")
    @classmethod
    def parse_color(cls, value: Any) -> str:
        """Keep valid hex colours, fall back to the default accent otherwise."""
        if isinstance(value, str) and _HEX_COLOR.match(value.strip()):
            return value.strip()
        return DEFAULT_COLOR

    @field_validator("image_url", mode="before")
    @classmethod
    def blank_image_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("categories", "tags", mode="before")
    @classmethod
    def clean_labels(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        return [str(item).strip() for item in value if item and str(item).strip()]

    @property
    def dedup_key(self) -> str:
        """Case-insensitive identity used to drop duplicate results."""
        return self.name.strip().lower()

    @property
    def is_complete(self) -> bool:
        """A usable recipe has a name and at least one ingredient."""
        return bool(self.name.strip()) and len(self.ingredients) > 0

    def with_image(self, image_url: str | None) -> "CocktailProfile":
        """Return a copy of this profile with image_url attached."""
        return self.model_copy(update={"image_url": image_url or None})


class SearchResponse(BaseModel):
    """Result of a search as handed to a presentation layer."""

    query: str
    mode: SearchMode = SearchMode.BY_NAME
    outcome: SearchOutcome
    results: list[CocktailProfile] = Field(default_factory=list)
    message: str = ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_single(self) -> bool:
        """Exactly one result: callers open the detail view directly."""
        return self.outcome == SearchOutcome.SUCCESS and len(self.results) == 1
