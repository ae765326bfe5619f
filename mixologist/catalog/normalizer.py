"""
Drink Normalizer Module
=======================

Maps TheCocktailDB drink records onto the canonical CocktailProfile.
The external schema has no equivalent for accent colour, difficulty,
ABV, pairing or tags, so those get fixed defaults.
"""

from __future__ import annotations

from typing import Any

from mixologist.core.enums import Difficulty
from mixologist.core.schema import DEFAULT_COLOR, CocktailProfile, Ingredient

# TheCocktailDB numbers its ingredient/measure pairs 1..15
MAX_INGREDIENT_SLOTS = 15

API_CATEGORY_PLACEHOLDER = "API Collection"
DEFAULT_CURIOSITY = "A popular modern choice"
DEFAULT_GARNISH = "As per method"
DEFAULT_STRAINING = "N/A"
DEFAULT_HISTORY = "Source: TheCocktailDB"
DEFAULT_ABV = "Varies"
DEFAULT_PAIRING = "Ask a sommelier"
VIDEO_PREPARATION = "Video tutorial available"
STANDARD_PREPARATION = "Standard"


def _text(raw: dict[str, Any], key: str) -> str:
    """Read a text field, treating missing, null and non-string values as empty."""
    value = raw.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)
    return value.strip()


def extract_ingredients(raw: dict[str, Any]) -> list[Ingredient]:
    """
    Collect the numbered ingredient/measure pairs of a drink record.

    Unset slots (missing, null or blank ingredient names) are skipped;
    gaps do not end the scan.

    Args:
        raw: TheCocktailDB drink record.

    Returns:
        Ingredients in slot order.
    """
    ingredients: list[Ingredient] = []
    for slot in range(1, MAX_INGREDIENT_SLOTS + 1):
        name = _text(raw, f"strIngredient{slot}")
        if not name:
            continue
        ingredients.append(Ingredient(name=name, amount=_text(raw, f"strMeasure{slot}")))
    return ingredients


def normalize_external_drink(raw: dict[str, Any] | None) -> CocktailProfile:
    """
    Convert a TheCocktailDB drink record into a CocktailProfile.

    Never fails on missing optional fields: absent text becomes an empty
    string and an absent category becomes a placeholder label.

    Args:
        raw: Drink record as returned by search.php or lookup.php.

    Returns:
        The normalized profile.
    """
    if not isinstance(raw, dict):
        raw = {}

    category = _text(raw, "strCategory") or API_CATEGORY_PLACEHOLDER

    return CocktailProfile(
        name=_text(raw, "strDrink"),
        iba_classification=category,
        preparation_type=VIDEO_PREPARATION if _text(raw, "strVideo") else STANDARD_PREPARATION,
        glassware=_text(raw, "strGlass"),
        straining_technique=DEFAULT_STRAINING,
        garnish=DEFAULT_GARNISH,
        ingredients=extract_ingredients(raw),
        method=_text(raw, "strInstructions"),
        history=DEFAULT_HISTORY,
        curiosity=_text(raw, "strIBA") or DEFAULT_CURIOSITY,
        color=DEFAULT_COLOR,
        image_url=_text(raw, "strDrinkThumb") or None,
        difficulty=Difficulty.MEDIUM,
        abv=DEFAULT_ABV,
        pairing=DEFAULT_PAIRING,
        categories=[category],
        tags=[],
    )
