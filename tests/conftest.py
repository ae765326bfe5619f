"""Shared fixtures for Mixologist tests."""

import pytest

from mixologist.core.schema import CocktailProfile, Ingredient


@pytest.fixture
def negroni() -> CocktailProfile:
    """A complete local-style profile."""
    return CocktailProfile(
        name="Negroni",
        iba_classification="The Unforgettables",
        preparation_type="Stirred",
        glassware="Old Fashioned glass",
        straining_technique="Single strain",
        garnish="Orange peel",
        ingredients=[
            Ingredient(name="Gin", amount="30 ml"),
            Ingredient(name="Campari", amount="30 ml"),
            Ingredient(name="Sweet red vermouth", amount="30 ml"),
        ],
        method="Stir with ice and strain.",
        color="#B22222",
        difficulty="Easy",
        abv="24%",
        categories=["Classics"],
        tags=["Bitter"],
    )
