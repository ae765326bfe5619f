"""
Mixologist Recipe Sources
=========================

Connectors the search pipeline queries, in priority order:

1. Local - curated collection bundled with the package
2. TheCocktailDB - public recipe API, normalized into CocktailProfile
"""

from mixologist.catalog.cocktaildb import CocktailDBClient, DrinkReference
from mixologist.catalog.local import LocalCatalog, load_dataset
from mixologist.catalog.normalizer import MAX_INGREDIENT_SLOTS, normalize_external_drink

__all__ = [
    # Local
    "LocalCatalog",
    "load_dataset",
    # TheCocktailDB
    "CocktailDBClient",
    "DrinkReference",
    # Normalizer
    "normalize_external_drink",
    "MAX_INGREDIENT_SLOTS",
]
