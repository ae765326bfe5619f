"""Mixologist - cocktail recipe lookup across a curated collection, TheCocktailDB and generative AI."""

__version__ = "0.1.0"
