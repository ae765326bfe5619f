"""Core models and enums."""
