"""Generative recipe and image services for Mixologist."""

from mixologist.services.ai.client import (
    AIClient,
    AIProvider,
    GenerationResult,
    ImageGenerator,
    get_ai_client,
    get_image_generator,
)

__all__ = [
    "AIClient",
    "AIProvider",
    "GenerationResult",
    "ImageGenerator",
    "get_ai_client",
    "get_image_generator",
]
