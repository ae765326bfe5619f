"""AI provider implementations."""

from mixologist.services.ai.providers.anthropic import AnthropicClient
from mixologist.services.ai.providers.openai import OpenAIClient

__all__ = ["AnthropicClient", "OpenAIClient"]
