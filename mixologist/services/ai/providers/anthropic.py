"""Anthropic (Claude) AI provider implementation."""

import logging

from mixologist.core.enums import SearchMode
from mixologist.services.ai.client import AIClient, AIProvider, GenerationResult
from mixologist.services.ai.prompts import (
    SYSTEM_PROMPT,
    build_recipe_prompt,
    build_repair_prompt,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-20250514"


class AnthropicClient(AIClient):
    """Anthropic Claude AI client."""

    provider = AIProvider.ANTHROPIC

    def __init__(self, api_key: str, model: str | None = None, timeout: float | None = None):
        """
        Initialize the Anthropic client.

        Args:
            api_key: Anthropic API key.
            model: Model name (defaults to claude-sonnet-4-20250514).
            timeout: Per-request timeout in seconds (SDK default if None).
        """
        try:
            import anthropic
        except ImportError:
            raise ImportError(
                "anthropic package is required. Install with: pip install anthropic"
            )

        if timeout is not None:
            self.client = anthropic.AsyncAnthropic(api_key=api_key, timeout=timeout)
        else:
            self.client = anthropic.AsyncAnthropic(api_key=api_key)
        self.model = model or DEFAULT_MODEL

    async def generate_recipe(
        self,
        query: str,
        mode: SearchMode = SearchMode.BY_NAME,
    ) -> GenerationResult:
        """
        Generate a cocktail profile using Claude.

        Args:
            query: Cocktail name or ingredient.
            mode: How to interpret the query.

        Returns:
            GenerationResult with the parsed CocktailProfile or error details.
        """
        prompt = build_recipe_prompt(query, mode)

        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=2048,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
            )

            raw_response = response.content[0].text
            logger.info(f"AI recipe received response ({len(raw_response)} chars)")
            logger.debug(f"Raw AI response: {raw_response[:1000]}...")

        except Exception as e:
            logger.error(f"Anthropic API error: {e}")
            return GenerationResult(
                success=False,
                raw_response="",
                error_message=f"API error: {str(e)}",
            )

        return await self._parse_and_validate(raw_response)

    async def repair_json(self, invalid_json: str, error_message: str) -> str:
        """
        Attempt to repair invalid JSON using Claude.

        Args:
            invalid_json: The malformed JSON string.
            error_message: The error message from the parser.

        Returns:
            The repaired JSON string.
        """
        prompt = build_repair_prompt(invalid_json, error_message)

        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=2048,
                messages=[{"role": "user", "content": prompt}],
            )
            return response.content[0].text
        except Exception as e:
            logger.error(f"JSON repair API error: {e}")
            return invalid_json  # Return original on failure
