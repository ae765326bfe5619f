"""AI client interface and provider abstraction."""

import json
import logging
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError

from mixologist.core.enums import SearchMode
from mixologist.core.schema import CocktailProfile

logger = logging.getLogger(__name__)

MAX_REPAIR_ATTEMPTS = 2

# Top-level fields that should be empty strings instead of null
# These match the CocktailProfile schema where str fields have default=""
_TOP_LEVEL_STRING_FIELDS = [
    "name", "iba_classification", "preparation_type", "glassware",
    "straining_technique", "garnish", "method", "history", "curiosity",
    "abv", "pairing",
]

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def sanitize_ai_response(data: dict[str, Any]) -> dict[str, Any]:
    """
    Convert null values to empty strings for string fields.

    The AI often returns null for optional string fields, but our Pydantic
    models expect empty strings (str with default="") not None. Generated
    images are never trusted, so any image_url is dropped.

    Args:
        data: The parsed JSON dict from the AI.

    Returns:
        Sanitized dict with nulls converted to empty strings where appropriate.
    """
    result = data.copy()
    result.pop("image_url", None)

    for field in _TOP_LEVEL_STRING_FIELDS:
        if field in result and result[field] is None:
            result[field] = ""

    if isinstance(result.get("ingredients"), list):
        result["ingredients"] = [
            {
                "name": item.get("name") or "",
                "amount": "" if item.get("amount") is None else item["amount"],
            }
            for item in result["ingredients"]
            if isinstance(item, dict) and item.get("name")
        ]

    for field in ("categories", "tags"):
        if field in result and result[field] is None:
            result[field] = []

    return result


def extract_json_text(raw_response: str) -> str:
    """
    Pull the JSON object out of a model response.

    Strips markdown code fences and any prose around the outermost
    ``{...}`` block.
    """
    json_str = raw_response.strip()
    if json_str.startswith("```json"):
        json_str = json_str[7:]
    if json_str.startswith("```"):
        json_str = json_str[3:]
    if json_str.endswith("```"):
        json_str = json_str[:-3]
    json_str = json_str.strip()

    match = _JSON_OBJECT.search(json_str)
    return match.group(0) if match else json_str


class AIProvider(str, Enum):
    """Supported AI providers."""

    ANTHROPIC = "anthropic"
    OPENAI = "openai"


class GenerationResult(BaseModel):
    """Result of an AI generation attempt."""

    success: bool
    raw_response: str
    parsed_json: dict[str, Any] | None = None
    profile: CocktailProfile | None = None
    error_message: str | None = None
    repair_attempts: int = 0


class AIClient(ABC):
    """Abstract base class for recipe generation providers."""

    provider: AIProvider
    model: str

    @abstractmethod
    async def generate_recipe(
        self,
        query: str,
        mode: SearchMode = SearchMode.BY_NAME,
    ) -> GenerationResult:
        """
        Generate a cocktail profile for a query.

        Args:
            query: Cocktail name or ingredient.
            mode: How to interpret the query.

        Returns:
            GenerationResult with the parsed CocktailProfile or error details.
        """
        pass

    @abstractmethod
    async def repair_json(
        self,
        invalid_json: str,
        error_message: str,
    ) -> str:
        """
        Attempt to repair invalid JSON.

        Args:
            invalid_json: The malformed JSON string.
            error_message: The error message from the parser.

        Returns:
            The repaired JSON string.
        """
        pass

    async def _parse_and_validate(
        self,
        raw_response: str,
        repair_attempts: int = 0,
    ) -> GenerationResult:
        """
        Parse JSON response and validate against the CocktailProfile schema.

        Invalid JSON, schema violations and records without ingredients
        are sent back to the model for repair up to MAX_REPAIR_ATTEMPTS
        times.

        Args:
            raw_response: The raw text from the AI.
            repair_attempts: Number of repair attempts made so far.

        Returns:
            GenerationResult with parsed data or error details.
        """
        json_str = extract_json_text(raw_response)

        # Step 1: Try to parse JSON
        try:
            parsed_json = json.loads(json_str)
            if not isinstance(parsed_json, dict):
                raise ValueError(f"Expected a JSON object, got {type(parsed_json).__name__}")
        except ValueError as e:
            error_msg = f"JSON parse error: {str(e)}"
            logger.warning(f"{error_msg} (attempt {repair_attempts + 1})")

            if repair_attempts < MAX_REPAIR_ATTEMPTS:
                repaired = await self.repair_json(json_str, str(e))
                return await self._parse_and_validate(
                    repaired, repair_attempts=repair_attempts + 1
                )

            return GenerationResult(
                success=False,
                raw_response=raw_response,
                error_message=error_msg,
                repair_attempts=repair_attempts,
            )

        # Step 2: Sanitize nulls to empty strings before Pydantic validation
        sanitized_json = sanitize_ai_response(parsed_json)

        # Step 3: Validate against Pydantic model; empty recipes count as invalid
        try:
            profile = CocktailProfile.model_validate(sanitized_json)
            if not profile.is_complete:
                raise ValueError("Recipe must have a name and at least one ingredient")
        except (ValidationError, ValueError) as e:
            error_msg = f"Validation error: {str(e)}"
            logger.warning(f"{error_msg} (attempt {repair_attempts + 1})")

            if repair_attempts < MAX_REPAIR_ATTEMPTS:
                repaired = await self.repair_json(
                    json.dumps(parsed_json, indent=2),
                    f"Pydantic validation failed: {str(e)}",
                )
                return await self._parse_and_validate(
                    repaired, repair_attempts=repair_attempts + 1
                )

            return GenerationResult(
                success=False,
                raw_response=raw_response,
                parsed_json=parsed_json,
                error_message=error_msg,
                repair_attempts=repair_attempts,
            )

        logger.info(
            f"AI recipe parsed: name='{profile.name}', "
            f"ingredients={len(profile.ingredients)}"
        )
        return GenerationResult(
            success=True,
            raw_response=raw_response,
            parsed_json=parsed_json,
            profile=profile,
            repair_attempts=repair_attempts,
        )


class ImageGenerator(ABC):
    """Abstract base class for image generation providers."""

    @abstractmethod
    async def generate_image(self, prompt: str) -> str | None:
        """
        Generate a single square image.

        Args:
            prompt: Text description of the image.

        Returns:
            The image as a data URL, or None if nothing was produced.
        """
        pass


def get_ai_client(
    provider: AIProvider | str,
    api_key: str,
    model: str | None = None,
    timeout: float | None = None,
) -> AIClient:
    """
    Factory function to get an AI client for the specified provider.

    Args:
        provider: The AI provider to use.
        api_key: The API key for the provider.
        model: Optional model name override.
        timeout: Optional per-request timeout in seconds.

    Returns:
        An AIClient instance for the specified provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    if isinstance(provider, str):
        provider = AIProvider(provider.lower())

    if provider == AIProvider.ANTHROPIC:
        from mixologist.services.ai.providers.anthropic import AnthropicClient

        return AnthropicClient(api_key=api_key, model=model, timeout=timeout)
    elif provider == AIProvider.OPENAI:
        from mixologist.services.ai.providers.openai import OpenAIClient

        return OpenAIClient(api_key=api_key, model=model, timeout=timeout)
    else:
        raise ValueError(f"Unsupported AI provider: {provider}")


def get_image_generator(
    api_key: str,
    timeout: float | None = None,
) -> ImageGenerator:
    """Image generation is only offered through OpenAI."""
    from mixologist.services.ai.providers.openai import OpenAIClient

    return OpenAIClient(api_key=api_key, timeout=timeout)
