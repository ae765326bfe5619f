"""OpenAI AI provider implementation."""

import logging

from mixologist.core.enums import SearchMode
from mixologist.exceptions import GenerationError
from mixologist.services.ai.client import AIClient, AIProvider, GenerationResult, ImageGenerator
from mixologist.services.ai.prompts import (
    SYSTEM_PROMPT,
    build_recipe_prompt,
    build_repair_prompt,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o"
DEFAULT_IMAGE_MODEL = "dall-e-3"
IMAGE_SIZE = "1024x1024"


class OpenAIClient(AIClient, ImageGenerator):
    """OpenAI GPT client for recipes and DALL-E client for images."""

    provider = AIProvider.OPENAI

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        timeout: float | None = None,
        image_model: str | None = None,
    ):
        """
        Initialize the OpenAI client.

        Args:
            api_key: OpenAI API key.
            model: Chat model name (defaults to gpt-4o).
            timeout: Per-request timeout in seconds (SDK default if None).
            image_model: Image model name (defaults to dall-e-3).
        """
        try:
            import openai
        except ImportError:
            raise ImportError(
                "openai package is required. Install with: pip install openai"
            )

        if timeout is not None:
            self.client = openai.AsyncOpenAI(api_key=api_key, timeout=timeout)
        else:
            self.client = openai.AsyncOpenAI(api_key=api_key)
        self.model = model or DEFAULT_MODEL
        self.image_model = image_model or DEFAULT_IMAGE_MODEL

    async def generate_recipe(
        self,
        query: str,
        mode: SearchMode = SearchMode.BY_NAME,
    ) -> GenerationResult:
        """
        Generate a cocktail profile using GPT.

        Args:
            query: Cocktail name or ingredient.
            mode: How to interpret the query.

        Returns:
            GenerationResult with the parsed CocktailProfile or error details.
        """
        prompt = build_recipe_prompt(query, mode)

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                max_tokens=2048,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                response_format={"type": "json_object"},
            )

            raw_response = response.choices[0].message.content or ""
            logger.debug(f"Raw AI response: {raw_response[:500]}...")

        except Exception as e:
            logger.error(f"OpenAI API error: {e}")
            return GenerationResult(
                success=False,
                raw_response="",
                error_message=f"API error: {str(e)}",
            )

        return await self._parse_and_validate(raw_response)

    async def repair_json(self, invalid_json: str, error_message: str) -> str:
        """
        Attempt to repair invalid JSON using GPT.

        Args:
            invalid_json: The malformed JSON string.
            error_message: The error message from the parser.

        Returns:
            The repaired JSON string.
        """
        prompt = build_repair_prompt(invalid_json, error_message)

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                max_tokens=2048,
                messages=[{"role": "user", "content": prompt}],
                response_format={"type": "json_object"},
            )
            return response.choices[0].message.content or invalid_json
        except Exception as e:
            logger.error(f"JSON repair API error: {e}")
            return invalid_json  # Return original on failure

    async def generate_image(self, prompt: str) -> str | None:
        """
        Generate one square image with DALL-E.

        Args:
            prompt: Text description of the image.

        Returns:
            A ``data:image/png;base64,...`` URL, or None if the API
            returned no image data.

        Raises:
            GenerationError: If the image API call fails.
        """
        try:
            response = await self.client.images.generate(
                model=self.image_model,
                prompt=prompt,
                n=1,
                size=IMAGE_SIZE,
                quality="standard",
                response_format="b64_json",
            )
        except Exception as e:
            raise GenerationError(f"Image API error: {e}") from e

        if response.data and response.data[0].b64_json:
            return f"data:image/png;base64,{response.data[0].b64_json}"
        return None
