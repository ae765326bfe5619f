"""Image resolution for cocktail profiles that arrive without a picture."""

import logging

from mixologist.catalog.cocktaildb import CocktailDBClient
from mixologist.services.ai.client import ImageGenerator
from mixologist.services.ai.prompts import build_image_prompt

logger = logging.getLogger(__name__)


class ImageResolver:
    """
    Finds an image for a cocktail.

    Tries TheCocktailDB first and only falls back to image generation when
    the public API has no match. Never raises: every failure degrades to
    "no image".
    """

    def __init__(
        self,
        cocktaildb: CocktailDBClient,
        image_generator: ImageGenerator | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            cocktaildb: Client used for the image-by-name lookup.
            image_generator: Optional generative provider. Without it only
                             the public lookup is tried.
        """
        self.cocktaildb = cocktaildb
        self.image_generator = image_generator

    async def resolve(
        self,
        name: str,
        glassware: str,
        garnish: str,
        color: str,
    ) -> str | None:
        """
        Resolve an image reference for a cocktail.

        Args:
            name: Cocktail name.
            glassware: Glass the drink is served in.
            garnish: Garnish description.
            color: Hex colour of the liquid.

        Returns:
            A thumbnail URL, a data URL from the generator, or None.
        """
        logger.info(f"Searching for image: {name}")

        external_image = await self._search_cocktaildb(name)
        if external_image:
            logger.info(f"Found image in TheCocktailDB for: {name}")
            return external_image

        if self.image_generator is None:
            logger.debug(f"No image generator configured, leaving {name} without image")
            return None

        logger.info(f"Image not found in API, generating for: {name}")
        try:
            return await self.image_generator.generate_image(
                build_image_prompt(name, glassware, garnish, color)
            )
        except Exception as e:
            logger.error(f"Image generation failed for {name}: {e}")
            return None

    async def _search_cocktaildb(self, name: str) -> str | None:
        try:
            drinks = await self.cocktaildb.search_by_name(name)
        except Exception as e:
            logger.warning(f"Error searching TheCocktailDB for image of {name}: {e}")
            return None

        if drinks:
            return drinks[0].get("strDrinkThumb") or None
        return None
