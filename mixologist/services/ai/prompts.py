"""Prompt templates for generative recipes and images."""

import json

from mixologist.core.enums import SearchMode

PROMPT_VERSION = "1.0"

# JSON Schema for the CocktailProfile output (image excluded)
COCKTAIL_PROFILE_JSON_SCHEMA = {
    "type": "object",
    "required": ["name", "ingredients"],
    "properties": {
        "name": {"type": "string", "description": "Cocktail name"},
        "iba_classification": {"type": "string", "description": "IBA category or 'Signature'"},
        "preparation_type": {"type": "string", "enum": ["Stirred", "Shaken", "Built", "Muddled", "Blended"]},
        "glassware": {"type": "string"},
        "straining_technique": {"type": "string", "enum": ["Single strain", "Double strain", "Fine strain", "None"]},
        "garnish": {"type": "string"},
        "ingredients": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "amount": {"type": "string", "description": "Quantity with unit, e.g. '30 ml'"},
                },
            },
        },
        "method": {"type": "string"},
        "history": {"type": "string"},
        "curiosity": {"type": "string"},
        "color": {"type": "string", "description": "Hex colour of the drink, e.g. '#B22222'"},
        "difficulty": {"type": "string", "enum": ["Easy", "Medium", "Advanced"]},
        "abv": {"type": "string", "description": "Approximate alcohol by volume, e.g. '18%'"},
        "pairing": {"type": "string"},
        "categories": {
            "type": "array",
            "items": {
                "type": "string",
                "enum": [
                    "Classics",
                    "Signature",
                    "Low ABV",
                    "Non-alcoholic",
                    "Refreshing",
                    "Intense",
                    "Aperitifs",
                    "Digestifs",
                ],
            },
        },
        "tags": {"type": "array", "items": {"type": "string"}},
    },
}


SYSTEM_PROMPT = """You are an IBA master mixologist. You write precise, professional cocktail specification sheets.

CRITICAL RULES:
1. Use classic IBA specifications whenever the cocktail is a recognised classic
2. For unknown or creative requests, design a plausible, balanced recipe
3. Every recipe MUST list at least one ingredient with an amount
4. Use empty strings "" for text fields you cannot fill and empty arrays [] for lists
5. In straining_technique say clearly whether the classic method uses a single or double strain

Output ONLY valid JSON matching the schema. No additional text or explanation."""


RECIPE_BY_NAME_REQUEST = 'Create a detailed and accurate technical sheet for the cocktail "{query}".'

RECIPE_BY_INGREDIENT_REQUEST = (
    "Create a detailed and accurate technical sheet for a high-quality classic or modern "
    'cocktail that uses "{query}" as its main ingredient.'
)

RECIPE_PROMPT_TEMPLATE = """{request}

The response MUST be a single JSON object that validates against this JSON Schema
(use the exact field names shown):

{schema}

Output ONLY the JSON object, no markdown code blocks or additional text."""


REPAIR_PROMPT_TEMPLATE = """The following JSON is invalid and needs to be repaired.

INVALID JSON:
{invalid_json}

ERROR MESSAGE:
{error_message}

Please fix the JSON to make it valid. Common issues include:
- Missing or extra commas
- Unquoted strings
- Invalid escape sequences
- Trailing commas in arrays/objects
- Missing closing brackets
- An empty "ingredients" array (a recipe needs at least one ingredient)

Output ONLY the corrected JSON, no explanation."""


IMAGE_PROMPT_TEMPLATE = (
    "Professional high-end studio photography of a {name} cocktail. "
    "Served in a {glassware}. Liquid color: {color}. Garnish: {garnish}. "
    "Luxury bar setting, bokeh background, dramatic lighting, 8k resolution, "
    "minimalist aesthetic, photorealistic."
)


def build_recipe_prompt(
    query: str,
    mode: SearchMode = SearchMode.BY_NAME,
) -> str:
    """
    Build the recipe generation prompt.

    Args:
        query: Cocktail name or ingredient the user searched for.
        mode: Whether the query names a cocktail or an ingredient.

    Returns:
        The formatted prompt string.
    """
    template = RECIPE_BY_INGREDIENT_REQUEST if mode == SearchMode.BY_INGREDIENT else RECIPE_BY_NAME_REQUEST
    return RECIPE_PROMPT_TEMPLATE.format(
        request=template.format(query=query.strip()),
        schema=json.dumps(COCKTAIL_PROFILE_JSON_SCHEMA, indent=2),
    )


def build_repair_prompt(invalid_json: str, error_message: str) -> str:
    """
    Build the JSON repair prompt.

    Args:
        invalid_json: The malformed JSON string.
        error_message: The error from the JSON parser.

    Returns:
        The formatted repair prompt.
    """
    return REPAIR_PROMPT_TEMPLATE.format(
        invalid_json=invalid_json,
        error_message=error_message,
    )


def build_image_prompt(name: str, glassware: str, garnish: str, color: str) -> str:
    """Build the deterministic image prompt for a cocktail."""
    return IMAGE_PROMPT_TEMPLATE.format(
        name=name,
        glassware=glassware or "cocktail glass",
        garnish=garnish or "none",
        color=color,
    )
