"""Decode a located Recipe JSON-LD block into a CanonicalRecipe."""

from __future__ import annotations

from typing import Union
import json
import logging

from recipe_scraper.errors import StructuralDecodeError
from recipe_scraper.ingest.locate_jsonld import reject_constant
from recipe_scraper.models.recipe_schema import CanonicalRecipe
from recipe_scraper.normalize.shapes import (
    json_kind,
    normalize_adaptive_step_sequence,
    normalize_array_of_nested,
    normalize_nested_or_scalar,
    normalize_scalar,
    normalize_scalar_or_array,
)

logger = logging.getLogger(__name__)


def decode_recipe_json(block: Union[str, bytes]) -> CanonicalRecipe:
    """Decode one Recipe object, normalizing each field's shape.

    Absent fields stay None and unknown keys are ignored. Raises
    StructuralDecodeError when the block is not a JSON object and
    FieldShapeMismatchError for a present field with an unsupported shape.
    """
    try:
        data = json.loads(block, parse_constant=reject_constant)
    except (ValueError, RecursionError) as exc:
        raise StructuralDecodeError(f"Recipe block is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise StructuralDecodeError(f"Recipe block must be a JSON object, got {json_kind(data)}")

    recipe = CanonicalRecipe(
        name=normalize_scalar(data.get("name"), "name"),
        images=normalize_array_of_nested(data.get("image"), "image", "url"),
        recipe_yield=normalize_scalar_or_array(data.get("recipeYield"), "recipeYield"),
        author=normalize_nested_or_scalar(data.get("author"), "author", "name"),
        description=normalize_nested_or_scalar(data.get("description"), "description", "description"),
        total_time=normalize_scalar(data.get("totalTime"), "totalTime"),
        prep_time=normalize_scalar(data.get("prepTime"), "prepTime"),
        cook_time=normalize_scalar(data.get("cookTime"), "cookTime"),
        instructions=normalize_adaptive_step_sequence(data.get("recipeInstructions"), "recipeInstructions"),
        ingredients=normalize_scalar_or_array(data.get("recipeIngredient"), "recipeIngredient"),
    )
    logger.debug(
        "Decoded recipe %r: %d ingredient(s), %d step(s)",
        recipe.name,
        len(recipe.ingredients or []),
        len(recipe.instructions or []),
    )
    return recipe
