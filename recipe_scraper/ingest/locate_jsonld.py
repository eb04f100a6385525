"""Find the JSON-LD block describing a schema.org Recipe on a page.

Pages either embed a Recipe object directly or wrap several entities in an
`@graph` array (recipe plus breadcrumbs, organization, ...). Only one level
of `@graph` is unwrapped and the first matching script block wins.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Tuple
import json
import logging

from recipe_scraper.errors import JsonLdSyntaxError, NoRecipeMetadataError
from recipe_scraper.ingest.html_query import ElementQuery, Markup, iter_jsonld_scripts, query_elements


logger = logging.getLogger(__name__)

RECIPE_TYPE = "recipe"

# (parsed JSON, original text) -> matched block text or None
ShapeAttempt = Callable[[Any, str], Optional[str]]


def is_recipe_type(declared: Any) -> bool:
    """True when an `@type` value names Recipe, ignoring case.

    A list-valued `@type` matches when any of its strings does.
    """
    if isinstance(declared, str):
        return declared.lower() == RECIPE_TYPE
    if isinstance(declared, list):
        return any(isinstance(t, str) and t.lower() == RECIPE_TYPE for t in declared)
    return False


def _first_recipe_entry(entries: Iterable[Any]) -> Optional[str]:
    for entry in entries:
        if isinstance(entry, dict) and is_recipe_type(entry.get("@type")):
            return json.dumps(entry, ensure_ascii=False)
    return None


def _typed_block(data: Any, text: str) -> Optional[str]:
    if isinstance(data, dict) and is_recipe_type(data.get("@type")):
        return text
    return None


def _graph_wrapper(data: Any, text: str) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    graph = data.get("@graph")
    if not isinstance(graph, list):
        return None
    return _first_recipe_entry(graph)


def _entity_list(data: Any, text: str) -> Optional[str]:
    if not isinstance(data, list):
        return None
    return _first_recipe_entry(data)


def reject_constant(token: str) -> Any:
    """Refuse the NaN/Infinity tokens Python's json module accepts but JSON does not."""
    raise ValueError(f"{token} is not a valid JSON value")


SHAPE_ATTEMPTS: Tuple[Tuple[str, ShapeAttempt], ...] = (
    ("recipe", _typed_block),
    ("@graph", _graph_wrapper),
    ("array", _entity_list),
)


def match_recipe_shape(data: Any, text: str) -> Tuple[Optional[str], Optional[str]]:
    """Try each known shape in order; return (shape name, block text) of the first hit."""
    for shape, attempt in SHAPE_ATTEMPTS:
        block = attempt(data, text)
        if block is not None:
            return shape, block
    return None, None


def locate_recipe_block(markup: Markup, query: ElementQuery = query_elements) -> str:
    """Return the JSON text of the first Recipe found in the page's JSON-LD scripts.

    Raises JsonLdSyntaxError as soon as a script holds invalid JSON, and
    NoRecipeMetadataError when every script parsed but none is a Recipe.
    """
    scripts = iter_jsonld_scripts(markup, query=query)
    logger.debug("Scanning %d JSON-LD script block(s)", len(scripts))
    for index, text in enumerate(scripts):
        try:
            data = json.loads(text, parse_constant=reject_constant)
        except (ValueError, RecursionError) as exc:
            raise JsonLdSyntaxError(
                f"JSON-LD block {index} is not valid JSON: {exc}", block_index=index
            ) from exc

        shape, block = match_recipe_shape(data, text)
        if block is not None:
            logger.info("Recipe metadata found in JSON-LD block %d (shape=%s)", index, shape)
            return block
        logger.debug("JSON-LD block %d holds no Recipe; continuing", index)

    raise NoRecipeMetadataError(f"No recipe metadata found in {len(scripts)} JSON-LD block(s)")
