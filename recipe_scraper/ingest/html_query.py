"""Query parsed HTML for elements by tag and attribute using BeautifulSoup."""

from __future__ import annotations

from typing import Callable, List, Optional, Union
import logging

from bs4 import BeautifulSoup, ParserRejectedMarkup

from recipe_scraper.errors import HtmlParseError
from recipe_scraper.settings import settings


logger = logging.getLogger(__name__)

Markup = Union[bytes, str]
ElementQuery = Callable[[Markup, str, str, str], List[str]]

JSONLD_TYPE = "application/ld+json"


def query_elements(
    markup: Markup,
    tag: str,
    attribute: str,
    value: str,
    parser: Optional[str] = None,
) -> List[str]:
    """Return the inner content of every `tag` whose `attribute` equals `value`.

    Results are in document order. Bytes are decoded by BeautifulSoup's own
    encoding detection; broken markup is parsed on a best-effort basis.
    """
    try:
        soup = BeautifulSoup(markup, parser or settings.HTML_PARSER)
    except ParserRejectedMarkup as exc:
        raise HtmlParseError(f"HTML parser rejected the markup: {exc}") from exc

    matches = soup.find_all(tag, attrs={attribute: value})
    logger.debug("Found %d <%s %s=%r> elements", len(matches), tag, attribute, value)
    return [_inner_content(el) for el in matches]


def _inner_content(element) -> str:
    # script/style bodies come back as a single string child
    if element.string is not None:
        return str(element.string)
    return "".join(str(child) for child in element.children)


def iter_jsonld_scripts(markup: Markup, query: ElementQuery = query_elements) -> List[str]:
    """Return the text of every application/ld+json script block on the page."""
    return query(markup, "script", "type", JSONLD_TYPE)
