"""Orchestrator: fetch a page, locate its Recipe JSON-LD and decode it.

The pipeline is linear (fetching -> locating -> decoding -> done) and keeps
no state between calls, so one RecipeScraper may serve concurrent callers.
Retries and timeouts are the fetcher's business.
"""

from __future__ import annotations

from typing import Optional
import logging

from recipe_scraper.errors import FetchError, HtmlParseError, ScrapeError, ScrapeStage
from recipe_scraper.ingest.decode_jsonld import decode_recipe_json
from recipe_scraper.ingest.fetch import Fetcher, fetch_url
from recipe_scraper.ingest.html_query import ElementQuery, query_elements
from recipe_scraper.ingest.locate_jsonld import locate_recipe_block
from recipe_scraper.models.recipe_schema import CanonicalRecipe

logger = logging.getLogger(__name__)


class RecipeScraper:
    """Runs the scrape pipeline with injectable fetch and HTML query capabilities."""

    def __init__(self, fetch: Optional[Fetcher] = None, query: Optional[ElementQuery] = None):
        self.fetch = fetch or fetch_url
        self.query = query or query_elements

    def scrape_recipe(self, url: str) -> CanonicalRecipe:
        """Return the canonical recipe for `url` or raise the ScrapeError of the failing stage."""
        stage = ScrapeStage.IDLE
        logger.info("Scrape start | url=%s", url)
        try:
            stage = ScrapeStage.FETCHING
            markup = self._fetch(url)

            stage = ScrapeStage.LOCATING
            block = self._locate(markup)

            stage = ScrapeStage.DECODING
            recipe = decode_recipe_json(block)
        except ScrapeError as exc:
            logger.warning("Scrape failed | url=%s stage=%s error=%s", url, stage.value, exc)
            raise

        stage = ScrapeStage.DONE
        logger.info(
            "Scrape success | url=%s name=%s ingredients=%d",
            url,
            recipe.name,
            len(recipe.ingredients or []),
        )
        return recipe

    def _fetch(self, url: str) -> bytes:
        try:
            markup = self.fetch(url)
        except ScrapeError:
            raise
        except Exception as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}") from exc
        if markup is None:
            raise FetchError(f"Fetcher returned no data for {url}")
        return markup

    def _locate(self, markup: bytes) -> str:
        try:
            return locate_recipe_block(markup, query=self.query)
        except ScrapeError:
            raise
        except Exception as exc:
            raise HtmlParseError(f"Failed to query the page markup: {exc}") from exc


def scrape_recipe(url: str) -> CanonicalRecipe:
    """Scrape `url` with the default requests fetcher and BeautifulSoup query."""
    return RecipeScraper().scrape_recipe(url)
