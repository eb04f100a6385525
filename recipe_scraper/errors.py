"""Scrape pipeline stages and the exceptions each stage can raise.

Every exception derives from ScrapeError and records the stage it came from,
so callers can tell a network problem from a page without recipe metadata
without inspecting messages.
"""

from __future__ import annotations

from enum import Enum


class ScrapeStage(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    LOCATING = "locating"
    DECODING = "decoding"
    DONE = "done"


class ScrapeError(Exception):
    """Base exception for scraping errors."""

    stage: ScrapeStage | None = None

    def __init__(self, message: str, stage: ScrapeStage | None = None):
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class FetchError(ScrapeError):
    """Raised when the page bytes could not be obtained.

    Covers malformed URLs, connection errors, timeouts and HTTP error
    statuses reported by the fetcher.
    """

    stage = ScrapeStage.FETCHING


class HtmlParseError(ScrapeError):
    """Raised when the HTML parser or an injected query fails on the markup."""

    stage = ScrapeStage.LOCATING


class JsonLdSyntaxError(ScrapeError):
    """Raised when an application/ld+json script does not contain valid JSON."""

    stage = ScrapeStage.LOCATING

    def __init__(self, message: str, block_index: int | None = None):
        super().__init__(message)
        self.block_index = block_index


class NoRecipeMetadataError(ScrapeError):
    """Raised when no JSON-LD block on the page describes a Recipe."""

    stage = ScrapeStage.LOCATING


class StructuralDecodeError(ScrapeError):
    """Raised when the located block is not a decodable JSON object."""

    stage = ScrapeStage.DECODING


class FieldShapeMismatchError(ScrapeError):
    """Raised when a present field has none of its accepted JSON shapes."""

    stage = ScrapeStage.DECODING

    def __init__(self, field: str, expected: str, actual: str):
        super().__init__(f"{field}: expected {expected}, got {actual}")
        self.field = field
        self.expected = expected
        self.actual = actual
