"""Application settings loaded from environment (and .env).

This module provides a small Settings holder backed by environment variables.
Keep this file simple and import `settings` from other modules.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
import logging
import os


def _get(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name)
    if v is None:
        return default
    return v


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        # left for validate_settings() to report
        return float("nan")


@dataclass
class Settings:
    # Defaults are read from the environment when an instance is built.

    # HTTP fetch
    USER_AGENT: str = field(
        default_factory=lambda: _get(
            "RECIPE_SCRAPER_USER_AGENT", "recipe-jsonld-scraper/1.0 (+https://example.com)"
        )
    )
    REQUEST_TIMEOUT: float = field(default_factory=lambda: _get_float("RECIPE_SCRAPER_TIMEOUT", 20.0))

    # BeautifulSoup tree builder; html.parser ships with Python and is lenient
    HTML_PARSER: str = field(default_factory=lambda: _get("RECIPE_SCRAPER_HTML_PARSER", "html.parser"))

    # Logging configuration
    # LOG_LEVEL can be DEBUG, INFO, WARNING, ERROR, or CRITICAL
    LOG_LEVEL: str = field(default_factory=lambda: _get("LOG_LEVEL", "INFO"))
    # Optional path to write logs to a file; if unset, logs go to stderr
    LOG_FILE: str | None = field(default_factory=lambda: _get("LOG_FILE", None))


settings = Settings()


def reload_settings() -> Settings:
    """Re-read the environment into the shared `settings` object.

    Updated in place so modules that imported `settings` see the new values.
    """
    fresh = Settings()
    for f in fields(Settings):
        setattr(settings, f.name, getattr(fresh, f.name))
    return settings


def validate_settings(current: Settings | None = None) -> None:
    """Validate settings and raise a helpful RuntimeError if any are unusable.

    Called by the CLI after the .env file has been loaded.
    """
    current = current or settings
    problems = []
    timeout = current.REQUEST_TIMEOUT
    if not isinstance(timeout, (int, float)) or timeout != timeout or timeout <= 0:
        problems.append(f"RECIPE_SCRAPER_TIMEOUT must be a positive number of seconds (got {timeout!r})")
    if not isinstance(logging.getLevelName(str(current.LOG_LEVEL).upper()), int):
        problems.append(f"LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL (got {current.LOG_LEVEL!r})")
    if problems:
        msg = (
            "Invalid configuration: "
            + "; ".join(problems)
            + "\nPlease fix them in your .env or environment and try again."
        )
        raise RuntimeError(msg)
