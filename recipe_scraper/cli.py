"""Typer CLI for recipe-jsonld-scraper (scrape, blocks)."""

from __future__ import annotations

import json
import logging

import typer
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from recipe_scraper.errors import ScrapeError
from recipe_scraper.ingest.fetch import fetch_url
from recipe_scraper.ingest.html_query import iter_jsonld_scripts
from recipe_scraper.models.recipe_schema import CanonicalRecipe
from recipe_scraper.orchestrate.run import RecipeScraper
from recipe_scraper.settings import reload_settings, settings, validate_settings

app = typer.Typer()
console = Console()


def configure_logging() -> None:
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    handlers = [logging.StreamHandler()]
    if settings.LOG_FILE:
        handlers.append(logging.FileHandler(settings.LOG_FILE))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        handlers=handlers,
    )
    # Quiet noisy third-party loggers while keeping our app logs
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)


@app.callback()
def main() -> None:
    """Extract schema.org Recipe metadata from web pages."""
    # .env is looked up from the working directory, then copied into settings
    load_dotenv(find_dotenv(usecwd=True))
    reload_settings()
    try:
        validate_settings()
    except RuntimeError as e:
        console.print(f"[red]Error (config):[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(code=1)
    configure_logging()


def _recipe_table(recipe: CanonicalRecipe) -> Table:
    table = Table(title=recipe.name or "(unnamed recipe)", show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    for label, value in (
        ("Author", recipe.author),
        ("Description", recipe.description),
        ("Yield", ", ".join(recipe.recipe_yield or []) or None),
        ("Prep time", recipe.prep_time),
        ("Cook time", recipe.cook_time),
        ("Total time", recipe.total_time),
        ("Images", "\n".join(recipe.images or []) or None),
        ("Ingredients", "\n".join(recipe.ingredients or []) or None),
    ):
        table.add_row(label, escape(value) if value is not None else "-")
    steps = [
        f"{i}. {step.text or step.name or ''}".rstrip()
        for i, step in enumerate(recipe.instructions or [], start=1)
    ]
    table.add_row("Instructions", escape("\n".join(steps)) or "-")
    return table


def _print_error(e: ScrapeError) -> None:
    stage = e.stage.value if e.stage else "scrape"
    console.print(f"[red]Error ({stage}):[/red] {escape(str(e))}", highlight=False)


@app.command()
def scrape(
    url: str,
    as_json: bool = typer.Option(False, "--json", help="Print the recipe as JSON."),
):
    """Scrape a single URL and print its canonical recipe."""
    try:
        recipe = RecipeScraper().scrape_recipe(url)
    except ScrapeError as e:
        _print_error(e)
        raise typer.Exit(code=1)
    if as_json:
        typer.echo(json.dumps(recipe.model_dump(by_alias=True), ensure_ascii=False, indent=2))
    else:
        console.print(_recipe_table(recipe))


@app.command()
def blocks(
    url: str,
    limit: int = typer.Option(10, help="Maximum number of blocks to show."),
    width: int = typer.Option(1000, help="Characters shown per block."),
):
    """List the raw application/ld+json blocks found on a page."""
    try:
        scripts = iter_jsonld_scripts(fetch_url(url))
    except ScrapeError as e:
        _print_error(e)
        raise typer.Exit(code=1)
    console.print(f"Found {len(scripts)} JSON-LD blocks")
    for i, text in enumerate(scripts[:limit]):
        console.print(f"--- block {i}")
        try:
            shown = json.dumps(json.loads(text), indent=2, ensure_ascii=False)
        except (ValueError, RecursionError):
            shown = text.strip()
        console.print(shown[:width], markup=False, highlight=False)


if __name__ == "__main__":
    app()
