"""
Command line entry point.

``livesuggest demo`` runs the Textual demo app; ``livesuggest extract``
prints the search term derived from a piece of text and a cursor offset.
"""

import json
import os
from typing import Optional

import typer
from dotenv import load_dotenv
from pydantic import ValidationError

from livesuggest.application.sources import DEMO_ITEMS, StaticSource, load_items
from livesuggest.application.trigger import extract_search_term
from livesuggest.domain.config import SuggestConfig, load_config
from livesuggest.logger import get_logger, setup_logger

load_dotenv()

logger = get_logger("main")

cli = typer.Typer(
    name="livesuggest",
    help="Live, keyboard navigable suggestions for text inputs",
    add_completion=False,
)


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() in ("1", "true", "yes")


def build_config(
    config_path: Optional[str],
    items_path: Optional[str],
    trigger_char: Optional[str],
) -> SuggestConfig:
    """Assemble the demo configuration from an optional config file and CLI overrides."""
    items = load_items(items_path) if items_path else DEMO_ITEMS
    overrides = {} if trigger_char is None else {"trigger_char": trigger_char}

    config = load_config(config_path, **overrides) if config_path else SuggestConfig(**overrides)
    return config.model_copy(update={"fetch": StaticSource(items, trigger_char=config.trigger_char)})


@cli.command()
def demo(
    items: Optional[str] = typer.Option(None, "--items", help="JSON file holding the result items"),
    config: Optional[str] = typer.Option(
        os.getenv("LIVESUGGEST_CONFIG"),
        "--config",
        help="JSON configuration file",
    ),
    trigger_char: Optional[str] = typer.Option(
        None,
        "--trigger-char",
        help="Only search the word under the cursor when it starts with this character",
    ),
    debug: bool = typer.Option(
        _env_flag("LIVESUGGEST_DEBUG"),
        "--debug",
        help="Enable debug logging",
    ),
) -> None:
    """Run the interactive suggestion demo."""
    setup_logger(log_level="DEBUG" if debug else "INFO")

    try:
        suggest_config = build_config(config, items, trigger_char)
    except (FileNotFoundError, json.JSONDecodeError, ValidationError, ValueError) as exc:
        typer.echo(f"❌ Error: {exc}", err=True)
        raise typer.Exit(code=1)

    # Imported here so `extract` doesn't pay for loading Textual
    from livesuggest.presentation.tui import SuggestApp

    logger.info("Starting livesuggest demo")
    SuggestApp(suggest_config).run()


@cli.command()
def extract(
    text: str = typer.Argument(..., help="Raw input text"),
    cursor: Optional[int] = typer.Option(None, "--cursor", help="Cursor offset (defaults to the end of the text)"),
    trigger_char: Optional[str] = typer.Option(None, "--trigger-char", help="Trigger character"),
) -> None:
    """Print the search term for TEXT at the cursor."""
    offset = len(text) if cursor is None else cursor
    typer.echo(extract_search_term(text, offset, trigger_char or None))


def run() -> None:
    cli()


if __name__ == "__main__":
    run()
