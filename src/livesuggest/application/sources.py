"""
In-memory data sources.

A data source is any callable ``fetch(search_term, done)`` that eventually
calls ``done`` with a list of result items. These implementations answer
synchronously from a fixed list.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from livesuggest.domain.protocols import FetchDone
from livesuggest.domain.types import ResultItem
from livesuggest.logger import get_logger
from livesuggest.utils import read_json_file

logger = get_logger("sources")

DEMO_ITEMS: list[dict[str, Any]] = [
    {"text": "Jon"},
    {"text": "Bon", "disabled": True},
    {"text": "Jovi"},
]


class StaticSource:
    """Case-insensitive substring match on the ``text`` field of fixed items."""

    def __init__(self, items: Iterable[Mapping[str, Any]], trigger_char: Optional[str] = None) -> None:
        """
        Args:
            items: Result items, each with at least a ``text`` field
            trigger_char: Prefix stripped from search terms before matching
        """
        self._items = [dict(item) for item in items]
        self._trigger_char = trigger_char

    def matches(self, search_term: str) -> list[ResultItem]:
        if self._trigger_char and search_term.startswith(self._trigger_char):
            search_term = search_term[len(self._trigger_char) :]
        needle = search_term.lower()
        return [item for item in self._items if needle in str(item.get("text", "")).lower()]

    def __call__(self, search_term: str, done: FetchDone) -> None:
        results = self.matches(search_term)
        logger.debug(f"StaticSource matched {len(results)}/{len(self._items)} items for {search_term!r}")
        done(results)


def default_fetch(search_term: str, done: FetchDone) -> None:
    """Data source used when none is configured."""
    StaticSource(DEMO_ITEMS)(search_term, done)


def load_items(path: str | Path) -> list[dict[str, Any]]:
    """
    Load result items from a JSON file.

    The file may hold a list of objects, or a list of strings which are
    turned into ``{"text": value}`` items.

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If the document is not a list
    """
    data = read_json_file(path)
    if not isinstance(data, list):
        raise ValueError(f"Items file {path} must contain a JSON list")

    items = [entry if isinstance(entry, dict) else {"text": str(entry)} for entry in data]
    logger.info(f"Loaded {len(items)} items from {path}")
    return items
