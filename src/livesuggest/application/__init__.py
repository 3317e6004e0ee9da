"""
Suggestion logic: search term extraction, debounced fetching, rendering,
highlighting and the navigation/selection controller.
"""

from .controller import SuggestionController
from .highlighter import highlight_nodes, highlight_search_term
from .nodes import RenderNode, parse_markup
from .renderer import render_results
from .scheduler import DebouncedFetchScheduler
from .sources import StaticSource, default_fetch, load_items
from .trigger import extract_search_term, replace_triggered_word

__all__ = [
    "SuggestionController",
    "highlight_nodes",
    "highlight_search_term",
    "RenderNode",
    "parse_markup",
    "render_results",
    "DebouncedFetchScheduler",
    "StaticSource",
    "default_fetch",
    "load_items",
    "extract_search_term",
    "replace_triggered_word",
]
