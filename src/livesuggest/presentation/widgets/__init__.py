"""Textual widgets hosting the suggestion controller."""

from .results_list import ResultRow, SuggestResults
from .suggest_input import SuggestInput
from .suggestion_box import SuggestionBox, TimerHandle

__all__ = [
    "ResultRow",
    "SuggestResults",
    "SuggestInput",
    "SuggestionBox",
    "TimerHandle",
]
