"""
Derive the search term from the raw input text.

Without a trigger character the whole input is the search term. With one,
only the word under the cursor counts, and only when it starts with the
trigger character (``@ka`` in ``"hi @ka"``).
"""

from __future__ import annotations

from typing import Optional

BOUNDARIES = (" ", "\n")


def _last_boundary(text: str, reference: int) -> int:
    """Index of the nearest boundary at or before ``reference``, -1 if none."""
    return max(text.rfind(boundary, 0, reference + 1) for boundary in BOUNDARIES)


def _next_boundary(text: str, reference: int) -> int:
    """Index of the nearest boundary at or after ``reference``, ``len(text)`` if none."""
    found = [index for index in (text.find(boundary, reference) for boundary in BOUNDARIES) if index > -1]
    return min(found) if found else len(text)


def word_span(full_text: str, cursor_offset: int) -> tuple[int, int]:
    """Start and end offsets of the whitespace/newline delimited word at the cursor.

    When the character before the cursor is itself a boundary the span is
    empty (start > end).
    """
    # a cursor at offset 0 scans from the start of the text
    reference = max(cursor_offset - 1, 0)
    return _last_boundary(full_text, reference) + 1, _next_boundary(full_text, reference)


def triggered_word(full_text: str, cursor_offset: int) -> str:
    """Return the word under the cursor."""
    start, end = word_span(full_text, cursor_offset)
    return full_text[start:end]


def extract_search_term(full_text: str, cursor_offset: int, trigger_char: Optional[str]) -> str:
    """
    Return the search term for the current input state.

    Args:
        full_text: Complete text of the input
        cursor_offset: Cursor (selection start) offset
        trigger_char: Character that must prefix the word under the cursor,
            or ``None`` to search with the whole input

    Returns:
        The search term, or an empty string if the word under the cursor
        is not prefixed by ``trigger_char``
    """
    if not trigger_char:
        return full_text

    word = triggered_word(full_text, cursor_offset)
    return word if word[:1] == trigger_char else ""


def replace_triggered_word(full_text: str, cursor_offset: int, replacement: str) -> tuple[str, int]:
    """
    Replace the word under the cursor with ``replacement``.

    Returns:
        The new text and the cursor offset right after the replacement
    """
    start, end = word_span(full_text, cursor_offset)
    if start > end:
        start = end = cursor_offset
    return full_text[:start] + replacement + full_text[end:], start + len(replacement)
