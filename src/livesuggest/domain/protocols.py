"""Protocols describing the collaborators of the suggestion controller."""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence

from .types import ResultItem

__all__ = [
    "Anchor",
    "Cancellable",
    "CallLater",
    "FetchDone",
    "FetchFn",
    "OnItem",
]

# Completion callback handed to a data source. A falsy argument means "ignore".
FetchDone = Callable[[Optional[Sequence[ResultItem]]], None]

# Data source: receives the search term and must eventually call ``done``
FetchFn = Callable[[str, FetchDone], None]

# Selection callback, receives the rendered node of the chosen result
OnItem = Callable[[Any], None]


class Anchor(Protocol):
    """The text input the suggestions are attached to.

    Hosts expose the live text value, the cursor offset and whether the
    input currently owns focus.
    """

    value: str
    cursor_position: int

    @property
    def has_focus(self) -> bool:
        """Return ``True`` while the input has keyboard focus."""
        ...


class Cancellable(Protocol):
    """Handle for a scheduled callback."""

    def cancel(self) -> None:
        """Prevent the callback from running if it has not fired yet."""
        ...


# Timer factory: ``call_later(delay_seconds, callback) -> Cancellable``
CallLater = Callable[[float, Callable[[], None]], Cancellable]
