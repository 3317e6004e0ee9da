"""
SuggestInput - the input field suggestions are attached to.

Keys, focus and blur are forwarded to the controller before the regular
Input behaviour runs, so navigation keys can be swallowed while the result
list is open.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from textual import events
from textual.widgets import Input

from livesuggest.logger import get_logger

if TYPE_CHECKING:
    from livesuggest.application.controller import SuggestionController

logger = get_logger("suggest_input")


class SuggestInput(Input):
    """Input implementing the anchor protocol (value, cursor_position, has_focus)."""

    BORDER_TITLE = "Search"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.controller: Optional["SuggestionController"] = None

    async def _on_key(self, event: events.Key) -> None:
        """Give the controller the first look at navigation keys."""
        if self.controller is not None and self.controller.handle_special_key(event.key):
            logger.debug(f"Key {event.key!r} consumed by suggestions")
            event.prevent_default()
            event.stop()
            return
        await super()._on_key(event)

    def on_focus(self, event: events.Focus) -> None:
        if self.controller is not None:
            self.controller.handle_focus()

    def on_blur(self, event: events.Blur) -> None:
        if self.controller is not None:
            self.controller.handle_blur()
