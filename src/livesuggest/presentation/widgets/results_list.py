"""
SuggestResults - the result list shown under the input.

Each rendered node becomes a ResultRow carrying the node's classes, so the
highlighted/disabled/empty states can be styled from CSS. Rows report pointer
activity as messages; the owning SuggestionBox forwards them to the
controller.
"""

from __future__ import annotations

from typing import Optional

from textual import events
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Static

from livesuggest.application.nodes import RenderNode
from livesuggest.domain.types import ClassNames
from livesuggest.presentation.rich_render import node_to_text


class ResultRow(Static):
    """One rendered result."""

    class Hovered(Message):
        """Pointer entered the row."""

        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    class Pressed(Message):
        """Mouse button went down on the row."""

        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(self, node: RenderNode, index: int, class_names: ClassNames) -> None:
        super().__init__(node_to_text(node, class_names), classes=" ".join(node.classes), markup=False)
        self.node = node
        self.index = index

    def sync_classes(self) -> None:
        """Mirror the node's current classes (highlight changes mutate them in place)."""
        self.set_classes(" ".join(self.node.classes))

    def on_enter(self, event: events.Enter) -> None:
        self.post_message(self.Hovered(self.index))

    def on_mouse_down(self, event: events.MouseDown) -> None:
        event.stop()
        self.post_message(self.Pressed(self.index))


class SuggestResults(VerticalScroll, can_focus=False):
    """Scrollable list of result rows; never takes focus away from the input."""

    nodes: reactive[list[RenderNode]] = reactive(list, recompose=True, always_update=True)

    def __init__(self, class_names: Optional[ClassNames] = None, **kwargs) -> None:
        self.class_names = class_names or ClassNames()
        super().__init__(**kwargs)

    def compose(self) -> ComposeResult:
        for index, node in enumerate(self.nodes):
            yield ResultRow(node, index, self.class_names)

    def sync_classes(self) -> None:
        for row in self.query(ResultRow):
            row.sync_classes()

    def scroll_to_index(self, index: int) -> None:
        rows = list(self.query(ResultRow))
        if 0 <= index < len(rows):
            self.scroll_to_widget(rows[index], animate=False)
