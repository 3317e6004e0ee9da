"""
SuggestionBox - wraps a SuggestInput and its result list around a
SuggestionController.

The box is the wrapper element: it carries the wrapper, loading and visible
classes and translates Textual events into controller handler calls, then
mirrors the controller's events back onto the widgets.
"""

from __future__ import annotations

from typing import Callable, Optional

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.timer import Timer
from textual.widgets import Input
from textual.widgets.input import Selection

from livesuggest.application.controller import SuggestionController
from livesuggest.domain.config import SuggestConfig
from livesuggest.domain.events import (
    EventBus,
    LoadingChanged,
    ResultHighlighted,
    ResultSelected,
    ResultsRendered,
    ResultsVisibilityChanged,
)
from livesuggest.domain.types import InputState
from livesuggest.logger import get_logger
from livesuggest.presentation.widgets.results_list import ResultRow, SuggestResults
from livesuggest.presentation.widgets.suggest_input import SuggestInput

logger = get_logger("suggestion_box")


class TimerHandle:
    """Adapts a Textual Timer to the cancellable handle the scheduler expects."""

    def __init__(self, timer: Timer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        self._timer.stop()


def anchor_attributes(el: str) -> dict[str, str]:
    """Id or classes for the anchor input derived from a simple ``#id``/``.class`` selector."""
    if el.startswith("#") and len(el) > 1:
        return {"id": el[1:]}
    if el.startswith(".") and len(el) > 1:
        return {"classes": el[1:].replace(".", " ")}
    return {}


class SuggestionBox(Vertical):
    """Input with live, keyboard and pointer navigable suggestions."""

    DEFAULT_CSS = """
    SuggestionBox {
        height: auto;
    }
    SuggestionBox SuggestResults {
        display: none;
        height: auto;
        max-height: 12;
        border: round $primary;
    }
    SuggestionBox.is-visible SuggestResults {
        display: block;
    }
    SuggestionBox.is-loading SuggestInput {
        border: tall $warning;
    }
    SuggestionBox ResultRow {
        padding: 0 1;
    }
    SuggestionBox ResultRow.autocomplete__list__item--highlighted {
        background: $accent;
        color: $text;
    }
    SuggestionBox ResultRow.autocomplete__list__item--disabled {
        color: $text-muted;
    }
    """

    def __init__(
        self,
        config: Optional[SuggestConfig] = None,
        *,
        event_bus: Optional[EventBus] = None,
        placeholder: str = "Start typing...",
        on_selected: Optional[Callable[[ResultSelected], None]] = None,
        **kwargs,
    ) -> None:
        """
        Args:
            config: Suggestion configuration; ``config.el`` names the anchor input
            event_bus: Bus shared with other listeners (a private one is created if omitted)
            placeholder: Placeholder shown in the input
            on_selected: Called with every ResultSelected event
        """
        self.config = config or SuggestConfig()
        self.event_bus = event_bus or EventBus()
        self._placeholder = placeholder
        self._on_selected = on_selected
        self.controller: Optional[SuggestionController] = None
        super().__init__(**kwargs)

    def compose(self) -> ComposeResult:
        yield SuggestInput(placeholder=self._placeholder, **anchor_attributes(self.config.el))
        yield SuggestResults()

    def on_mount(self) -> None:
        try:
            anchor = self.query_one(self.config.el, SuggestInput)
        except NoMatches:
            anchor = self.query_one(SuggestInput)

        self.controller = SuggestionController(
            anchor,
            self.config,
            event_bus=self.event_bus,
            call_later=self._call_later,
        )
        anchor.controller = self.controller
        anchor.add_class(*self.controller.classes.input.split())

        results = self.query_one(SuggestResults)
        results.class_names = self.controller.classes
        results.add_class(*self.controller.classes.results.split())
        self.add_class(*self.controller.classes.wrapper.split())

        self.event_bus.subscribe(ResultsRendered, self._on_results_rendered)
        self.event_bus.subscribe(ResultsVisibilityChanged, self._on_visibility_changed)
        self.event_bus.subscribe(LoadingChanged, self._on_loading_changed)
        self.event_bus.subscribe(ResultHighlighted, self._on_result_highlighted)
        self.event_bus.subscribe(ResultSelected, self._on_result_selected)

        self.watch(anchor, "selection", self._on_selection_changed, init=False)
        logger.info(f"SuggestionBox mounted (anchor={self.config.el!r})")

    def on_unmount(self) -> None:
        if self.controller is not None:
            self.controller.close()
        self.event_bus.unsubscribe(ResultsRendered, self._on_results_rendered)
        self.event_bus.unsubscribe(ResultsVisibilityChanged, self._on_visibility_changed)
        self.event_bus.unsubscribe(LoadingChanged, self._on_loading_changed)
        self.event_bus.unsubscribe(ResultHighlighted, self._on_result_highlighted)
        self.event_bus.unsubscribe(ResultSelected, self._on_result_selected)

    def _call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        return TimerHandle(self.set_timer(delay, callback))

    # Textual -> controller

    def on_input_changed(self, event: Input.Changed) -> None:
        if self.controller is None:
            return
        anchor = self.controller.anchor
        self.controller.handle_typing(InputState(event.value, anchor.cursor_position))

    def _on_selection_changed(self, selection: Selection) -> None:
        if self.controller is None:
            return
        self.controller.handle_typing(InputState(self.controller.anchor.value, selection.end))

    def on_result_row_hovered(self, message: ResultRow.Hovered) -> None:
        message.stop()
        if self.controller is not None:
            self.controller.handle_highlight(message.index)

    def on_result_row_pressed(self, message: ResultRow.Pressed) -> None:
        message.stop()
        if self.controller is not None:
            self.controller.handle_select(message.index)

    # controller -> Textual

    def _on_results_rendered(self, event: ResultsRendered) -> None:
        self.query_one(SuggestResults).nodes = list(event.nodes)

    def _on_visibility_changed(self, event: ResultsVisibilityChanged) -> None:
        self.set_class(event.visible, *self.controller.classes.visible.split())

    def _on_loading_changed(self, event: LoadingChanged) -> None:
        self.set_class(event.loading, *self.controller.classes.loading.split())

    def _on_result_highlighted(self, event: ResultHighlighted) -> None:
        results = self.query_one(SuggestResults)
        results.sync_classes()
        results.scroll_to_index(event.index)

    def _on_result_selected(self, event: ResultSelected) -> None:
        if self._on_selected is not None:
            self._on_selected(event)
