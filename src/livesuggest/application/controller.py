"""
Suggestion controller: the state machine behind a live suggestion list.

The controller owns the search term, the current results and their render,
the highlighted index and the selected/displayed flags. Hosts feed it input,
keyboard, focus and pointer/touch notifications through the ``handle_*``
methods and mirror its state by subscribing to the events it publishes on
its :class:`~livesuggest.domain.events.EventBus`.

States:
    Idle -> Loading (fetch in flight) -> Displayed -> Idle (clear/hide).
    While Displayed, an item is highlighted whenever ``result_index != -1``.
"""

from __future__ import annotations

from typing import Iterable, Optional

from livesuggest.domain.config import SuggestConfig
from livesuggest.domain.events import (
    EventBus,
    LoadingChanged,
    ResultHighlighted,
    ResultSelected,
    ResultsRendered,
    ResultsVisibilityChanged,
)
from livesuggest.domain.protocols import Anchor, CallLater
from livesuggest.domain.types import SPECIAL_KEYS, ClassNames, Direction, InputState, ResultItem, SpecialKey
from livesuggest.logger import get_logger

from .highlighter import highlight_nodes
from .nodes import RenderNode
from .renderer import render_results
from .scheduler import DebouncedFetchScheduler
from .sources import default_fetch
from .trigger import extract_search_term, replace_triggered_word

logger = get_logger("controller")


class SuggestionController:
    """Derives search terms, fetches results and drives navigation/selection."""

    def __init__(
        self,
        anchor: Anchor,
        config: Optional[SuggestConfig] = None,
        *,
        event_bus: Optional[EventBus] = None,
        scheduler: Optional[DebouncedFetchScheduler] = None,
        call_later: Optional[CallLater] = None,
    ) -> None:
        """
        Args:
            anchor: The input the suggestions are attached to
            config: Widget configuration (defaults apply when omitted)
            event_bus: Bus the display notifications are published on
            scheduler: Debounce scheduler; built from ``call_later`` if omitted
            call_later: Timer factory for the default scheduler
        """
        self.anchor = anchor
        self.config = config or SuggestConfig()
        self.classes = ClassNames().with_extra(self.config.extra_classes)
        self.event_bus = event_bus or EventBus()
        self.scheduler = scheduler or DebouncedFetchScheduler(call_later)

        self._fetch_fn = self.config.fetch or default_fetch
        self._on_item = self.config.on_item or self.default_on_item

        self.search_term = ""
        self.results: list[ResultItem] = []
        self.rendered: list[RenderNode] = []
        self.result_index = -1
        self.is_result_selected = False
        self.are_results_displayed = False
        self.is_loading = False
        self.has_touch_moved = False
        self._generation = 0
        self._applying_selection = False
        self._written_state: Optional[InputState] = None

        logger.debug(
            f"SuggestionController ready (threshold={self.config.threshold}, limit={self.config.limit}, "
            f"debounce={self.config.debounce_time}ms, trigger={self.config.trigger_char!r})"
        )

    @property
    def wrapper_classes(self) -> list[str]:
        """Classes the host wrapper should carry for the current state."""
        classes = self.classes.wrapper.split()
        if self.is_loading:
            classes.extend(self.classes.loading.split())
        if self.are_results_displayed:
            classes.extend(self.classes.visible.split())
        return classes

    @property
    def highlighted_node(self) -> Optional[RenderNode]:
        return self._node_at(self.result_index)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def process_input(self, raw_text: str, cursor_offset: int) -> bool:
        """
        Derive the search term and fetch or clear accordingly.

        Returns:
            ``True`` if the search term changed
        """
        next_search_term = extract_search_term(raw_text, cursor_offset, self.config.trigger_char)
        if next_search_term == self.search_term:
            return False

        self.search_term = next_search_term
        self.is_result_selected = False

        if self.search_term and len(self.search_term) >= self.config.threshold:
            self.search()
        else:
            self._abandon_pending_search()
            self.clear_results()
        return True

    def handle_typing(self, state: InputState) -> bool:
        """
        Input-changed notification carrying the anchor's text and cursor.

        Ignored while ``on_item`` is writing the selected value into the anchor,
        and once more for the change notification reporting exactly that write.
        """
        if self._applying_selection:
            return False
        written, self._written_state = self._written_state, None
        if state == written:
            return False
        return self.process_input(state.text, state.cursor_position)

    def _abandon_pending_search(self) -> None:
        self.scheduler.cancel()
        if self.config.discard_stale_results:
            self._generation += 1
        self._set_loading(False)

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    def search(self) -> None:
        """Mark loading and schedule a fetch for the current search term."""
        self._set_loading(True)
        self.scheduler.schedule(self.search_term, self.fetch, self.config.debounce_time)

    def fetch(self, search_term: Optional[str] = None) -> int:
        """
        Hand the search term to the data source.

        Returns:
            The generation number tagging this request
        """
        term = self.search_term if search_term is None else search_term
        self._generation += 1
        generation = self._generation

        def done(results: Optional[Iterable[ResultItem]] = None) -> None:
            self.handle_fetch_done(results, generation)

        logger.debug(f"Fetching results for {term!r} (generation={generation})")
        self._fetch_fn(term, done)
        return generation

    def handle_fetch_done(self, results: Optional[Iterable[ResultItem]], generation: Optional[int] = None) -> None:
        """
        Completion of a fetch.

        ``None``/``False`` results are ignored apart from clearing the loading
        indicator. When stale results are discarded, completions of any
        request other than the latest one are dropped entirely.
        """
        if (
            generation is not None
            and self.config.discard_stale_results
            and generation != self._generation
        ):
            logger.info(f"Discarding stale results (generation={generation}, latest={self._generation})")
            return

        if results is not None and results is not False:
            self.ingest_results(results)
        self._set_loading(False)

    def ingest_results(self, items: Iterable[ResultItem]) -> None:
        """Store (limited) results and show or clear them."""
        items = list(items)
        limit = self.config.limit
        self.results = items[:limit] if limit > 0 else items
        logger.debug(f"Ingested {len(self.results)} of {len(items)} results for {self.search_term!r}")

        if (self.config.templates.empty or self.results) and self.anchor.has_focus:
            if self.are_results_displayed:
                self.populate_results()
            else:
                self.show_results()
        else:
            self.clear_results()

        self._set_loading(False)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def populate_results(self) -> list[RenderNode]:
        """Render the current results, reset the index and apply force-selection."""
        nodes = render_results(self.results, self.config.templates, self.classes)
        if self.results and self.config.search_term_highlight:
            nodes = highlight_nodes(nodes, self.search_term, self.classes.search_term)

        self.rendered = nodes
        self.result_index = -1
        self.event_bus.publish(ResultsRendered(nodes=nodes))

        if self.config.force_selection and self.change_index(Direction.DOWN):
            self.highlight_result()
        return nodes

    def show_results(self) -> list[RenderNode]:
        """Render and reveal the results. Does nothing while already displayed."""
        if self.are_results_displayed:
            return self.rendered

        if self.config.on_before_show is not None:
            self.config.on_before_show()

        self.populate_results()
        self.are_results_displayed = True
        self.event_bus.publish(ResultsVisibilityChanged(visible=True))
        logger.debug(f"Showing {len(self.rendered)} result node(s)")
        return self.rendered

    def hide_results(self) -> None:
        """Hide the results, keeping them and the index for a later show."""
        self.are_results_displayed = False
        self.event_bus.publish(ResultsVisibilityChanged(visible=False))

    def clear_results(self) -> None:
        self.results = []
        self.rendered = []
        self.result_index = -1
        self.event_bus.publish(ResultsRendered(nodes=[]))
        self.hide_results()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def change_index(self, direction: Direction | str) -> bool:
        """
        Move the highlighted index one step, wrapping around and skipping
        disabled items.

        Returns:
            Whether the index ended up different from where it started

        Raises:
            ValueError: If ``direction`` is not ``"up"`` or ``"down"``
        """
        direction = Direction(direction)
        count = len(self.results)
        previous_index = self.result_index

        if not count or self._every_item_disabled():
            return False

        step = self._decrease_index if direction is Direction.UP else self._increase_index
        step()
        # Bounded so a lone enabled item at the boundary can't loop forever
        skipped = 0
        while self._is_disabled(self.result_index) and skipped < count:
            step()
            skipped += 1

        return self.result_index != previous_index

    def _increase_index(self) -> None:
        self.result_index += 1
        if self.result_index >= len(self.results):
            self.result_index = 0

    def _decrease_index(self) -> None:
        if self.result_index <= 0:
            self.result_index = len(self.results)
        self.result_index -= 1

    def _node_at(self, index: int) -> Optional[RenderNode]:
        if 0 <= index < len(self.rendered):
            return self.rendered[index]
        return None

    def _is_disabled(self, index: int) -> bool:
        node = self._node_at(index)
        if node is not None:
            return node.has_class(self.classes.disabled)
        if 0 <= index < len(self.results):
            return self.results[index].get("disabled") is True
        return False

    def _every_item_disabled(self) -> bool:
        return all(self._is_disabled(index) for index in range(len(self.results)))

    def highlight_result(self) -> None:
        """Mark the node at ``result_index`` as highlighted unless it is disabled."""
        for node in self.rendered:
            node.remove_class(self.classes.highlighted)

        current = self._node_at(self.result_index)
        highlighted_index = -1
        if current is not None and not self._is_disabled(self.result_index):
            current.add_class(self.classes.highlighted)
            highlighted_index = self.result_index

        self.event_bus.publish(ResultHighlighted(index=highlighted_index))

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_result(self) -> bool:
        """
        Commit the highlighted result through ``on_item``.

        Returns:
            ``True`` if an item was selected (disabled items never are)
        """
        node = self._node_at(self.result_index)
        if node is None or self.result_index >= len(self.results) or self._is_disabled(self.result_index):
            return False

        index = self.result_index
        self.is_result_selected = True
        self._applying_selection = True
        try:
            self._on_item(node)
        finally:
            self._applying_selection = False
        # on_item may have rewritten the anchor
        self.search_term = self.anchor.value
        self._written_state = InputState(self.anchor.value, self.anchor.cursor_position)
        logger.info(f"Selected result {index}: {node.attrs.get('data-value', node.text_content)!r}")
        self.event_bus.publish(ResultSelected(index=index, node=node))
        return True

    def default_on_item(self, node: RenderNode) -> None:
        """
        Write the node's ``data-value`` into the anchor.

        With a trigger character only the triggered word under the cursor is
        replaced; otherwise the whole value is.
        """
        value = node.attrs.get("data-value", node.text_content)
        if not self.config.trigger_char:
            self.anchor.value = value
            self.anchor.cursor_position = len(value)
            return

        text, cursor = replace_triggered_word(self.anchor.value, self.anchor.cursor_position, value)
        self.anchor.value = text
        self.anchor.cursor_position = cursor

    # ------------------------------------------------------------------
    # Host notifications
    # ------------------------------------------------------------------

    def handle_special_key(self, key: SpecialKey | str | int) -> bool:
        """
        Keyboard notification.

        Args:
            key: Key name (``"up"``, ``"escape"`` ...) or DOM key code

        Returns:
            ``True`` if the host should suppress the key's default behaviour
        """
        special = key if isinstance(key, SpecialKey) else SPECIAL_KEYS.get(key)
        if special is None or not self.are_results_displayed:
            return False

        is_result_highlighted = self.result_index > -1
        suppress = False
        changed = False

        if special in (SpecialKey.UP, SpecialKey.DOWN):
            if self.results:
                suppress = True
                changed = self.change_index(special.value)
        elif special in (SpecialKey.LEFT, SpecialKey.RIGHT):
            if self.config.use_horizontal_nav_keys and is_result_highlighted:
                suppress = True
                changed = self.change_index(Direction.UP if special is SpecialKey.LEFT else Direction.DOWN)
        elif special in (SpecialKey.ENTER, SpecialKey.TAB):
            if is_result_highlighted:
                suppress = True
                self.select_result()
                self.hide_results()
        elif special is SpecialKey.ESC:
            suppress = True
            if self.config.force_selection:
                self.anchor.value = ""
            self.clear_results()

        if changed:
            self.highlight_result()
        return suppress

    def handle_blur(self) -> None:
        """Focus left the anchor: enforce force-selection and hide."""
        if self.config.force_selection:
            if self.anchor.value != self.search_term:
                self.anchor.value = self.search_term
            if not self.is_result_selected:
                self.anchor.value = ""

        self.hide_results()

    def handle_focus(self) -> bool:
        """Focus entered the anchor: search again for the text it already holds."""
        if not self.anchor.value:
            return False

        if not self.search_term:
            self.search_term = extract_search_term(
                self.anchor.value, self.anchor.cursor_position, self.config.trigger_char
            )
            if not self.search_term:
                return False

        self.search()
        return True

    def handle_highlight(self, index: int) -> None:
        """Pointer entered, or a touch started on, the result at ``index``."""
        if not 0 <= index < len(self.results):
            return
        self.result_index = index
        self.highlight_result()
        self.has_touch_moved = False

    def handle_touch_move(self) -> None:
        self.has_touch_moved = True

    def handle_select(self, index: Optional[int] = None) -> bool:
        """
        Pointer press, or touch end, on a result.

        A touch that moved since it started is a scroll, not a tap, and is
        ignored.
        """
        if self.has_touch_moved:
            return False

        if index is not None and 0 <= index < len(self.results):
            self.result_index = index
        selected = self.select_result()
        self.clear_results()
        return selected

    handle_touch_start = handle_highlight
    handle_touch_end = handle_select

    def close(self) -> None:
        """Cancel a pending debounced fetch; call when the host goes away."""
        if self.scheduler.cancel():
            self._set_loading(False)

    def _set_loading(self, loading: bool) -> None:
        if self.is_loading == loading:
            return
        self.is_loading = loading
        self.event_bus.publish(LoadingChanged(loading=loading))
