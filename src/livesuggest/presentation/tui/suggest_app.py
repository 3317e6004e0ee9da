"""
SuggestApp - demo Textual application for the suggestion widget.
"""

from typing import Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, RichLog

from livesuggest.domain.config import SuggestConfig
from livesuggest.domain.events import EventBus, ResultSelected
from livesuggest.logger import get_logger
from livesuggest.presentation.widgets import SuggestionBox

logger = get_logger("suggest_tui")


class SuggestApp(App):
    """
    Demo application.

    Layout:
    ┌─────────────────────────────┐
    │           Header            │
    ├─────────────────────────────┤
    │   SuggestionBox (input +    │
    │   live result list)         │
    ├─────────────────────────────┤
    │   Selection log             │
    ├─────────────────────────────┤
    │           Footer            │
    └─────────────────────────────┘
    """

    TITLE = "livesuggest"
    SUB_TITLE = "Live suggestions demo"

    CSS = """
    SuggestionBox {
        margin: 1 2 0 2;
    }
    #selections {
        margin: 0 2;
        height: 1fr;
        border: round $secondary;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
    ]

    def __init__(self, config: Optional[SuggestConfig] = None, event_bus: Optional[EventBus] = None):
        """
        Args:
            config: Suggestion configuration (fetch callable included)
            event_bus: Optional shared EventBus
        """
        super().__init__()
        self.config = config or SuggestConfig()
        self.event_bus = event_bus or EventBus()

    def compose(self) -> ComposeResult:
        yield Header()
        placeholder = (
            f"Type {self.config.trigger_char}word to search" if self.config.trigger_char else "Type to search"
        )
        yield SuggestionBox(self.config, event_bus=self.event_bus, placeholder=placeholder)
        yield RichLog(id="selections", markup=False, wrap=True)
        yield Footer()

    def on_mount(self) -> None:
        self.event_bus.subscribe(ResultSelected, self._log_selection)
        self.query_one(SuggestionBox).query_one("SuggestInput").focus()

    def _log_selection(self, event: ResultSelected) -> None:
        value = event.node.attrs.get("data-value", event.node.text_content)
        logger.info(f"Selection committed: {value!r}")
        self.query_one("#selections", RichLog).write(Text.assemble(("selected ", "dim"), (value, "bold green")))
