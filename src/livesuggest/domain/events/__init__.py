"""Event system used by the controller to notify its display host.

Example:
    ```python
    from livesuggest.domain.events import EventBus, LoadingChanged

    event_bus = EventBus()
    event_bus.subscribe(LoadingChanged, lambda event: spinner.toggle(event.loading))
    ```
"""

from .bus import EventBus
from .types import (
    Event,
    LoadingChanged,
    ResultHighlighted,
    ResultSelected,
    ResultsRendered,
    ResultsVisibilityChanged,
)

__all__ = [
    "EventBus",
    "Event",
    "LoadingChanged",
    "ResultHighlighted",
    "ResultSelected",
    "ResultsRendered",
    "ResultsVisibilityChanged",
]
