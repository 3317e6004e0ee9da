"""Event types published by the suggestion controller.

Hosts subscribe to these to keep their display in sync with the
controller state without the controller knowing anything about the
display layer.
"""

import time
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Event:
    """Base class for all events.

    The timestamp field is automatically set when the event is created.
    """

    timestamp: float = field(default_factory=time.time, init=False)
    """Timestamp when the event was created (Unix timestamp)."""


@dataclass
class ResultsRendered(Event):
    """Published when the result list has been (re)rendered.

    Attributes:
        nodes: The rendered result nodes, in display order. Empty after a clear.
    """

    nodes: list[Any]
    """Rendered :class:`~livesuggest.application.nodes.RenderNode` instances."""


@dataclass
class ResultsVisibilityChanged(Event):
    """Published when the result list is shown or hidden."""

    visible: bool


@dataclass
class LoadingChanged(Event):
    """Published when a search starts or its completion arrives."""

    loading: bool


@dataclass
class ResultHighlighted(Event):
    """Published after the highlighted result changed.

    Attributes:
        index: Index of the highlighted node, or -1 when nothing is highlighted
            (including the case where the current index points at a disabled node).
    """

    index: int


@dataclass
class ResultSelected(Event):
    """Published after a result has been committed by the user."""

    index: int
    node: Any
