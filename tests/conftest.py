"""Shared fixtures and fakes for livesuggest tests."""

from typing import Any, Callable, Optional

import pytest

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


class FakeAnchor:
    """Stand-in for the input the suggestions are attached to."""

    def __init__(self, value: str = "", cursor_position: Optional[int] = None, has_focus: bool = True):
        self.value = value
        self.cursor_position = len(value) if cursor_position is None else cursor_position
        self.has_focus = has_focus

    def type(self, value: str, cursor_position: Optional[int] = None) -> "FakeAnchor":
        self.value = value
        self.cursor_position = len(value) if cursor_position is None else cursor_position
        return self


class FakeTimer:
    def __init__(self, delay: float, callback: Callable[[], None]):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeClock:
    """Collects scheduled callbacks so tests decide when time passes."""

    def __init__(self):
        self.timers: list[FakeTimer] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def armed(self) -> list[FakeTimer]:
        return [timer for timer in self.timers if not timer.cancelled]

    def advance(self) -> int:
        """Fire every armed timer once; returns how many fired."""
        armed = self.armed
        self.timers = []
        for timer in armed:
            timer.callback()
        return len(armed)


class RecordingSource:
    """Data source that holds every request until the test resolves it."""

    def __init__(self):
        self.requests: list[tuple[str, Callable[[Any], None]]] = []

    @property
    def terms(self) -> list[str]:
        return [term for term, _ in self.requests]

    def __call__(self, search_term: str, done: Callable[[Any], None]) -> None:
        self.requests.append((search_term, done))

    def resolve(self, index: int, results: Any) -> None:
        self.requests[index][1](results)


class EventRecorder:
    EVENT_TYPES = (ResultsRendered, ResultsVisibilityChanged, LoadingChanged, ResultHighlighted, ResultSelected)

    def __init__(self, bus: EventBus):
        self.events: list[Any] = []
        for event_type in self.EVENT_TYPES:
            bus.subscribe(event_type, self.events.append)

    def of_type(self, event_type: type) -> list[Any]:
        return [event for event in self.events if isinstance(event, event_type)]


@pytest.fixture
def anchor() -> FakeAnchor:
    return FakeAnchor()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def source() -> RecordingSource:
    return RecordingSource()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def recorder(event_bus: EventBus) -> EventRecorder:
    return EventRecorder(event_bus)


@pytest.fixture
def make_controller(anchor: FakeAnchor, clock: FakeClock, source: RecordingSource, event_bus: EventBus):
    """Build a controller on the shared anchor, clock and bus.

    Options are passed to SuggestConfig. ``debounce_time`` defaults to 0 so
    fetches are dispatched synchronously, and ``fetch`` to the recording
    source so requests stay pending until resolved.
    """

    def factory(**options: Any) -> SuggestionController:
        options.setdefault("debounce_time", 0)
        options.setdefault("fetch", source)
        return SuggestionController(
            anchor,
            SuggestConfig(**options),
            event_bus=event_bus,
            call_later=clock.call_later,
        )

    return factory
