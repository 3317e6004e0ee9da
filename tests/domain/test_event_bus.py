import pytest

from livesuggest.domain.events import EventBus, LoadingChanged, ResultHighlighted


def test_publish_reaches_subscribers_of_that_type_only() -> None:
    bus = EventBus()
    loading: list[LoadingChanged] = []
    highlighted: list[ResultHighlighted] = []
    bus.subscribe(LoadingChanged, loading.append)
    bus.subscribe(ResultHighlighted, highlighted.append)

    bus.publish(LoadingChanged(loading=True))

    assert [event.loading for event in loading] == [True]
    assert highlighted == []
    assert loading[0].timestamp > 0


def test_duplicate_subscription_is_ignored() -> None:
    bus = EventBus()
    received = []
    bus.subscribe(LoadingChanged, received.append)
    bus.subscribe(LoadingChanged, received.append)

    bus.publish(LoadingChanged(loading=False))

    assert len(received) == 1


def test_async_handlers_are_rejected() -> None:
    bus = EventBus()

    async def handler(event):
        pass

    with pytest.raises(TypeError):
        bus.subscribe(LoadingChanged, handler)


def test_failing_handler_does_not_stop_others() -> None:
    bus = EventBus()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(LoadingChanged, broken)
    bus.subscribe(LoadingChanged, received.append)

    bus.publish(LoadingChanged(loading=True))

    assert len(received) == 1


def test_unsubscribe_and_clear() -> None:
    bus = EventBus()
    received = []
    bus.subscribe(LoadingChanged, received.append)

    bus.unsubscribe(LoadingChanged, received.append)
    bus.unsubscribe(ResultHighlighted, received.append)
    bus.publish(LoadingChanged(loading=True))
    assert received == []
    assert bus.has_subscribers(LoadingChanged) is False

    bus.subscribe(ResultHighlighted, received.append)
    bus.clear()
    assert bus.has_subscribers(ResultHighlighted) is False
