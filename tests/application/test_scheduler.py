import asyncio

import pytest

from livesuggest.application.scheduler import DebouncedFetchScheduler


class TestDebouncedFetchScheduler:
    """Tests for DebouncedFetchScheduler."""

    def test_zero_debounce_dispatches_synchronously(self, clock):
        calls = []
        scheduler = DebouncedFetchScheduler(clock.call_later)

        scheduler.schedule("jo", calls.append, 0)

        assert calls == ["jo"]
        assert clock.timers == []
        assert scheduler.pending is False

    def test_only_the_last_term_is_fetched(self, clock):
        calls = []
        scheduler = DebouncedFetchScheduler(clock.call_later)

        scheduler.schedule("j", calls.append, 200)
        scheduler.schedule("jo", calls.append, 200)
        scheduler.schedule("jon", calls.append, 200)

        assert calls == []
        assert len(clock.armed) == 1
        assert clock.armed[0].delay == pytest.approx(0.2)

        clock.advance()
        assert calls == ["jon"]
        assert scheduler.pending is False

    def test_cancel_reports_whether_something_was_pending(self, clock):
        calls = []
        scheduler = DebouncedFetchScheduler(clock.call_later)

        assert scheduler.cancel() is False

        scheduler.schedule("jo", calls.append, 100)
        assert scheduler.pending is True
        assert scheduler.cancel() is True
        assert clock.advance() == 0
        assert calls == []

    def test_synchronous_schedule_cancels_pending_one(self, clock):
        calls = []
        scheduler = DebouncedFetchScheduler(clock.call_later)

        scheduler.schedule("jo", calls.append, 100)
        scheduler.schedule("jon", calls.append, 0)
        clock.advance()

        assert calls == ["jon"]

    @pytest.mark.asyncio
    async def test_default_timer_uses_running_loop(self):
        calls = []
        scheduler = DebouncedFetchScheduler()

        scheduler.schedule("jo", calls.append, 10)
        assert calls == []

        await asyncio.sleep(0.05)
        assert calls == ["jo"]
