"""Tests for the countdown state machine."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from pompom.clock import SystemClock
from pompom.timer import Countdown


class TestConstruction:
    def test_defaults(self) -> None:
        countdown = Countdown()
        assert countdown.remaining_seconds == 1500
        assert countdown.message is None
        assert countdown.was_finished_early()

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            Countdown(-1)

    def test_zero_is_already_finished(self, clock) -> None:
        countdown = Countdown(0, clock=clock)
        assert countdown.is_finished()


class TestTick:
    def test_decrements_by_one(self, clock) -> None:
        countdown = Countdown(10, clock=clock)
        countdown.tick()
        assert countdown.remaining_seconds == 9
        assert clock.waits == [1]

    def test_not_finished_early_after_reaching_zero(self, clock) -> None:
        countdown = Countdown(1, clock=clock)
        countdown.tick()
        assert countdown.remaining_seconds == 0
        assert not countdown.was_finished_early()

    def test_still_early_before_zero(self, clock) -> None:
        countdown = Countdown(5, clock=clock)
        countdown.tick()
        assert countdown.was_finished_early()

    def test_never_goes_negative(self, clock) -> None:
        countdown = Countdown(0, clock=clock)
        countdown.tick()
        countdown.tick()
        assert countdown.remaining_seconds == 0
        assert not countdown.was_finished_early()

    def test_interrupted_wait_leaves_state_untouched(self, interrupting_clock, observer) -> None:
        countdown = Countdown(5, clock=interrupting_clock(0))
        countdown.add_observer(observer)
        with pytest.raises(KeyboardInterrupt):
            countdown.tick()
        assert countdown.remaining_seconds == 5
        assert observer.snapshots == []

    @patch("pompom.clock.time.sleep")
    def test_system_clock_sleeps_one_second(self, mock_sleep) -> None:
        countdown = Countdown(3, clock=SystemClock())
        countdown.tick()
        mock_sleep.assert_called_once_with(1)

    @patch("pompom.clock.time.sleep")
    def test_system_clock_is_default(self, mock_sleep) -> None:
        countdown = Countdown(3)
        countdown.tick()
        assert mock_sleep.call_count == 1


class TestObservers:
    def test_three_ticks_notify_in_order(self, clock, observer) -> None:
        countdown = Countdown(3, "test", clock=clock)
        countdown.add_observer(observer)
        for _ in range(3):
            countdown.tick()

        assert [s.remaining_seconds for s in observer.snapshots] == [2, 1, 0]
        assert all(s.message == "test" for s in observer.snapshots)
        assert countdown.is_finished()
        assert not countdown.was_finished_early()

    def test_registration_order(self, clock) -> None:
        calls: list[str] = []

        class Named:
            def __init__(self, name: str) -> None:
                self.name = name

            def on_update(self, snapshot) -> None:
                calls.append(self.name)

        countdown = Countdown(2, clock=clock)
        countdown.add_observer(Named("first"))
        countdown.add_observer(Named("second"))
        countdown.tick()
        assert calls == ["first", "second"]

    def test_observer_sees_updated_state(self, clock) -> None:
        seen: list[tuple[int, bool]] = []
        countdown = Countdown(1, clock=clock)

        class Peek:
            def on_update(self, snapshot) -> None:
                seen.append((snapshot.remaining_seconds, countdown.was_finished_early()))

        countdown.add_observer(Peek())
        countdown.tick()
        assert seen == [(0, False)]


class TestFinishNow:
    def test_jumps_to_zero_and_notifies(self, clock, observer) -> None:
        countdown = Countdown(100, clock=clock)
        countdown.add_observer(observer)
        countdown.finish_now()
        assert countdown.is_finished()
        assert [s.remaining_seconds for s in observer.snapshots] == [0]
        assert clock.waits == []

    def test_keeps_early_flag(self, clock) -> None:
        """A session ended this way still reads as finished early."""
        countdown = Countdown(100, clock=clock)
        countdown.finish_now()
        assert countdown.was_finished_early()


class TestIsFinished:
    def test_running_values(self, clock) -> None:
        for seconds in (1, 2, 60, 1500):
            assert not Countdown(seconds, clock=clock).is_finished()
