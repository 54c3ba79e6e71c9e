"""Countdown state machine."""

from __future__ import annotations

from typing import Optional, Protocol

from pompom.clock import Clock, SystemClock
from pompom.models import Snapshot


class Observer(Protocol):
    """Receives a snapshot after every change to a countdown."""

    def on_update(self, snapshot: Snapshot) -> None: ...


class Countdown:
    """Counts a duration down to zero, one second per tick.

    ``finished_early`` starts out True and only flips to False when a tick
    lands on zero, so a session that is abandoned (or ended with
    :meth:`finish_now`) reads as finished early.
    """

    def __init__(
        self,
        seconds: int = 1500,
        message: Optional[str] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        if seconds < 0:
            raise ValueError(f"Countdown duration must not be negative, got {seconds}")
        self._remaining = seconds
        self._message = message
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._observers: list[Observer] = []
        self._finished_early = True

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def message(self) -> Optional[str]:
        return self._message

    def add_observer(self, observer: Observer) -> None:
        """Register an observer; notification follows registration order."""
        self._observers.append(observer)

    def snapshot(self) -> Snapshot:
        return Snapshot(remaining_seconds=self._remaining, message=self._message)

    def tick(self) -> None:
        """Wait one second, then decrement and notify observers."""
        self._clock.wait(1)
        self._remaining = max(self._remaining - 1, 0)
        if self._remaining == 0:
            self._finished_early = False
        self._notify()

    def finish_now(self) -> None:
        """Jump straight to zero. Leaves the early-finish flag alone."""
        self._remaining = 0
        self._notify()

    def is_finished(self) -> bool:
        return self._remaining < 1

    def was_finished_early(self) -> bool:
        return self._finished_early

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for observer in self._observers:
            observer.on_update(snapshot)
