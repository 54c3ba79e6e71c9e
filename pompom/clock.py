"""Time sources the countdown waits on."""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Anything that can block the caller for a number of seconds."""

    def wait(self, seconds: float) -> None: ...


class SystemClock:
    """Real wall-clock waiting."""

    def wait(self, seconds: float) -> None:
        time.sleep(seconds)
