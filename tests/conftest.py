"""Shared test doubles for the clock and the terminal."""

from __future__ import annotations

from pathlib import Path
from typing import Optional
from unittest.mock import patch

import pytest

from pompom.models import Snapshot, UrgencyColor


class FakeClock:
    """Counts waits instead of sleeping; can simulate Ctrl-C."""

    def __init__(self, interrupt_after: Optional[int] = None) -> None:
        self.waits: list[float] = []
        self.interrupt_after = interrupt_after

    def wait(self, seconds: float) -> None:
        if self.interrupt_after is not None and len(self.waits) >= self.interrupt_after:
            raise KeyboardInterrupt
        self.waits.append(seconds)


class FakeScreen:
    """Records frames instead of drawing them."""

    def __init__(self, rows: int = 24, columns: int = 80, fail_on_draw: bool = False) -> None:
        self.rows = rows
        self.columns = columns
        self.fail_on_draw = fail_on_draw
        self.frames: list[tuple[str, UrgencyColor, bool]] = []
        self.acquired = False
        self.released = False

    @property
    def size(self) -> tuple[int, int]:
        return self.rows, self.columns

    def draw(self, text: str, color: UrgencyColor, blinking: bool = False) -> None:
        if not self.acquired or self.released:
            raise RuntimeError("drawing outside the screen scope")
        if self.fail_on_draw:
            raise RuntimeError("terminal went away")
        self.frames.append((text, color, blinking))

    def __enter__(self) -> FakeScreen:
        self.acquired = True
        self.released = False
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.released = True


class RecordingObserver:
    def __init__(self) -> None:
        self.snapshots: list[Snapshot] = []

    def on_update(self, snapshot: Snapshot) -> None:
        self.snapshots.append(snapshot)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def screen() -> FakeScreen:
    return FakeScreen()


@pytest.fixture()
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture()
def data_dir(tmp_path: Path):
    """Redirect config and default data paths to tmp_path."""
    home = tmp_path / "pompom-home"
    with patch("pompom.config._DATA_DIR", home), patch(
        "pompom.config._CONFIG_DIR", home
    ), patch("pompom.config._CONFIG_FILE", home / "config.json"):
        yield home


@pytest.fixture()
def interrupting_clock():
    """Factory for clocks that raise KeyboardInterrupt after n waits."""
    return lambda after: FakeClock(interrupt_after=after)


@pytest.fixture()
def broken_screen() -> FakeScreen:
    return FakeScreen(fail_on_draw=True)
