"""Rich terminal output: the full-screen countdown and plain CLI messages."""

from __future__ import annotations

from typing import Optional, Protocol

from pyfiglet import Figlet
from rich.console import Console, ScreenContext
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pompom.models import SessionRecord, Snapshot, UrgencyColor
from pompom.urgency import urgency_for

console = Console()

FONT = "big"

_URGENCY_STYLE: dict[UrgencyColor, str] = {
    UrgencyColor.NORMAL: "green",
    UrgencyColor.WARNING: "yellow",
    UrgencyColor.CRITICAL: "red",
}


def format_time(seconds: int) -> str:
    """Format seconds as MM:SS. Minutes are never rolled over into hours."""
    minutes, seconds = divmod(seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


class Asciifier:
    """Turns short text into FIGlet block art."""

    def __init__(self) -> None:
        self._figlet = Figlet(font=FONT, width=1000)

    def asciify(self, text: str) -> str:
        lines = self._figlet.renderText(text).rstrip("\n").split("\n")
        # Fix kerning when the 2nd character of the minutes is a 4. Belongs
        # upstream in the font itself.
        if len(lines) > 3:
            lines[3] = lines[3].replace("_| ", "_|", 1)
        return "\n".join(lines)


def layout_frame(art: str, rows: int, columns: int) -> str:
    """Centre ``art`` on a rows x columns screen.

    Padding never goes negative, so art bigger than the screen is drawn from
    the top-left corner.
    """
    lines = art.split("\n")
    padding = max((columns - len(lines[0])) // 2, 0)
    top = max((rows - len(lines) - 1) // 2, 0)
    body = "\n".join(" " * padding + line for line in lines)
    return "\n" * top + body


class Screen(Protocol):
    """A drawing surface held for the lifetime of one run."""

    @property
    def size(self) -> tuple[int, int]: ...

    def draw(self, text: str, color: UrgencyColor, blinking: bool = False) -> None: ...

    def __enter__(self) -> Screen: ...

    def __exit__(self, *exc_info: object) -> None: ...


class TerminalScreen:
    """Full-screen terminal surface on Rich's alternate screen."""

    def __init__(self, terminal: Optional[Console] = None) -> None:
        self.console = terminal or console
        self._context: Optional[ScreenContext] = None

    def acquire(self) -> None:
        if self._context is None:
            self._context = self.console.screen(hide_cursor=True)
            self._context.__enter__()

    def release(self) -> None:
        if self._context is not None:
            context, self._context = self._context, None
            context.__exit__(None, None, None)

    def __enter__(self) -> TerminalScreen:
        self.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    @property
    def size(self) -> tuple[int, int]:
        """Usable (rows, columns)."""
        width, height = self.console.size
        return height, width

    def draw(self, text: str, color: UrgencyColor, blinking: bool = False) -> None:
        if self._context is None:
            raise RuntimeError("Screen must be acquired before drawing")
        style = _URGENCY_STYLE[color]
        if blinking:
            style += " blink"
        self._context.update(Text(text, style=style, no_wrap=True, overflow="crop"))


class Renderer:
    """Countdown observer that draws the remaining time as block art."""

    def __init__(self, screen: Screen, asciifier: Optional[Asciifier] = None) -> None:
        self.screen = screen
        self.asciifier = asciifier or Asciifier()

    def on_update(self, snapshot: Snapshot) -> None:
        art = self.asciifier.asciify(format_time(snapshot.remaining_seconds))
        urgency = urgency_for(snapshot.remaining_seconds)
        rows, columns = self.screen.size
        self.screen.draw(layout_frame(art, rows, columns), urgency.color, urgency.blink)


def print_session_table(sessions: list[SessionRecord], title: str = "Pomodoros") -> None:
    """Print logged sessions in a panel."""
    if not sessions:
        console.print(Panel("No sessions logged.", title=title, border_style="dim"))
        return

    table = Table(show_header=True, box=None, pad_edge=False)
    table.add_column("id", width=5)
    table.add_column("started")
    table.add_column("message")
    table.add_column("finished")

    for session in sessions:
        table.add_row(
            f"#{session.id}",
            session.started_at.strftime("%Y-%m-%d %H:%M"),
            session.message or "",
            "early" if session.finished_early else "complete",
            style="yellow" if session.finished_early else "green",
        )

    console.print(Panel(table, title=title, border_style="blue"))


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[blue]{message}[/blue]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]{message}[/yellow]")
