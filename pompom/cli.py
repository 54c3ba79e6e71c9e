"""Pompom CLI -- a pomodoro timer for the terminal."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler
from rich.markup import escape

from pompom import config as cfg
from pompom import db, display
from pompom.app import Application
from pompom.display import TerminalScreen
from pompom.models import TimerConfig

app = typer.Typer(
    name="pompom",
    help="Count down a pomodoro in big friendly digits.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
) -> None:
    """Count down a pomodoro in big friendly digits."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=display.console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# Timer
# ---------------------------------------------------------------------------


@app.command()
def start(
    seconds: int = typer.Argument(1500, min=0, help="Length of the pomodoro in seconds"),
    message: Optional[str] = typer.Option(None, "--message", "-m", help="What you are working on"),
    log_path: Optional[str] = typer.Option(None, "--log", "-l", help="Work log database path"),
    no_log: bool = typer.Option(False, "--no-log", help="Do not record this session"),
) -> None:
    """Start a pomodoro."""
    timer_config = TimerConfig(seconds=seconds, message=message, log_path=log_path, no_log=no_log)
    application = Application(timer_config, screen=TerminalScreen())

    try:
        application.worklog.ensure_initialized()
    except (OSError, sqlite3.Error) as exc:
        display.print_warning(f"Could not open work log: {escape(str(exc))}")
        raise typer.Exit(1)

    completed = application.run()
    if completed:
        display.print_success("Pomodoro complete.")
    else:
        display.print_warning("Pomodoro stopped early.")


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------


@app.command()
def history(
    limit: int = typer.Option(10, "--limit", "-n", min=1, help="Number of sessions to show"),
    log_path: Optional[str] = typer.Option(None, "--log", "-l", help="Work log database path"),
) -> None:
    """Show recently logged pomodoros."""
    path = Path(log_path).expanduser() if log_path else cfg.get_db_path()
    if not path.exists():
        display.print_info(f"No work log at {path}.")
        return
    try:
        conn = db.get_connection(db_path=path)
        try:
            sessions = db.list_sessions(conn, limit=limit)
        finally:
            conn.close()
    except sqlite3.Error as exc:
        display.print_warning(f"Could not read work log: {escape(str(exc))}")
        raise typer.Exit(1)
    display.print_session_table(sessions)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@app.command()
def config(
    db_path: Optional[str] = typer.Option(
        None, "--db-path",
        help="Set a custom work log path",
    ),
    sound: Optional[str] = typer.Option(
        None, "--sound",
        help="Set the sound played when a pomodoro completes",
    ),
    reset: bool = typer.Option(False, "--reset", help="Reset to the default work log"),
    show: bool = typer.Option(False, "--show", help="Show current config"),
) -> None:
    """Configure where sessions are logged and which sound is played."""
    if db_path:
        result = cfg.set_db_path(db_path)
        display.print_success(f"Work log path set to: {result.db_path}")
    elif sound:
        result = cfg.set_sound_path(sound)
        display.print_success(f"Completion sound set to: {result.sound_path}")
    elif reset:
        cfg.reset_db_path()
        display.print_success("Reset to default work log.")
    elif show:
        current = cfg.load_config()
        resolved = cfg.get_db_path(current)
        if current.db_path:
            display.print_info(f"Work log: {current.db_path}")
        else:
            display.print_info(f"Work log: {resolved} (default)")
        display.print_info(f"Sound: {cfg.get_sound_path(current)}")
    else:
        display.print_info("Use --db-path, --sound, --reset, or --show.")
