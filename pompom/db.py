"""SQLite work log storage. All public functions return Pydantic models."""

from __future__ import annotations

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

from pompom.models import SessionCreate, SessionRecord

_SCHEMA = """
CREATE TABLE IF NOT EXISTS pomodoros (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    started_at      TEXT    NOT NULL,
    message         TEXT,
    finished_early  INTEGER NOT NULL DEFAULT 0
);
"""


def get_connection(db_path: Path) -> sqlite3.Connection:
    """Open a connection and ensure the schema exists.

    Missing parent directories are created first.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    try:
        conn.executescript(_SCHEMA)
    except sqlite3.Error:
        conn.close()
        raise
    return conn


def _row_to_session(row: sqlite3.Row) -> SessionRecord:
    """Convert a database row to a SessionRecord model."""
    return SessionRecord(
        id=row["id"],
        started_at=datetime.fromisoformat(row["started_at"]),
        message=row["message"],
        finished_early=bool(row["finished_early"]),
    )


def insert_session(conn: sqlite3.Connection, session_in: SessionCreate) -> SessionRecord:
    """Record the start of a session and return it as a model."""
    now = datetime.now().isoformat()
    cur = conn.execute(
        "INSERT INTO pomodoros (started_at, message, finished_early) VALUES (?, ?, 0)",
        (now, session_in.message),
    )
    conn.commit()
    row = conn.execute("SELECT * FROM pomodoros WHERE id = ?", (cur.lastrowid,)).fetchone()
    return _row_to_session(row)


def get_session(conn: sqlite3.Connection, session_id: int) -> Optional[SessionRecord]:
    """Fetch a single session by ID."""
    row = conn.execute("SELECT * FROM pomodoros WHERE id = ?", (session_id,)).fetchone()
    return _row_to_session(row) if row else None


def mark_finished_early(conn: sqlite3.Connection, session_id: int) -> Optional[SessionRecord]:
    """Flag a session as interrupted before its countdown reached zero."""
    conn.execute(
        "UPDATE pomodoros SET finished_early = 1 WHERE id = ?",
        (session_id,),
    )
    conn.commit()
    return get_session(conn, session_id)


def list_sessions(conn: sqlite3.Connection, limit: int = 20) -> list[SessionRecord]:
    """List logged sessions, most recent first."""
    rows = conn.execute(
        "SELECT * FROM pomodoros ORDER BY started_at DESC, id DESC LIMIT ?",
        (limit,),
    ).fetchall()
    return [_row_to_session(r) for r in rows]
