"""Session logging: an SQLite-backed work log and a do-nothing stand-in."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Optional, Union

from pompom import db
from pompom.models import SessionCreate, SessionRecord
from pompom.timer import Countdown

log = logging.getLogger(__name__)


class WorkLog:
    """Records when each session started and whether it was cut short.

    Storage errors are not caught: losing a record silently is worse than
    stopping the run.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path).expanduser()
        self._conn: Optional[sqlite3.Connection] = None
        self._session_id: Optional[int] = None

    def ensure_initialized(self) -> sqlite3.Connection:
        """Open the store, creating its directory and table if needed."""
        if self._conn is None:
            log.debug("Opening work log at %s", self.path)
            self._conn = db.get_connection(db_path=self.path)
        return self._conn

    def start(self, countdown: Countdown) -> SessionRecord:
        conn = self.ensure_initialized()
        record = db.insert_session(conn, SessionCreate(message=countdown.message))
        self._session_id = record.id
        log.info("Logged session #%d", record.id)
        return record

    def finish_early(self) -> None:
        """Mark the most recently started session as finished early."""
        if self._session_id is None:
            return
        conn = self.ensure_initialized()
        db.mark_finished_early(conn, self._session_id)
        log.info("Session #%d finished early", self._session_id)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None


class NullWorkLog:
    """Used when logging is disabled."""

    def ensure_initialized(self) -> None:
        pass

    def start(self, countdown: Countdown) -> None:
        pass

    def finish_early(self) -> None:
        pass

    def close(self) -> None:
        pass
