"""
core/logging/logic/logger.py
============================

Thread-safe singleton audit logger.

Entries are kept in a bounded in-memory buffer and, when ``[Logging] db_path``
is configured, persisted to SQLite. Every entry is mirrored to the stdlib
``logging`` tree under ``pilot_eligibility.audit``.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Deque, List, Optional

from core.config.config_service import config_service
from core.logging.models.log_entry import LogEntry

_std_logger = logging.getLogger("pilot_eligibility.audit")

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class Logger:
    """Thread-safe singleton audit logger."""

    _instance: "Logger | None" = None
    _instance_lock = threading.Lock()

    def __new__(cls) -> "Logger":  # noqa: D401
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False  # type: ignore[attr-defined]
        return cls._instance  # type: ignore[return-value]

    def __init__(self) -> None:
        if getattr(self, "_initialized", False):
            return
        self._initialized = True

        self._lock = threading.RLock()
        self._conn: sqlite3.Connection | None = None
        self._next_id = 1
        self.db_path: Path | None = None
        self.entries: Deque[LogEntry] = deque()
        self.configure()

    # ------------------------------------------------------------------ #
    #  Setup                                                             #
    # ------------------------------------------------------------------ #
    def configure(
        self,
        *,
        db_path: str | Path | None = None,
        buffer_size: int | None = None,
        level: str | None = None,
    ) -> None:
        """(Re)bind storage. Arguments left as None come from ``config_service``."""
        cfg = config_service.logging
        raw_path = cfg.db_path if db_path is None else db_path
        size = cfg.buffer_size if buffer_size is None else buffer_size
        _std_logger.setLevel(_LEVELS.get((level or cfg.level).upper(), logging.INFO))

        with self._lock:
            self._close_connection()
            self.db_path = Path(raw_path).expanduser() if str(raw_path).strip() else None
            self.entries = deque(self.entries, maxlen=max(1, int(size)))
            if self.db_path is not None:
                self._ensure_db()

    def close(self) -> None:
        """Close the database connection and release resources."""
        with self._lock:
            self._close_connection()

    # ------------------------------------------------------------------ #
    #  Public API                                                        #
    # ------------------------------------------------------------------ #
    def log(
        self,
        feature: str,
        event: str,
        *,
        level: str = "INFO",
        reference_id: Optional[str] = None,
        message: Optional[str] = None,
    ) -> LogEntry:
        """Record an entry and mirror it to the stdlib logger."""
        level = level.upper()
        entry = LogEntry(
            id=None,
            timestamp=datetime.now(timezone.utc),
            log_level=level,
            feature=feature,
            event=event,
            reference_id=reference_id,
            message=message,
        )

        with self._lock:
            if self.db_path is not None:
                try:
                    entry.id = self._insert_log(entry)
                except sqlite3.Error:
                    _std_logger.exception("Audit entry %s/%s not persisted to %s", feature, event, self.db_path)
            if entry.id is None:
                entry.id = self._next_id
                self._next_id += 1
            self.entries.append(entry)

        _std_logger.log(
            _LEVELS.get(level, logging.INFO),
            "[%s/%s] %s",
            feature,
            event,
            message or "",
        )
        return entry

    def fetch_logs(self, limit: int = 100) -> List[LogEntry]:
        return self.query_logs(limit=limit)

    def query_logs(
        self,
        *,
        feature: Optional[str] = None,
        event: Optional[str] = None,
        reference_id: Optional[str] = None,
        level: Optional[str] = None,
        limit: int = 1_000,
    ) -> List[LogEntry]:
        """Return matching entries, newest first."""
        with self._lock:
            if self.db_path is None:
                out = [
                    e for e in reversed(self.entries)
                    if (feature is None or e.feature == feature)
                    and (event is None or e.event == event)
                    and (reference_id is None or e.reference_id == reference_id)
                    and (level is None or e.log_level == level.upper())
                ]
                return out[:limit]

            query = "SELECT * FROM logs WHERE 1=1"
            params: list[object] = []
            if feature is not None:
                query += " AND feature = ?"
                params.append(feature)
            if event is not None:
                query += " AND event = ?"
                params.append(event)
            if reference_id is not None:
                query += " AND reference_id = ?"
                params.append(reference_id)
            if level is not None:
                query += " AND log_level = ?"
                params.append(level.upper())
            query += " ORDER BY id DESC LIMIT ?"
            params.append(limit)

            rows = self._get_connection().execute(query, params).fetchall()
            return [LogEntry.from_dict(dict(row)) for row in rows]

    def clear_logs(self) -> None:
        with self._lock:
            self.entries.clear()
            if self.db_path is not None:
                conn = self._get_connection()
                conn.execute("DELETE FROM logs")
                conn.commit()

    # ------------------------------------------------------------------ #
    #  Internal helpers                                                  #
    # ------------------------------------------------------------------ #
    def _get_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            assert self.db_path is not None
            self._conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
        return self._conn

    def _close_connection(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _ensure_db(self) -> None:
        assert self.db_path is not None
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = self._get_connection()
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                timestamp TEXT NOT NULL,
                feature TEXT NOT NULL,
                event TEXT NOT NULL,
                reference_id TEXT,
                message TEXT,
                log_level TEXT NOT NULL DEFAULT 'INFO'
            )
            """
        )
        conn.commit()

    def _insert_log(self, entry: LogEntry) -> int:
        conn = self._get_connection()
        cur = conn.execute(
            """
            INSERT INTO logs
                (timestamp, feature, event, reference_id, message, log_level)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                entry.timestamp.isoformat(),
                entry.feature,
                entry.event,
                entry.reference_id,
                entry.message,
                entry.log_level,
            ),
        )
        conn.commit()
        return int(cur.lastrowid)


# --------------------------------------------------------------------------- #
#  Global instance                                                            #
# --------------------------------------------------------------------------- #
logger: Logger = Logger()
