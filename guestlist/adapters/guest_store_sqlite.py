from __future__ import annotations

import logging
import sqlite3
import threading
from datetime import datetime, timezone
from typing import List

from guestlist.domain.entities import Guest, GuestDraft, GuestId
from guestlist.domain.ports import GuestStorePort

from .api_errors import ApiError, guest_not_found

_SCHEMA = """
CREATE TABLE IF NOT EXISTS guests (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    full_name TEXT NOT NULL,
    confirmed BOOLEAN NOT NULL,
    created_at TEXT NOT NULL
)
"""


class GuestStoreSqlite(GuestStorePort):
    """Local SQLite file used instead of the hosted store (offline installs)."""

    def __init__(self, path: str = "guests.db") -> None:
        self.path = path
        self._log = logging.getLogger(__name__)
        # NiceGUI runs store calls on worker threads; one connection, serialized
        self._lock = threading.Lock()
        try:
            self._conn = sqlite3.connect(path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            with self._conn:
                self._conn.execute(_SCHEMA)
        except sqlite3.Error as exc:
            raise ApiError(f"Cannot open guest database {path}: {exc}", context="open") from exc

    def list_guests(self) -> List[Guest]:
        sql = "SELECT id, full_name, confirmed, created_at FROM guests ORDER BY created_at, id"
        self._log.debug("list_guests: %s", sql)
        with self._lock:
            try:
                rows = self._conn.execute(sql).fetchall()
            except sqlite3.Error as exc:
                raise ApiError(f"list_guests: {exc}", context="list_guests") from exc
        return [Guest.from_row(dict(row)) for row in rows]

    def insert_guest(self, draft: GuestDraft) -> None:
        created_at = datetime.now(timezone.utc).isoformat()
        self._execute(
            "insert_guest",
            "INSERT INTO guests (full_name, confirmed, created_at) VALUES (?, ?, ?)",
            (draft.full_name, int(draft.confirmed), created_at),
        )

    def update_guest(self, guest_id: GuestId, draft: GuestDraft) -> None:
        ctx = f"update_guest[{guest_id}]"
        cursor = self._execute(
            ctx,
            "UPDATE guests SET full_name = ?, confirmed = ? WHERE id = ?",
            (draft.full_name, int(draft.confirmed), guest_id),
        )
        if cursor.rowcount == 0:
            raise guest_not_found(ctx)

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def _execute(self, ctx: str, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        self._log.debug("%s: %s", ctx, sql)
        with self._lock:
            try:
                with self._conn:
                    return self._conn.execute(sql, params)
            except sqlite3.Error as exc:
                raise ApiError(f"{ctx}: {exc}", context=ctx) from exc


__all__ = ["GuestStoreSqlite"]
