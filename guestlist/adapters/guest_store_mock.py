from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from guestlist.domain.entities import Guest, GuestDraft, GuestId
from guestlist.domain.ports import GuestStorePort

from .api_errors import guest_not_found

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


@dataclass
class GuestStoreMock(GuestStorePort):
    """Offline substitute for ``GuestStoreRestAdapter`` with deterministic responses.

    Ids are sequential integers and ``created_at`` advances one second per
    insert, so listings are reproducible in demos and tests.
    """

    def __post_init__(self) -> None:
        self._rows: Dict[GuestId, Guest] = {}
        self._next_id = 1
        self.fail_next: Optional[Exception] = None
        self.calls: List[str] = []

    # ---------- GuestStorePort ----------

    def list_guests(self) -> List[Guest]:
        self._record("list_guests")
        return sorted(self._rows.values(), key=lambda g: (g.created_at, g.id))

    def insert_guest(self, draft: GuestDraft) -> None:
        self._record("insert_guest")
        guest_id = self._next_id
        self._next_id += 1
        self._rows[guest_id] = Guest(
            id=guest_id,
            full_name=draft.full_name,
            confirmed=draft.confirmed,
            created_at=_EPOCH + timedelta(seconds=guest_id),
        )

    def update_guest(self, guest_id: GuestId, draft: GuestDraft) -> None:
        self._record("update_guest")
        current = self._rows.get(guest_id)
        if current is None:
            ctx = f"update_guest[{guest_id}]"
            raise guest_not_found(ctx)
        self._rows[current.id] = Guest(
            id=current.id,
            full_name=draft.full_name,
            confirmed=draft.confirmed,
            created_at=current.created_at,
        )

    # ---------- Test helpers ----------

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_next is not None:
            exc, self.fail_next = self.fail_next, None
            raise exc
