from __future__ import annotations
from typing import List, Optional, Protocol

from .entities import Guest, GuestDraft, GuestId


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    VALIDATION_CODES = frozenset({"VALIDATION_FAILED"})

    def __init__(self, code: str, message: str, meta: Optional[dict] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta

    @property
    def is_validation(self) -> bool:
        """True for rejected input; False for store/transport failures."""
        return self.code in self.VALIDATION_CODES


# ---- Ports (Hexagonal boundaries) ----
class GuestStorePort(Protocol):
    """Insert/update/select operations against the guests table.

    The store is the single source of truth; callers re-read the full listing
    after every mutation instead of patching local copies.
    """

    def list_guests(self) -> List[Guest]: ...  # ascending by created_at
    def insert_guest(self, draft: GuestDraft) -> None: ...
    def update_guest(self, guest_id: GuestId, draft: GuestDraft) -> None: ...
