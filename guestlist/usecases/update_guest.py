from __future__ import annotations
from dataclasses import dataclass

from ..domain.entities import GuestDraft, GuestId
from ..domain.ports import GuestStorePort, UseCaseError
from .add_guest import build_draft
from .error_mapping import map_api_error


@dataclass
class UpdateGuest:
    store: GuestStorePort

    def __call__(self, guest_id: GuestId, full_name: str, confirmed: bool) -> GuestDraft:
        if guest_id is None:
            raise UseCaseError("VALIDATION_FAILED", "No guest selected for editing.")
        draft = build_draft(full_name, confirmed)
        try:
            self.store.update_guest(guest_id, draft)
        except Exception as exc:
            raise map_api_error(exc, default_code="UPDATE_GUEST_FAILED") from exc
        return draft
