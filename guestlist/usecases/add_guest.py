from __future__ import annotations
from dataclasses import dataclass

from ..domain.entities import GuestDraft
from ..domain.ports import GuestStorePort, UseCaseError
from .error_mapping import map_api_error

EMPTY_NAME_MESSAGE = "Informe o nome completo do convidado."


def build_draft(full_name: str, confirmed: bool) -> GuestDraft:
    """Validate form input; raise ``VALIDATION_FAILED`` before any store call."""
    try:
        return GuestDraft(full_name=full_name or "", confirmed=confirmed)
    except ValueError:
        raise UseCaseError("VALIDATION_FAILED", EMPTY_NAME_MESSAGE) from None


@dataclass
class AddGuest:
    store: GuestStorePort

    def __call__(self, full_name: str, confirmed: bool = False) -> GuestDraft:
        draft = build_draft(full_name, confirmed)
        try:
            self.store.insert_guest(draft)
        except Exception as exc:
            raise map_api_error(exc, default_code="ADD_GUEST_FAILED") from exc
        return draft
