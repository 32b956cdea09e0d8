from __future__ import annotations
from dataclasses import dataclass
from typing import List

from ..domain.entities import Guest
from ..domain.ports import GuestStorePort
from .error_mapping import map_api_error


@dataclass
class LoadGuests:
    store: GuestStorePort

    def __call__(self) -> List[Guest]:
        """Return every guest, oldest first."""
        try:
            guests = self.store.list_guests()
        except Exception as exc:
            raise map_api_error(exc, default_code="LOAD_GUESTS_FAILED") from exc
        # stores are asked for created_at ascending; enforce it for backends that ignore order
        return sorted(guests, key=_creation_key)


def _creation_key(guest: Guest):
    # stable sort keeps store order for equal or missing timestamps
    return (guest.created_at is None, guest.created_at or 0)
