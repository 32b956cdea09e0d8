from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..domain.entities import Guest, GuestId


@dataclass
class GuestListVM:
    """Holds the guest page state: collection, add form, inline edit scratch.

    Responsibilities
    - Keep the last collection read from the store (never patched locally)
    - Keep add-form fields until a successful insert clears them
    - Keep edit target + scratch fields until save succeeds or edit is cancelled
    - Expose loading/submitting/saving flags for the view
    """

    on_changed: Optional[Callable[[], None]] = None

    guests: List[Guest] = field(default_factory=list)
    loading: bool = False
    submitting: bool = False
    saving: bool = False

    form_full_name: str = ""
    form_confirmed: bool = False

    editing_id: Optional[GuestId] = None
    edit_full_name: str = ""
    edit_confirmed: bool = False

    # ---- Collection ----
    def replace_guests(self, guests: List[Guest]) -> None:
        self.guests = list(guests)
        self._changed()

    # ---- Add form ----
    def set_form(self, full_name: Optional[str] = None, confirmed: Optional[bool] = None) -> None:
        if full_name is not None:
            self.form_full_name = full_name
        if confirmed is not None:
            self.form_confirmed = bool(confirmed)

    def clear_form(self) -> None:
        self.form_full_name = ""
        self.form_confirmed = False
        self._changed()

    # ---- Inline edit ----
    def begin_edit(self, guest: Guest) -> None:
        self.editing_id = guest.id
        self.edit_full_name = guest.full_name
        self.edit_confirmed = guest.confirmed
        self._changed()

    def set_edit(self, full_name: Optional[str] = None, confirmed: Optional[bool] = None) -> None:
        if full_name is not None:
            self.edit_full_name = full_name
        if confirmed is not None:
            self.edit_confirmed = bool(confirmed)

    def clear_edit(self) -> None:
        self.editing_id = None
        self.edit_full_name = ""
        self.edit_confirmed = False
        self._changed()

    def is_editing(self, guest_id: Optional[GuestId] = None) -> bool:
        if guest_id is None:
            return self.editing_id is not None
        return self.editing_id == guest_id

    # ---- Flags ----
    def set_loading(self, value: bool) -> None:
        self.loading = bool(value)
        self._changed()

    def set_submitting(self, value: bool) -> None:
        self.submitting = bool(value)
        self._changed()

    def set_saving(self, value: bool) -> None:
        self.saving = bool(value)
        self._changed()

    def _changed(self) -> None:
        if self.on_changed:
            self.on_changed()
