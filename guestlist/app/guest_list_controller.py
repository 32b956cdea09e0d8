"""UI-facing controller for the guest list page.

Maps view intents (submit, start-edit, save-edit, cancel-edit, export) to the
guest use-cases and keeps :class:`GuestListVM` in sync. Every successful
mutation is followed by a full reload, so the collection shown is always the
store's latest listing rather than a locally patched copy.
"""

from __future__ import annotations

import itertools
import logging
from typing import Callable, Optional

from guestlist.domain.entities import Guest, GuestId
from guestlist.domain.ports import UseCaseError
from guestlist.usecases.add_guest import AddGuest
from guestlist.usecases.export_guests_csv import CsvExport, ExportGuestsCsv
from guestlist.usecases.load_guests import LoadGuests
from guestlist.usecases.update_guest import UpdateGuest
from guestlist.viewmodels.guest_list_vm import GuestListVM

# notify(message, level) with level in {"positive", "warning", "negative"}
Notify = Callable[[str, str], None]

LOAD_ERROR_MESSAGE = "Erro ao carregar convidados!"
ADD_ERROR_MESSAGE = "Erro ao adicionar convidado!"
UPDATE_ERROR_MESSAGE = "Erro ao atualizar convidado!"


class GuestListController:
    """Coordinate guest intents for one page."""

    def __init__(
        self,
        *,
        vm: GuestListVM,
        load_guests: LoadGuests,
        add_guest: AddGuest,
        update_guest: UpdateGuest,
        export_csv: ExportGuestsCsv,
        notify: Notify,
    ) -> None:
        """Initialize controller dependencies.

        Args:
            vm: Page state rendered by the view.
            load_guests: Use-case reading the ordered collection.
            add_guest: Use-case inserting one guest.
            update_guest: Use-case updating one guest by id.
            export_csv: Use-case rendering the collection as CSV.
            notify: Callback showing a non-blocking notice to the user.
        """
        self._log = logging.getLogger(__name__)
        self.vm = vm
        self._load_guests = load_guests
        self._add_guest = add_guest
        self._update_guest = update_guest
        self._export_csv = export_csv
        self._notify = notify
        self._load_seq = itertools.count(1)
        self._latest_load = 0

    def load(self) -> bool:
        """Replace the collection with the store listing.

        Only the most recently started load may apply its result or clear the
        loading flag; a slower, older response is discarded.

        Returns:
            ``True`` when the listing was applied.
        """
        token = next(self._load_seq)
        self._latest_load = token
        self.vm.set_loading(True)
        try:
            guests = self._load_guests()
        except UseCaseError as exc:
            self._log.error("Erro ao carregar convidados: [%s] %s", exc.code, exc.message)
            if token == self._latest_load:
                self._notify(LOAD_ERROR_MESSAGE, "negative")
            return False
        finally:
            if token == self._latest_load:
                self.vm.set_loading(False)
        if token != self._latest_load:
            self._log.debug("Discarding stale guest listing (load #%d)", token)
            return False
        self.vm.replace_guests(guests)
        return True

    def add(self, full_name: Optional[str] = None, confirmed: Optional[bool] = None) -> bool:
        """Insert a guest from the given values (or the form) and reload.

        On success the form is cleared; on failure it keeps what the user typed.
        """
        if full_name is not None or confirmed is not None:
            self.vm.set_form(full_name, confirmed)
        self.vm.set_submitting(True)
        try:
            self._add_guest(self.vm.form_full_name, self.vm.form_confirmed)
        except UseCaseError as exc:
            self._report(exc, ADD_ERROR_MESSAGE, "Erro ao adicionar convidado")
            return False
        finally:
            self.vm.set_submitting(False)
        self._log.info("Guest added: %s", self.vm.form_full_name.strip())
        self.load()
        self.vm.clear_form()
        return True

    def begin_edit(self, guest: Guest) -> None:
        self.vm.begin_edit(guest)

    def cancel_edit(self) -> None:
        self.vm.clear_edit()

    def save_edit(
        self,
        guest_id: Optional[GuestId] = None,
        full_name: Optional[str] = None,
        confirmed: Optional[bool] = None,
    ) -> bool:
        """Update the edited guest and reload; stay in edit mode on failure."""
        target = self.vm.editing_id if guest_id is None else guest_id
        if full_name is not None or confirmed is not None:
            self.vm.set_edit(full_name, confirmed)
        self.vm.set_saving(True)
        try:
            self._update_guest(target, self.vm.edit_full_name, self.vm.edit_confirmed)
        except UseCaseError as exc:
            self._report(exc, UPDATE_ERROR_MESSAGE, "Erro ao atualizar convidado")
            return False
        finally:
            self.vm.set_saving(False)
        self._log.info("Guest %s updated", target)
        self.load()
        self.vm.clear_edit()
        return True

    def export(self) -> CsvExport:
        """Render the collection currently shown, in display order."""
        return self._export_csv(self.vm.guests)

    def _report(self, exc: UseCaseError, store_message: str, log_label: str) -> None:
        if exc.is_validation:
            self._log.info("%s: %s", log_label, exc.message)
            self._notify(exc.message, "warning")
            return
        self._log.error("%s: [%s] %s", log_label, exc.code, exc.message)
        self._notify(store_message, "negative")


__all__ = ["GuestListController", "Notify"]
