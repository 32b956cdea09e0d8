"""Adapter and use-case wiring for the guest list runtime.

This module owns construction of the single guest store adapter and the
use-case objects bound to it. The web entry point creates one
:class:`AppController` at startup and reuses it for every page.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..adapters.guest_store_mock import GuestStoreMock
from ..adapters.guest_store_rest import GuestStoreRestAdapter
from ..adapters.guest_store_sqlite import GuestStoreSqlite
from ..config import StoreSettings
from ..domain.ports import GuestStorePort
from ..usecases.add_guest import AddGuest
from ..usecases.export_guests_csv import ExportGuestsCsv
from ..usecases.load_guests import LoadGuests
from ..usecases.update_guest import UpdateGuest
from ..viewmodels.guest_list_vm import GuestListVM
from .guest_list_controller import GuestListController, Notify


def build_store(settings: StoreSettings) -> GuestStorePort:
    """Create the store adapter selected by ``settings.backend``."""
    if settings.backend == "sqlite":
        return GuestStoreSqlite(settings.sqlite_path)
    if settings.backend == "memory":
        return GuestStoreMock()
    return GuestStoreRestAdapter(
        settings.url,
        settings.api_key,
        table=settings.table,
        request_timeout_s=settings.request_timeout_s,
        retries=settings.retries,
    )


class AppController:
    """Create and cache the store adapter and use-cases from settings.

    Call chain:
        ``guestlist.web_ui.main`` creates one instance at startup, then asks it
        for a :class:`GuestListController` per browser page.
    """

    def __init__(
        self,
        settings: StoreSettings,
        *,
        store_factory: Callable[[StoreSettings], GuestStorePort] = build_store,
    ) -> None:
        self.settings = settings
        self._store_factory = store_factory
        self._store: Optional[GuestStorePort] = None
        self.uc_load: Optional[LoadGuests] = None
        self.uc_add: Optional[AddGuest] = None
        self.uc_update: Optional[UpdateGuest] = None
        self.uc_export: Optional[ExportGuestsCsv] = None
        self._log = logging.getLogger(__name__)

    @property
    def store(self) -> Optional[GuestStorePort]:
        """Return the process-wide store adapter (``None`` before ``ensure_ready``)."""
        return self._store

    def ensure_ready(self) -> bool:
        """Build the store adapter and use-cases once; later calls reuse them."""
        if self._store is not None:
            return True
        self._store = self._store_factory(self.settings)
        self._log.info("Guest store ready (backend=%s)", self.settings.backend)
        self.uc_load = LoadGuests(self._store)
        self.uc_add = AddGuest(self._store)
        self.uc_update = UpdateGuest(self._store)
        self.uc_export = ExportGuestsCsv()
        return True

    def build_guest_list_controller(
        self,
        notify: Notify,
        vm: Optional[GuestListVM] = None,
    ) -> GuestListController:
        """Create page-scoped state bound to the shared use-cases."""
        self.ensure_ready()
        return GuestListController(
            vm=vm or GuestListVM(),
            load_guests=self.uc_load,
            add_guest=self.uc_add,
            update_guest=self.uc_update,
            export_csv=self.uc_export,
            notify=notify,
        )


__all__ = ["AppController", "build_store"]
