from __future__ import annotations

from guestlist.adapters.guest_store_mock import GuestStoreMock
from guestlist.adapters.guest_store_rest import GuestStoreRestAdapter
from guestlist.adapters.guest_store_sqlite import GuestStoreSqlite
from guestlist.app.controller import AppController, build_store
from guestlist.config import StoreSettings


def test_controller_ensure_ready_wires_usecases_once() -> None:
    built = []

    def factory(settings):
        store = GuestStoreMock()
        built.append(store)
        return store

    controller = AppController(StoreSettings(backend="memory"), store_factory=factory)

    assert controller.ensure_ready() is True
    assert controller.ensure_ready() is True
    assert len(built) == 1
    assert controller.store is built[0]
    assert controller.uc_load is not None
    assert controller.uc_add is not None
    assert controller.uc_update is not None
    assert controller.uc_export is not None


def test_page_controllers_share_the_store_but_not_state() -> None:
    controller = AppController(StoreSettings(backend="memory"))
    first = controller.build_guest_list_controller(lambda message, level: None)
    second = controller.build_guest_list_controller(lambda message, level: None)

    first.add("Ana")
    second.load()

    assert first.vm is not second.vm
    assert [g.full_name for g in second.vm.guests] == ["Ana"]


def test_build_store_selects_backend(tmp_path) -> None:
    rest = build_store(StoreSettings(url="https://x.supabase.co", api_key="k"))
    sqlite_store = build_store(StoreSettings(backend="sqlite", sqlite_path=str(tmp_path / "g.db")))
    memory = build_store(StoreSettings(backend="memory"))

    assert isinstance(rest, GuestStoreRestAdapter)
    assert isinstance(sqlite_store, GuestStoreSqlite)
    assert isinstance(memory, GuestStoreMock)
    sqlite_store.close()
