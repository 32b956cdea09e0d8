from __future__ import annotations

import sqlite3

import pytest

from guestlist.adapters.api_errors import ApiClientError
from guestlist.adapters.guest_store_sqlite import GuestStoreSqlite
from guestlist.domain.entities import GuestDraft


@pytest.fixture()
def store(tmp_path):
    store = GuestStoreSqlite(str(tmp_path / "guests.db"))
    yield store
    store.close()


def test_insert_assigns_ids_and_lists_in_creation_order(store: GuestStoreSqlite) -> None:
    store.insert_guest(GuestDraft("Ana", True))
    store.insert_guest(GuestDraft("Bruno"))

    guests = store.list_guests()

    assert [g.full_name for g in guests] == ["Ana", "Bruno"]
    assert [g.confirmed for g in guests] == [True, False]
    assert guests[0].id != guests[1].id
    assert all(g.created_at is not None for g in guests)


def test_update_keeps_id_and_created_at(store: GuestStoreSqlite) -> None:
    store.insert_guest(GuestDraft("Ana"))
    before = store.list_guests()[0]

    store.update_guest(before.id, GuestDraft("Ana Maria", True))

    after = store.list_guests()[0]
    assert after.id == before.id
    assert after.created_at == before.created_at
    assert (after.full_name, after.confirmed) == ("Ana Maria", True)


def test_update_unknown_id_raises(store: GuestStoreSqlite) -> None:
    with pytest.raises(ApiClientError):
        store.update_guest(123, GuestDraft("x"))


def test_data_survives_reopen(tmp_path) -> None:
    path = str(tmp_path / "guests.db")
    first = GuestStoreSqlite(path)
    first.insert_guest(GuestDraft("Ana"))
    first.close()

    second = GuestStoreSqlite(path)
    try:
        assert [g.full_name for g in second.list_guests()] == ["Ana"]
    finally:
        second.close()


def test_schema_matches_expected_columns(tmp_path) -> None:
    path = tmp_path / "guests.db"
    GuestStoreSqlite(str(path)).close()

    with sqlite3.connect(path) as conn:
        columns = [row[1] for row in conn.execute("PRAGMA table_info(guests)")]
    assert columns == ["id", "full_name", "confirmed", "created_at"]
