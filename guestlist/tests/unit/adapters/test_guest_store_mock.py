from __future__ import annotations

import pytest

from guestlist.adapters.api_errors import ApiClientError, ApiTimeoutError
from guestlist.adapters.guest_store_mock import GuestStoreMock
from guestlist.domain.entities import GuestDraft


def test_mock_assigns_sequential_ids_and_timestamps() -> None:
    store = GuestStoreMock()
    store.insert_guest(GuestDraft("Ana"))
    store.insert_guest(GuestDraft("Bruno", True))

    guests = store.list_guests()

    assert [g.id for g in guests] == [1, 2]
    assert guests[0].created_at < guests[1].created_at


def test_mock_fail_next_raises_once() -> None:
    store = GuestStoreMock()
    store.fail_next = ApiTimeoutError("down")

    with pytest.raises(ApiTimeoutError):
        store.list_guests()
    assert store.list_guests() == []
    assert store.calls == ["list_guests", "list_guests"]


def test_mock_update_unknown_raises_not_found() -> None:
    with pytest.raises(ApiClientError):
        GuestStoreMock().update_guest(5, GuestDraft("x"))


def test_mock_update_with_text_id_is_not_found() -> None:
    store = GuestStoreMock()
    store.insert_guest(GuestDraft("Ana"))

    with pytest.raises(ApiClientError) as info:
        store.update_guest("7c9e6679-7425-40de-944b-e07fc1f90ae7", GuestDraft("x"))

    assert info.value.status == 404
    assert [g.full_name for g in store.list_guests()] == ["Ana"]
