from __future__ import annotations

from guestlist.domain.entities import Guest
from guestlist.viewmodels.guest_list_vm import GuestListVM


def test_begin_edit_copies_fields_and_cancel_clears() -> None:
    vm = GuestListVM()
    guest = Guest(id=3, full_name="Ana", confirmed=True)

    vm.begin_edit(guest)
    vm.set_edit(full_name="Ana Maria")

    assert vm.is_editing()
    assert vm.is_editing(3)
    assert not vm.is_editing(4)
    assert (vm.edit_full_name, vm.edit_confirmed) == ("Ana Maria", True)
    assert guest.full_name == "Ana"

    vm.clear_edit()

    assert vm.editing_id is None
    assert vm.edit_full_name == ""


def test_form_set_and_clear() -> None:
    vm = GuestListVM()

    vm.set_form("Bruno", True)
    assert (vm.form_full_name, vm.form_confirmed) == ("Bruno", True)

    vm.clear_form()
    assert (vm.form_full_name, vm.form_confirmed) == ("", False)


def test_changes_notify_listener() -> None:
    events = []
    vm = GuestListVM(on_changed=lambda: events.append("changed"))

    vm.replace_guests([Guest(id=1, full_name="Ana")])
    vm.set_loading(True)

    assert len(events) == 2
    assert [g.full_name for g in vm.guests] == ["Ana"]
