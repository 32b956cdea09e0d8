"""NiceGUI entrypoint for the guest list page."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable, List, Tuple

from nicegui import run, ui

from guestlist.app.controller import AppController
from guestlist.app.guest_list_controller import GuestListController
from guestlist.config import BACKENDS, ConfigError, load_settings
from guestlist.domain.entities import Guest
from guestlist.domain.ports import UseCaseError
from guestlist.utils.logging import configure_root

LOGGER = logging.getLogger(__name__)


class NoticeQueue:
    """Collect notices raised on worker threads; show them on the UI loop."""

    def __init__(self) -> None:
        self._pending: List[Tuple[str, str]] = []

    def __call__(self, message: str, level: str) -> None:
        self._pending.append((message, level))

    def flush(self) -> None:
        pending, self._pending = self._pending, []
        for message, level in pending:
            ui.notify(message, type=level, close_button="OK")


def _install_theme() -> None:
    """Install global CSS tokens for the page."""
    ui.add_head_html(
        """
<style>
.guest-page { max-width: 960px; margin: 0 auto; padding: 16px; }
.guest-card { border: 1px solid #d6dde8; border-radius: 12px; }
</style>
        """
    )


def _build_ui(app_controller: AppController) -> None:
    """Register the NiceGUI page for the guest list."""

    @ui.page("/")
    def index() -> None:
        notices = NoticeQueue()
        controller: GuestListController = app_controller.build_guest_list_controller(notices)
        vm = controller.vm

        @ui.refreshable
        def render_form() -> None:
            with ui.card().classes("guest-card w-full q-pa-md"):
                ui.input(
                    "Nome Completo",
                    value=vm.form_full_name,
                    on_change=lambda e: vm.set_form(full_name=str(e.value or "")),
                ).props("outlined dense").classes("w-full").mark("guest-name")
                ui.checkbox(
                    "Confirmado",
                    value=vm.form_confirmed,
                    on_change=lambda e: vm.set_form(confirmed=bool(e.value)),
                )
                submit = ui.button("Adicionar Convidado", on_click=submit_guest, color="primary")
                if vm.submitting:
                    submit.props("loading")

        @ui.refreshable
        def render_guests() -> None:
            if vm.loading:
                ui.label("Carregando...").classes("w-full text-center")
                return
            with ui.column().classes("w-full q-gutter-xs"):
                with ui.row().classes("w-full text-weight-bold"):
                    ui.label("Nome Completo").classes("col")
                    ui.label("Confirmado").classes("col-2")
                    ui.label("Ações").classes("col-3")
                for guest in vm.guests:
                    _render_row(guest)

        def _render_row(guest: Guest) -> None:
            with ui.row().classes("w-full items-center"):
                if vm.is_editing(guest.id):
                    ui.input(
                        value=vm.edit_full_name,
                        on_change=lambda e: vm.set_edit(full_name=str(e.value or "")),
                    ).props("dense outlined").classes("col")
                    ui.checkbox(
                        value=vm.edit_confirmed,
                        on_change=lambda e: vm.set_edit(confirmed=bool(e.value)),
                    ).classes("col-2")
                    with ui.row().classes("col-3"):
                        save = ui.button("Salvar", on_click=save_edit, color="positive").props("dense")
                        if vm.saving:
                            save.props("loading")
                        ui.button("Cancelar", on_click=cancel_edit).props("dense flat")
                else:
                    ui.label(guest.full_name).classes("col")
                    ui.label(guest.confirmed_label).classes("col-2")
                    with ui.row().classes("col-3"):
                        ui.button(
                            "Editar",
                            on_click=lambda _, g=guest: begin_edit(g),
                        ).props("dense flat")

        def refresh_all() -> None:
            render_form.refresh()
            render_guests.refresh()
            notices.flush()

        async def _in_background(action: Callable[[], Any], mark_busy: Callable[[bool], None]) -> None:
            # flags are also set by the controller, but on the worker thread
            mark_busy(True)
            render_form.refresh()
            render_guests.refresh()
            await run.io_bound(action)
            refresh_all()

        async def load_guests() -> None:
            await _in_background(controller.load, vm.set_loading)

        async def submit_guest() -> None:
            await _in_background(controller.add, vm.set_submitting)

        async def save_edit() -> None:
            await _in_background(controller.save_edit, vm.set_saving)

        def begin_edit(guest: Guest) -> None:
            controller.begin_edit(guest)
            render_guests.refresh()

        def cancel_edit() -> None:
            controller.cancel_edit()
            render_guests.refresh()

        def export_csv() -> None:
            export = controller.export()
            ui.download(export.data, filename=export.filename, media_type=export.media_type)

        # the page must return before the first listing; the timer runs after connect
        vm.set_loading(True)
        with ui.column().classes("guest-page w-full q-gutter-md"):
            ui.label("Gestão de Convidados").classes("text-h5")
            render_form()
            ui.button("Exportar para CSV", on_click=export_csv, color="positive")
            render_guests()

        ui.timer(0.1, load_guests, once=True)


def _parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the guest list web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--backend", choices=BACKENDS, default=None)
    parser.add_argument("--smoke-test", action="store_true")
    parser.add_argument(
        "--export-csv",
        metavar="DIR",
        default=None,
        help="Write lista_convidados.csv for the current list into DIR and exit.",
    )
    return parser.parse_args(argv)


def smoke_test(app_controller: AppController) -> int:
    """Wire everything, load once, and report the outcome without a browser."""
    notices: List[Tuple[str, str]] = []
    controller = app_controller.build_guest_list_controller(
        lambda message, level: notices.append((message, level))
    )
    ok = controller.load()
    print("guestlist-smoke", "ok" if ok else "failed", len(controller.vm.guests))
    return 0 if ok else 1


def export_csv_to(app_controller: AppController, target_dir: str) -> int:
    """Load the guest list and write the CSV file under ``target_dir``."""
    controller = app_controller.build_guest_list_controller(
        lambda message, level: LOGGER.warning("%s", message)
    )
    if not controller.load():
        return 1
    try:
        path = app_controller.uc_export.write(controller.vm.guests, target_dir)
    except UseCaseError as exc:
        LOGGER.error("CSV export failed: %s", exc.message)
        return 1
    print("guestlist-export", path)
    return 0


def main(argv: List[str] | None = None) -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args(argv)
    configure_root()
    try:
        settings = load_settings(backend=args.backend)
    except ConfigError as exc:
        LOGGER.critical("Configuration error: %s", exc)
        sys.exit(2)
    app_controller = AppController(settings)
    app_controller.ensure_ready()
    if args.smoke_test:
        sys.exit(smoke_test(app_controller))
    if args.export_csv:
        sys.exit(export_csv_to(app_controller, args.export_csv))
    _install_theme()
    _build_ui(app_controller)
    ui.run(
        host=args.host,
        port=args.port,
        title="Gestão de Convidados",
        reload=args.reload,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
