from __future__ import annotations

import pytest

from guestlist.web_ui import main as web_main


def test_smoke_test_with_memory_backend(capsys) -> None:
    with pytest.raises(SystemExit) as info:
        web_main.main(["--backend", "memory", "--smoke-test"])

    assert info.value.code == 0
    assert "guestlist-smoke ok 0" in capsys.readouterr().out


def test_missing_supabase_config_halts_startup(monkeypatch) -> None:
    for name in (
        "SUPABASE_URL",
        "SUPABASE_ANON_KEY",
        "VITE_SUPABASE_URL",
        "VITE_SUPABASE_ANON_KEY",
        "GUESTLIST_BACKEND",
    ):
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(SystemExit) as info:
        web_main.main(["--smoke-test"])

    assert info.value.code == 2


def test_notice_queue_collects_until_flushed() -> None:
    queue = web_main.NoticeQueue()

    queue("Erro ao carregar convidados!", "negative")

    assert queue._pending == [("Erro ao carregar convidados!", "negative")]


def test_export_csv_writes_file_for_current_list(tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as info:
        web_main.main(["--backend", "memory", "--export-csv", str(tmp_path)])

    assert info.value.code == 0
    target = tmp_path / "lista_convidados.csv"
    assert target.read_text(encoding="utf-8") == "Nome Completo,Confirmado\n"
    assert str(target) in capsys.readouterr().out


def test_export_csv_into_missing_directory_fails(tmp_path) -> None:
    with pytest.raises(SystemExit) as info:
        web_main.main(["--backend", "memory", "--export-csv", str(tmp_path / "missing")])

    assert info.value.code == 1
