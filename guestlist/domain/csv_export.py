"""Plain-text CSV rendering of the guest list.

Rows are joined literally: names containing commas or quotes are written
as-is without quoting, matching the spreadsheet files users already exchange.
"""

from __future__ import annotations

from typing import Iterable

from .entities import Guest

CSV_FILENAME = "lista_convidados.csv"
CSV_MIME_TYPE = "text/csv;charset=utf-8"
CSV_HEADER = "Nome Completo,Confirmado"


def to_csv(guests: Iterable[Guest]) -> str:
    """Render ``guests`` in the given order.

    The header is always followed by a newline; data rows are separated by
    newlines with no trailing newline after the last one.
    """
    rows = "\n".join(f"{guest.full_name},{guest.confirmed_label}" for guest in guests)
    return f"{CSV_HEADER}\n{rows}"


__all__ = ["CSV_FILENAME", "CSV_HEADER", "CSV_MIME_TYPE", "to_csv"]
