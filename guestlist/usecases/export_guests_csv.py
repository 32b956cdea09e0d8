from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Optional

from ..domain.csv_export import CSV_FILENAME, CSV_MIME_TYPE, to_csv
from ..domain.entities import Guest
from ..domain.ports import UseCaseError

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CsvExport:
    """Rendered export ready for a browser download."""

    content: str
    filename: str = CSV_FILENAME
    media_type: str = CSV_MIME_TYPE

    @property
    def data(self) -> bytes:
        return self.content.encode("utf-8")


@dataclass
class ExportGuestsCsv:
    """Render the in-memory collection; never touches the store."""

    filename: str = CSV_FILENAME

    def __call__(self, guests: Iterable[Guest]) -> CsvExport:
        return CsvExport(content=to_csv(list(guests)), filename=self.filename)

    def write(self, guests: Iterable[Guest], target_dir: Optional[str] = None) -> str:
        """Write the CSV under ``target_dir`` (cwd by default) and return the path."""
        export = self(guests)
        path = os.path.join(target_dir or ".", export.filename)
        try:
            with open(path, "w", encoding="utf-8", newline="") as fh:
                fh.write(export.content)
        except OSError as exc:
            raise UseCaseError("EXPORT_FAILED", f"Cannot write {path}: {exc}") from exc
        _log.info("Exported guest list to %s", path)
        return path
