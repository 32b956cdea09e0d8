"""Domain package exports for guest value objects and ports."""

from .csv_export import CSV_FILENAME, CSV_HEADER, CSV_MIME_TYPE, to_csv
from .entities import Guest, GuestDraft, GuestId, parse_timestamp
from .ports import GuestStorePort, UseCaseError

__all__ = [
    "CSV_FILENAME",
    "CSV_HEADER",
    "CSV_MIME_TYPE",
    "Guest",
    "GuestDraft",
    "GuestId",
    "GuestStorePort",
    "UseCaseError",
    "parse_timestamp",
    "to_csv",
]
