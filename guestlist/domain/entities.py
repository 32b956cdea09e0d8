from __future__ import annotations

"""Guest value objects shared across adapters, use-cases, and view models."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

GuestId = Union[int, str]


@dataclass(frozen=True)
class GuestDraft:
    """Fields submitted by the user before the store assigns an identity."""

    full_name: str
    """Display name of the invitee; must be non-empty after trimming."""

    confirmed: bool = False
    """Whether the guest confirmed attendance."""

    def __post_init__(self) -> None:
        if not isinstance(self.full_name, str) or not self.full_name.strip():
            raise ValueError("full_name must be a non-empty string.")
        object.__setattr__(self, "full_name", self.full_name.strip())
        object.__setattr__(self, "confirmed", bool(self.confirmed))

    def to_row(self) -> dict:
        """Return the column mapping written by insert/update calls."""
        return {"full_name": self.full_name, "confirmed": self.confirmed}


@dataclass(frozen=True)
class Guest:
    """Persisted guest record as returned by the store."""

    id: GuestId
    """Store-assigned identifier, unique and immutable."""

    full_name: str
    confirmed: bool = False

    created_at: Optional[datetime] = None
    """Store-assigned creation timestamp (timezone-aware when known)."""

    def __post_init__(self) -> None:
        if self.id is None or (isinstance(self.id, str) and not self.id.strip()):
            raise ValueError("Guest requires a store-assigned id.")
        object.__setattr__(self, "confirmed", bool(self.confirmed))

    @property
    def confirmed_label(self) -> str:
        return "Sim" if self.confirmed else "Não"

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Guest":
        """Build a guest from a store row (PostgREST JSON or SQLite mapping)."""
        if "id" not in row:
            raise ValueError("Guest row is missing 'id'.")
        # the local database variant historically used camelCase columns
        name = row.get("full_name")
        if name is None:
            name = row.get("fullName", "")
        return cls(
            id=row["id"],
            full_name=str(name),
            confirmed=_coerce_bool(row.get("confirmed")),
            created_at=parse_timestamp(row.get("created_at")),
        )


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "t", "yes", "sim"}
    return bool(value)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse ISO-8601 text from the store into an aware ``datetime``.

    Naive timestamps are assumed to be UTC. ``None``/empty values stay ``None``.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


__all__ = ["Guest", "GuestDraft", "GuestId", "parse_timestamp"]
