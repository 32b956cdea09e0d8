"""Typed failures raised by the guest store adapters.

PostgREST answers errors with a flat JSON object::

    {"code": "42501", "message": "...", "details": "...", "hint": "..."}

``code`` is a PostgreSQL SQLSTATE (``42501``, ``23502``...) or a PostgREST
code (``PGRST301``...). Anything else (proxy HTML pages, empty bodies) is kept
as a trimmed text message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

_TEXT_LIMIT = 400


@dataclass(frozen=True)
class PostgrestError:
    """Error body returned by PostgREST."""

    message: Optional[str] = None
    code: Optional[str] = None
    details: Optional[str] = None
    hint: Optional[str] = None

    @classmethod
    def from_response(cls, resp: Any) -> "PostgrestError":
        try:
            data = resp.json()
        except ValueError:
            return cls(message=_text(getattr(resp, "text", "")))
        if not isinstance(data, dict):
            return cls(message=_text(data))
        return cls(
            message=_text(data.get("message")),
            code=_text(data.get("code")),
            details=_text(data.get("details")),
            hint=_text(data.get("hint")),
        )

    @property
    def explanation(self) -> Optional[str]:
        """Hint for the user, falling back to the row-level details."""
        return self.hint or self.details

    def describe(self, ctx: str, status: int) -> str:
        if self.message:
            return f"{ctx}: {self.message} (HTTP {status})"
        return f"{ctx}: HTTP {status}"


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text[:_TEXT_LIMIT] or None


class ApiError(RuntimeError):
    """Base class for guest store adapter failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        error: Optional[PostgrestError] = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.error = error or PostgrestError()
        self.context = context

    @property
    def code(self) -> Optional[str]:
        return self.error.code

    @property
    def hint(self) -> Optional[str]:
        return self.error.explanation


class ApiClientError(ApiError):
    """HTTP 4xx from the store API (bad key, RLS rejection, bad column...)."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        error: Optional[PostgrestError] = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, status=status, error=error, context=context)


class ApiServerError(ApiError):
    """HTTP 5xx from the store API."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        error: Optional[PostgrestError] = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, status=status, error=error, context=context)


class ApiTimeoutError(ApiError):
    """Transport level timeout or connectivity failure."""

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message, context=context)


# PostgREST code for "no rows matched the filter"
NOT_FOUND_CODE = "PGRST116"


def guest_not_found(ctx: str) -> ApiClientError:
    return ApiClientError(
        f"{ctx}: guest not found",
        status=404,
        error=PostgrestError(message="guest not found", code=NOT_FOUND_CODE),
        context=ctx,
    )


__all__ = [
    "ApiClientError",
    "ApiError",
    "ApiServerError",
    "ApiTimeoutError",
    "NOT_FOUND_CODE",
    "PostgrestError",
    "guest_not_found",
]
