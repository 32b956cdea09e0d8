"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations


from typing import Optional

from guestlist.adapters.api_errors import (
    NOT_FOUND_CODE,
    ApiClientError,
    ApiError,
    ApiServerError,
    ApiTimeoutError,
)
from guestlist.domain.ports import UseCaseError

# 42501 insufficient_privilege (row level security); PGRST3xx are JWT failures
_AUTH_CODES = ("42501",)
_AUTH_CODE_PREFIX = "PGRST3"
# SQLSTATE classes 22 (data exception) and 23 (integrity constraint violation)
_INVALID_DATA_CLASSES = ("22", "23")


def map_api_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map store exceptions to stable UseCaseError codes.

    The PostgREST error code wins over the HTTP status when both are known,
    since row level security rejections arrive as 401, 403 or 404 depending
    on the request.

    Args:
        exc: Exception raised by a ``GuestStorePort`` call.
        default_code: Code used for exceptions outside the adapter hierarchy.
        default_message: Optional message for those exceptions.

    Returns:
        UseCaseError carrying a stable code and a user-readable message.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ApiTimeoutError):
        return UseCaseError("REQUEST_TIMEOUT", "Request timed out. Check connection.")
    if isinstance(exc, ApiClientError):
        status = exc.status or 0
        code = exc.code or ""
        if code in _AUTH_CODES or code.startswith(_AUTH_CODE_PREFIX) or status in (401, 403):
            return UseCaseError("AUTH_FAILED", "Auth failed / API key invalid.")
        if code == NOT_FOUND_CODE or status == 404:
            return UseCaseError("NOT_FOUND", _compose_error_message("Guest not found", exc.hint))
        if code[:2] in _INVALID_DATA_CLASSES or status in (400, 422):
            return UseCaseError(
                "INVALID_PARAMS",
                _compose_error_message("Invalid parameters", exc.hint),
            )
        label = f"Request failed (HTTP {status})" if status else "Request failed"
        return UseCaseError("REQUEST_FAILED", _compose_error_message(label, exc.hint))
    if isinstance(exc, ApiServerError):
        return UseCaseError("SERVER_ERROR", "Store error, try again.")
    if isinstance(exc, ApiError):
        return UseCaseError("API_ERROR", str(exc))

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_api_error"]
