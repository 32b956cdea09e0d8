from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests

from guestlist.domain.entities import Guest, GuestDraft, GuestId
from guestlist.domain.ports import GuestStorePort

from .api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    PostgrestError,
    guest_not_found,
)
from .http_client import HttpConfig, RetryingSession


class GuestStoreRestAdapter(GuestStorePort):
    """PostgREST (Supabase) adapter for the ``guests`` table.

    One instance owns one ``requests.Session``; the app builds it once at
    startup and shares it with every use case.
    """

    REST_PREFIX = "/rest/v1"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        table: str = "guests",
        request_timeout_s: int = 10,
        retries: int = 2,
    ) -> None:
        if not base_url:
            raise ValueError("GuestStoreRestAdapter requires a base URL")
        if not api_key:
            raise ValueError("GuestStoreRestAdapter requires an API key")
        self.base_url = base_url.rstrip("/")
        self.table = table
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s, retries=retries)
        self.session = RetryingSession(api_key, self.cfg)
        self._log = logging.getLogger(__name__)

    # ---------- GuestStorePort ----------

    def list_guests(self) -> List[Guest]:
        url = self._table_url()
        self._log.debug("Listing guests from %s", url)
        resp = self.session.get(url, params={"select": "*", "order": "created_at.asc"})
        self._ensure_ok(resp, "list_guests")
        data = self._json_any(resp, "list_guests")
        if not isinstance(data, list):
            raise ApiError("list_guests: expected list response", context="list_guests")
        return [Guest.from_row(row) for row in data if isinstance(row, dict)]

    def insert_guest(self, draft: GuestDraft) -> None:
        resp = self.session.post(
            self._table_url(),
            json_body=[draft.to_row()],
            prefer="return=minimal",
        )
        self._ensure_ok(resp, "insert_guest")

    def update_guest(self, guest_id: GuestId, draft: GuestDraft) -> None:
        ctx = f"update_guest[{guest_id}]"
        resp = self.session.patch(
            self._table_url(),
            params={"id": f"eq.{guest_id}"},
            json_body=draft.to_row(),
            prefer="return=representation",
        )
        self._ensure_ok(resp, ctx)
        updated = self._json_any(resp, ctx)
        # PostgREST answers 200 with [] when the filter matched nothing
        if isinstance(updated, list) and not updated:
            raise guest_not_found(ctx)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _table_url(self) -> str:
        return f"{self.base_url}{self.REST_PREFIX}/{self.table}"

    @staticmethod
    def _ensure_ok(resp: requests.Response, ctx: str) -> None:
        status = resp.status_code
        if 200 <= status < 300:
            return
        error = PostgrestError.from_response(resp)
        message = error.describe(ctx, status)
        if 400 <= status < 500:
            raise ApiClientError(message, status=status, error=error, context=ctx)
        if 500 <= status < 600:
            raise ApiServerError(message, status=status, error=error, context=ctx)
        raise ApiError(message, status=status, error=error, context=ctx)

    @staticmethod
    def _json_any(resp: requests.Response, ctx: str) -> Optional[Any]:
        if not getattr(resp, "text", "") and resp.status_code in (201, 204):
            return None
        try:
            return resp.json()
        except ValueError as exc:
            snippet = getattr(resp, "text", "")[:400]
            raise ApiError(
                f"{ctx}: invalid JSON response: {snippet}",
                status=resp.status_code,
                context=ctx,
            ) from exc


__all__ = ["GuestStoreRestAdapter"]
