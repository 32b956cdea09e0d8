"""Shared HTTP transport utilities for the guest store REST adapter.

This module provides a thin wrapper around ``requests.Session`` so the adapter
shares one timeout policy, one retry policy, and the Supabase key headers.

Dependencies:
    - ``requests`` for network I/O.
    - ``guestlist.adapters.api_errors.ApiTimeoutError`` for typed transport failures.

Call context:
    - Constructed by ``guestlist/adapters/guest_store_rest.py``.
    - Used only inside adapter methods; use cases interact through ports.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from guestlist.adapters.api_errors import ApiError, ApiTimeoutError

_log = logging.getLogger(__name__)


@dataclass
class HttpConfig:
    """Timeout and retry configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Timeout in seconds for each JSON API call.
        retries: Number of retry attempts after the initial GET request.
            Writes are never retried so a slow insert cannot be duplicated.
    """
    request_timeout_s: int = 10
    retries: int = 2


class RetryingSession:
    """Shared requests wrapper with Supabase key headers and GET retries.

    This class is transport-only. Callers provide endpoint URLs and decide how
    to map non-2xx responses into typed adapter errors.
    """

    def __init__(self, api_key: Optional[str], cfg: HttpConfig) -> None:
        """Create a retry-enabled session.

        Args:
            api_key: Anonymous (or service) key sent as ``apikey`` and bearer token.
            cfg: Shared timeout and retry settings.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        self.session = requests.Session()
        self.api_key = api_key
        self.cfg = cfg

    def _headers(
        self,
        accept: str = "application/json",
        json_body: bool = False,
        prefer: Optional[str] = None,
    ) -> Dict[str, str]:
        headers = {"Accept": accept}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        if json_body:
            headers["Content-Type"] = "application/json"
        if prefer:
            headers["Prefer"] = prefer
        return headers

    def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """Send a GET request with retries on timeout/connectivity failures.

        Raises:
            ApiTimeoutError: If all attempts fail with timeout/connection errors.
            ApiError: For any other ``requests`` failure.
        """
        context = f"GET {url}"
        last_err: ApiTimeoutError | None = None
        attempts = self.cfg.retries + 1
        for attempt in range(attempts):
            try:
                return self.session.get(
                    url,
                    params=params,
                    headers=self._headers(),
                    timeout=timeout or self.cfg.request_timeout_s,
                )
            except (req_exc.Timeout, req_exc.ConnectionError):
                _log.debug("%s failed (attempt %d/%d)", context, attempt + 1, attempts)
                last_err = ApiTimeoutError(f"Timeout contacting {url}", context=context)
            except req_exc.RequestException as exc:
                raise ApiError(str(exc), context=context) from exc
        raise last_err

    def post(
        self,
        url: str,
        *,
        json_body: Any = None,
        prefer: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """Send a single JSON POST request.

        Raises:
            ApiTimeoutError: On timeout/connection errors.
            ApiError: For any other ``requests`` failure.
        """
        return self._send("POST", url, json_body=json_body, prefer=prefer, timeout=timeout)

    def patch(
        self,
        url: str,
        *,
        json_body: Any = None,
        params: Optional[Dict[str, Any]] = None,
        prefer: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """Send a single JSON PATCH request (no retries)."""
        return self._send(
            "PATCH", url, json_body=json_body, params=params, prefer=prefer, timeout=timeout
        )

    def _send(
        self,
        method: str,
        url: str,
        *,
        json_body: Any = None,
        params: Optional[Dict[str, Any]] = None,
        prefer: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> requests.Response:
        context = f"{method} {url}"
        data = None if json_body is None else json.dumps(json_body)
        sender = self.session.post if method == "POST" else self.session.patch
        try:
            return sender(
                url,
                data=data,
                params=params,
                headers=self._headers(json_body=json_body is not None, prefer=prefer),
                timeout=timeout or self.cfg.request_timeout_s,
            )
        except (req_exc.Timeout, req_exc.ConnectionError) as exc:
            raise ApiTimeoutError(f"Timeout contacting {url}", context=context) from exc
        except req_exc.RequestException as exc:
            raise ApiError(str(exc), context=context) from exc


__all__ = ["HttpConfig", "RetryingSession"]
