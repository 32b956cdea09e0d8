"""Root logger setup for the guest list runtime."""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
_TRUTHY = {"1", "true", "yes", "on"}


def _level_from_env(environ: Mapping[str, str]) -> Optional[int]:
    explicit = (environ.get("GUESTLIST_LOG_LEVEL") or "").strip()
    if explicit:
        if explicit.isdigit():
            return int(explicit)
        level = logging.getLevelName(explicit.upper())
        # unknown names come back as "Level X"
        return level if isinstance(level, int) else logging.INFO
    if (environ.get("GUESTLIST_DEBUG") or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def configure_root(
    default_level: int = logging.INFO,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Configure the root logger and return the effective level.

    ``GUESTLIST_LOG_LEVEL`` (name or number) wins over ``GUESTLIST_DEBUG``,
    which wins over ``default_level``.
    """
    env = os.environ if environ is None else environ
    effective = _level_from_env(env) or default_level

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(effective)
    # per-request connection chatter from requests
    logging.getLogger("urllib3").setLevel(
        logging.DEBUG if effective <= logging.DEBUG else logging.WARNING
    )
    return effective


__all__ = ["configure_root"]
