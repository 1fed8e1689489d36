"""Runtime settings read from JSONMEND_* environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


def _get_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    # Arrays longer than this are sampled when collecting child paths.
    max_child_path_items: int = 10000
    preview_chars: int = 5000
    server_name: Optional[str] = None
    server_port: Optional[int] = None


@lru_cache
def get_settings() -> Settings:
    return Settings(
        log_level=os.environ.get("JSONMEND_LOG_LEVEL", "INFO").upper(),
        max_child_path_items=_get_int("JSONMEND_MAX_CHILD_PATH_ITEMS", 10000),
        preview_chars=_get_int("JSONMEND_PREVIEW_CHARS", 5000),
        server_name=os.environ.get("JSONMEND_SERVER_NAME") or None,
        server_port=_get_int("JSONMEND_SERVER_PORT", 0) or None,
    )
