from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal
from urllib.parse import urlparse

LogLevel = Literal["debug", "info", "warning", "error"]

# oauth2-proxy address inside the docker-compose test network
DEFAULT_TARGET_URL = "http://172.30.0.4:4180"


def _getenv(name: str, default: str) -> str:
    return os.environ.get(name, default).strip()


def _getenv_bool(name: str, default: bool) -> bool:
    return _getenv(name, str(default)).lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    target_url: str
    log_level: LogLevel
    log_json: bool


def load_settings() -> Settings:
    target_url = _getenv("TARGET_URL", DEFAULT_TARGET_URL)
    log_level_raw = _getenv("LOG_LEVEL", "info").lower()

    parsed = urlparse(target_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"TARGET_URL must be an absolute http(s) URL (got {target_url!r})")

    if log_level_raw not in ("debug", "info", "warning", "error"):
        raise ValueError(
            f"LOG_LEVEL must be debug|info|warning|error (got {log_level_raw!r})"
        )

    return Settings(  # type: ignore[arg-type]
        target_url=target_url,
        log_level=log_level_raw,
        log_json=_getenv_bool("LOG_JSON", False),
    )
