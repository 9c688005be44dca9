from __future__ import annotations

import os
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = REPO_ROOT / "data"
REPORTS_DIR = DATA_DIR / "reports"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SERVICE_HOST = "127.0.0.1"
DEFAULT_SERVICE_PORT = 8788


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip(), 0)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def get_ascii_idna_option() -> int:
    return _int_from_env("PUBSUFFIX_ASCII_IDNA_OPTION", 0)


def get_unicode_idna_option() -> int:
    return _int_from_env("PUBSUFFIX_UNICODE_IDNA_OPTION", 0)


def get_log_level() -> str:
    return os.getenv("PUBSUFFIX_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_service_host() -> str:
    return os.getenv("PUBSUFFIX_SERVICE_HOST", DEFAULT_SERVICE_HOST)


def get_service_port() -> int:
    return _int_from_env("PUBSUFFIX_SERVICE_PORT", DEFAULT_SERVICE_PORT)
