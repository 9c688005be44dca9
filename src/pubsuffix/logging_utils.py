from __future__ import annotations

import logging
import logging.config
from typing import Any

from pubsuffix.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def build_dict_config(level: str | None = None) -> dict[str, Any]:
    level = (level or get_log_level()).upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": LOG_FORMAT}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "standard",
            }
        },
        "loggers": {
            "": {"handlers": ["console"], "level": level},
            "uvicorn.access": {"level": "WARNING"},
        },
    }


def configure_logging(level: str | None = None) -> None:
    logging.config.dictConfig(build_dict_config(level))
