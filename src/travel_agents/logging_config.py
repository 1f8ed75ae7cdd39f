"""Process-wide logging setup."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Network clients that are chatty at INFO.
NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "openai._base_client",
    "urllib3",
    "primp",
)


def configure_logging(level: str | int | None = None) -> None:
    resolved = level if level is not None else os.getenv("LOG_LEVEL", "INFO")
    if isinstance(resolved, str):
        resolved = getattr(logging, resolved.upper(), logging.INFO)

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(max(resolved, logging.WARNING))
