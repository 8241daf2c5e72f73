from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Any

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(settings: Any) -> None:
    """Root logging for the web app: console always, rotating file when LOG_FILE is set."""
    level = getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), logging.INFO)
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    log_file = getattr(settings, "LOG_FILE", "")
    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB per file
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)

    # Request lines are noise; keep warnings and errors only.
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
