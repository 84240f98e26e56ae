"""Utility helpers for feature-flagged debug logging."""

from datetime import datetime
from pathlib import Path
from typing import Any

import config


def log_debug(message: Any) -> None:
    """Append a timestamped debug entry when logging is enabled."""
    if not config.LOG_ENABLED:
        return
    path = Path(config.LOG_FILE_PATH)
    path.parent.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().isoformat(timespec="milliseconds")
    with path.open("a", encoding="utf-8") as log_file:
        log_file.write(f"{timestamp} {message}\n")
