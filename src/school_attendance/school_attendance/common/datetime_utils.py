from __future__ import annotations

import math
import re
import time
from datetime import datetime, timezone
from typing import Any

from ..core.constants import EPOCH_SECONDS_THRESHOLD

_NUMERIC_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")

_FALLBACK_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y",
    "%a, %d %b %Y %H:%M:%S GMT",
    "%d %b %Y %H:%M:%S",
    "%b %d, %Y %H:%M:%S",
    "%b %d, %Y",
)


def now_millis() -> int:
    """Current wall-clock time in epoch milliseconds.

    Note: Wrapped so tests can patch it.
    """
    return int(time.time() * 1000)


def _to_millis(dt: datetime) -> int:
    # Naive values are read as UTC so results do not depend on the host timezone.
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp() * 1000)


def parse_datetime_text(value: str) -> datetime | None:
    text = value.strip()
    if not text:
        return None

    iso = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def parse_timestamp_ms(raw: Any) -> int:
    """Normalize a created-at value to epoch milliseconds, 0 when unusable."""
    if raw is None or isinstance(raw, bool):
        return 0

    if isinstance(raw, (int, float)):
        number = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return 0
        if _NUMERIC_RE.match(text):
            number = float(text)
        else:
            dt = parse_datetime_text(text)
            if dt is None:
                return 0
            try:
                return _to_millis(dt)
            except (OverflowError, OSError, ValueError):
                return 0

    if not math.isfinite(number):
        return 0
    if number < EPOCH_SECONDS_THRESHOLD:
        return int(number * 1000)
    return int(number)
