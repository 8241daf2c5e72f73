from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_timestamp_ms
from ..common.fields import pick
from ..core.constants import (
    CLASS_NAME_KEYS,
    CREATED_AT_KEYS,
    PERIOD_KEYS,
    STATUS_KEYS,
    STUDENT_ID_KEYS,
    STUDENT_NAME_KEYS,
    TEACHER_NAME_KEYS,
)
from ..core.enums import AttendanceStatus
from .model import AttendanceEntry


def normalize_status(raw: Any) -> Optional[AttendanceStatus]:
    """Trim and lower-case a raw status; None when it is not a known status."""
    if raw is None:
        return None
    try:
        return AttendanceStatus(str(raw).strip().lower())
    except ValueError:
        return None


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def decode_row(row: Mapping[str, Any]) -> Optional[AttendanceEntry]:
    """Decode a parsed CSV row, or None when it cannot take part in any count."""
    if not isinstance(row, Mapping):
        return None

    student_id = _text(pick(row, STUDENT_ID_KEYS))
    if not student_id:
        return None

    status = normalize_status(pick(row, STATUS_KEYS))
    if status is None:
        return None

    return AttendanceEntry(
        student_id=student_id,
        status=status,
        timestamp=parse_timestamp_ms(pick(row, CREATED_AT_KEYS)),
        student_name=_text(pick(row, STUDENT_NAME_KEYS)),
        class_name=_text(pick(row, CLASS_NAME_KEYS)),
        period=_text(pick(row, PERIOD_KEYS)),
        teacher_name=_text(pick(row, TEACHER_NAME_KEYS)),
    )
