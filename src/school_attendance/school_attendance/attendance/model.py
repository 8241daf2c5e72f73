from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEntry:
    """One usable row of the attendance export (student id and known status)."""

    student_id: str
    status: AttendanceStatus
    timestamp: int
    student_name: Optional[str] = None
    class_name: Optional[str] = None
    period: Optional[str] = None
    teacher_name: Optional[str] = None


@dataclass(frozen=True)
class LatestRecord:
    """Winning record for a student (overall or within one period)."""

    student_id: str
    timestamp: int
    status: AttendanceStatus
    student_name: Optional[str] = None
    class_name: Optional[str] = None
    period: Optional[str] = None
    teacher_name: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: AttendanceEntry) -> "LatestRecord":
        return cls(
            student_id=entry.student_id,
            timestamp=entry.timestamp,
            status=entry.status,
            student_name=entry.student_name,
            class_name=entry.class_name,
            period=entry.period,
            teacher_name=entry.teacher_name,
        )
