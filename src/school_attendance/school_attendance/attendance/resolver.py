from __future__ import annotations

from typing import Dict, Iterable, Optional

from ..core.enums import AttendanceStatus
from .model import AttendanceEntry, LatestRecord


def status_rank(status: AttendanceStatus) -> int:
    """Tie-break rank: a decided status beats pending."""
    return 0 if status == AttendanceStatus.PENDING else 1


def supersedes(candidate: LatestRecord, current: Optional[LatestRecord]) -> bool:
    if current is None:
        return True
    if candidate.timestamp != current.timestamp:
        return candidate.timestamp > current.timestamp
    return status_rank(candidate.status) > status_rank(current.status)


class LatestRecordResolver:
    """Keeps one latest record per student, and per student within each period.

    Both maps preserve first-insertion order of their keys; replacing a record
    keeps the student's original position.
    """

    def __init__(self):
        self.overall: Dict[str, LatestRecord] = {}
        self.by_period: Dict[str, Dict[str, LatestRecord]] = {}

    def offer(self, entry: AttendanceEntry) -> None:
        record = LatestRecord.from_entry(entry)

        if supersedes(record, self.overall.get(entry.student_id)):
            self.overall[entry.student_id] = record

        if entry.period:
            students = self.by_period.setdefault(entry.period, {})
            if supersedes(record, students.get(entry.student_id)):
                students[entry.student_id] = record

    def period(self, period: str) -> Dict[str, LatestRecord]:
        return self.by_period.get(period, {})

    @classmethod
    def resolve(cls, entries: Iterable[AttendanceEntry]) -> "LatestRecordResolver":
        resolver = cls()
        for entry in entries:
            resolver.offer(entry)
        return resolver
