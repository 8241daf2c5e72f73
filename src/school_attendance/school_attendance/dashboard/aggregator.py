from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..attendance.model import LatestRecord
from ..attendance.normalizers import decode_row
from ..attendance.resolver import LatestRecordResolver
from ..common.csv_text import parse_csv
from ..common.datetime_utils import now_millis
from ..core.constants import ACTIVITY_LIMIT, ACTIVITY_TITLE, RECOGNIZED_PERIODS
from ..core.enums import AttendanceStatus
from ..substitutes.service import count_distinct_substitutes
from .model import AbsentStudent, ActivityItem, DashboardSummary, PeriodStats

logger = logging.getLogger(__name__)


def percent(part: int, total: int) -> int:
    """Whole percentage, halves rounded up; 0 for an empty total."""
    if not total:
        return 0
    return int(math.floor(part / total * 100 + 0.5))


def _period_stats(students: Mapping[str, LatestRecord]) -> PeriodStats:
    present = sum(1 for r in students.values() if r.status == AttendanceStatus.PRESENT)
    absent = sum(1 for r in students.values() if r.status == AttendanceStatus.ABSENT)
    total = len(students)
    return PeriodStats(
        present=present,
        absent=absent,
        total=total,
        present_pct=percent(present, total),
        absent_pct=percent(absent, total),
    )


def _activity_detail(student: AbsentStudent) -> str:
    parts = [student.name or "", student.class_name or "", f"Period {student.period}" if student.period else ""]
    return " - ".join(p for p in parts if p)


class DashboardAggregator:
    """Pure computation of the live dashboard summary.

    No I/O and no failure modes: malformed text or payloads degrade to zeros.
    """

    def __init__(self, *, periods: Sequence[str] = RECOGNIZED_PERIODS, activity_limit: int = ACTIVITY_LIMIT):
        self._periods = tuple(periods)
        self._activity_limit = int(activity_limit)

    def summarize(self, csv_text: Optional[str], subs_payload: Any = None, *, now_ms: Optional[int] = None) -> DashboardSummary:
        rows = parse_csv(csv_text or "")
        return self.summarize_rows(rows, subs_payload, now_ms=now_ms)

    def summarize_rows(
        self,
        rows: Sequence[Mapping[str, Any]],
        subs_payload: Any = None,
        *,
        now_ms: Optional[int] = None,
    ) -> DashboardSummary:
        now = now_millis() if now_ms is None else int(now_ms)

        entries = [e for e in (decode_row(r) for r in rows) if e is not None]
        resolver = LatestRecordResolver.resolve(entries)

        overall = _period_stats(resolver.overall)
        absent_students = [
            AbsentStudent(
                id=r.student_id,
                name=r.student_name,
                class_name=r.class_name,
                period=r.period,
                teacher=r.teacher_name,
            )
            for r in resolver.overall.values()
            if r.status == AttendanceStatus.ABSENT
        ]

        period_stats: Dict[str, PeriodStats] = {p: _period_stats(resolver.period(p)) for p in self._periods}

        activity: List[ActivityItem] = [
            ActivityItem(id=s.id, title=ACTIVITY_TITLE, detail=_activity_detail(s), created_at=now)
            for s in absent_students[: self._activity_limit]
        ]

        logger.debug(
            "Summarized %d rows (%d usable): total=%d present=%d absent=%d",
            len(rows), len(entries), overall.total, overall.present, overall.absent,
        )

        return DashboardSummary(
            present=overall.present,
            absent=overall.absent,
            total=overall.total,
            present_pct=overall.present_pct,
            absent_pct=overall.absent_pct,
            subs_count=count_distinct_substitutes(subs_payload),
            absent_students=absent_students,
            period_stats=period_stats,
            activity=activity,
            timestamp=now,
        )
