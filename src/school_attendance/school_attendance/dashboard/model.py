from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class PeriodStats:
    present: int = 0
    absent: int = 0
    total: int = 0
    present_pct: int = 0
    absent_pct: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "present": self.present,
            "absent": self.absent,
            "total": self.total,
            "presentPct": self.present_pct,
            "absentPct": self.absent_pct,
        }


@dataclass(frozen=True)
class AbsentStudent:
    id: str
    name: Optional[str] = None
    class_name: Optional[str] = None
    period: Optional[str] = None
    teacher: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "class": self.class_name,
            "period": self.period,
            "teacher": self.teacher,
        }


@dataclass(frozen=True)
class ActivityItem:
    id: str
    title: str
    detail: str
    created_at: int

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "detail": self.detail, "created_at": self.created_at}


@dataclass(frozen=True)
class DashboardSummary:
    """Live dashboard numbers for one school and day."""

    present: int
    absent: int
    total: int
    present_pct: int
    absent_pct: int
    subs_count: int
    absent_students: List[AbsentStudent] = field(default_factory=list)
    period_stats: Dict[str, PeriodStats] = field(default_factory=dict)
    activity: List[ActivityItem] = field(default_factory=list)
    timestamp: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "present": self.present,
            "absent": self.absent,
            "total": self.total,
            "presentPct": self.present_pct,
            "absentPct": self.absent_pct,
            "subsCount": self.subs_count,
            "absent_students": [s.to_dict() for s in self.absent_students],
            "periodStats": {p: s.to_dict() for p, s in self.period_stats.items()},
            "activity": [a.to_dict() for a in self.activity],
            "timestamp": self.timestamp,
        }
