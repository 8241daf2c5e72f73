from src.school_attendance.school_attendance.attendance.model import AttendanceEntry
from src.school_attendance.school_attendance.attendance.resolver import LatestRecordResolver, status_rank
from src.school_attendance.school_attendance.core.enums import AttendanceStatus

P, A, Q = AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.PENDING


def _entry(sid, status, ts, period=None, name=None):
    return AttendanceEntry(student_id=sid, status=status, timestamp=ts, period=period, student_name=name)


def test_rank_prefers_decided_status():
    assert status_rank(P) == status_rank(A) == 1
    assert status_rank(Q) == 0


def test_equal_timestamps_prefer_present_over_pending_in_any_order():
    forward = LatestRecordResolver.resolve([_entry("1", Q, 100), _entry("1", P, 100)])
    backward = LatestRecordResolver.resolve([_entry("1", P, 100), _entry("1", Q, 100)])
    assert forward.overall["1"].status == P
    assert backward.overall["1"].status == P


def test_equal_timestamps_and_rank_keep_first_record():
    resolver = LatestRecordResolver.resolve([_entry("1", A, 100), _entry("1", P, 100)])
    assert resolver.overall["1"].status == A


def test_later_timestamp_wins_in_any_order():
    early, late = _entry("1", P, 100), _entry("1", A, 200)
    assert LatestRecordResolver.resolve([early, late]).overall["1"].status == A
    assert LatestRecordResolver.resolve([late, early]).overall["1"].status == A


def test_later_pending_still_beats_older_present():
    resolver = LatestRecordResolver.resolve([_entry("1", P, 100), _entry("1", Q, 200)])
    assert resolver.overall["1"].status == Q


def test_per_period_maps_are_independent():
    resolver = LatestRecordResolver.resolve(
        [
            _entry("1", P, 100, period="1"),
            _entry("1", A, 200, period="2"),
            _entry("2", A, 50, period="1"),
            _entry("3", P, 10),
        ]
    )
    assert resolver.overall["1"].status == A
    assert resolver.period("1")["1"].status == P
    assert resolver.period("2")["1"].status == A
    assert set(resolver.period("1")) == {"1", "2"}
    assert "3" in resolver.overall
    assert resolver.period("4") == {}


def test_replacement_keeps_first_insertion_order():
    resolver = LatestRecordResolver.resolve(
        [_entry("b", A, 1), _entry("a", A, 1), _entry("b", A, 5, name="B2")]
    )
    assert list(resolver.overall) == ["b", "a"]
    assert resolver.overall["b"].student_name == "B2"
