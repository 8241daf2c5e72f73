import pytest

from src.school_attendance.school_attendance.common.scope import ScopeParams
from src.school_attendance.school_attendance.core.exceptions import UpstreamError


def test_teacher_export_is_scoped_to_the_teacher(container, gateway, upstream_config):
    gateway.add(upstream_config.teacher_export_url, body="id,status\n1,present\n")

    export = container.export_service.download_for_teacher(ScopeParams("D1", "S1"), "t@x.org")

    assert export.filename == "teacher_attendance.csv"
    assert export.content == b"id,status\n1,present\n"
    assert gateway.calls[0]["params"] == {"teacher_email": "t@x.org", "district_code": "D1", "school_code": "S1"}
    assert gateway.calls[0]["headers"]["Accept"] == "text/csv"


def test_school_export_failure_carries_upstream_body(container, gateway, upstream_config):
    gateway.add(upstream_config.attendance_export_url, status=401, body="denied")

    with pytest.raises(UpstreamError) as exc:
        container.export_service.download(ScopeParams("D1", "S1", "a@x.org"))

    assert (exc.value.status_code, exc.value.body) == (401, "denied")
