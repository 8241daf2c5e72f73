import pytest

from src.school_attendance.school_attendance.common.scope import ScopeParams
from src.school_attendance.school_attendance.core.exceptions import ScopeError, ValidationError

SCOPE = ScopeParams("D1", "S1", "boss@x.org")


def test_class_search_sends_classified_query_and_scope(container, gateway, upstream_config):
    gateway.add_json(upstream_config.class_search_url, [{"class_id": "022"}])

    data, status = container.directory_service.search_classes(SCOPE, "MM022")

    assert (data, status) == ([{"class_id": "022"}], 200)
    assert gateway.calls[0]["params"] == {
        "district_code": "D1",
        "school_code": "S1",
        "class_name": "MM",
        "class_id": "022",
        "class_code": "MM022",
        "admin_email": "boss@x.org",
    }


def test_query_is_checked_before_scope(container):
    with pytest.raises(ValidationError, match=r"Missing query \(q\)"):
        container.directory_service.search_classes(ScopeParams(), "  ")
    with pytest.raises(ScopeError):
        container.directory_service.search_teachers(ScopeParams("D1"), "smith")


def test_student_search_by_id_and_text_passthrough(container, gateway, upstream_config):
    gateway.add(upstream_config.student_search_url, status=500, body="<html>boom</html>")

    data, status = container.directory_service.search_students(SCOPE, "42")

    assert (data, status) == ("<html>boom</html>", 500)
    params = gateway.calls[0]["params"]
    assert params["student_id"] == "42"
    assert params["email"] == params["admin_email"] == "boss@x.org"


def test_student_lookup_maps_non_json_to_502(container, gateway, upstream_config):
    gateway.add(upstream_config.student_search_url, body="x" * 400)

    data, status = container.directory_service.find_student(SCOPE, "Ann")

    assert status == 502
    assert data["error"] == "Upstream returned non-JSON"
    assert data["upstreamStatus"] == 200
    assert len(data["snippet"]) == 300
    assert gateway.calls[0]["params"]["Student_Name_Search"] == "Ann"


def test_teacher_search_sends_query_under_both_keys(container, gateway, upstream_config):
    gateway.add_json(upstream_config.teacher_search_url, [])

    container.directory_service.search_teachers(ScopeParams("D1", "S1"), "smith")

    params = gateway.calls[0]["params"]
    assert params["teacher_email"] == params["teacher_name"] == "smith"
    assert "email" not in params


def test_student_classes_needs_district_and_email(container, gateway, upstream_config):
    with pytest.raises(ValidationError, match="Missing student_id"):
        container.directory_service.student_classes(SCOPE, "")
    with pytest.raises(ScopeError):
        container.directory_service.student_classes(ScopeParams("D1", "S1"), "7")

    gateway.add_json(upstream_config.student_classes_url, {"classes": []})
    data, status = container.directory_service.student_classes(ScopeParams("D1", "", "a@x.org"), "7", "p@x.org")

    assert (data, status) == ({"classes": []}, 200)
    assert gateway.calls[0]["params"] == {
        "student_id": "7",
        "district_code": "D1",
        "admin_email": "a@x.org",
        "parent_email": "p@x.org",
    }


def test_class_roster_uses_upstream_param_names(container, gateway, upstream_config):
    with pytest.raises(ValidationError, match="Missing class_id or teacher_email"):
        container.directory_service.class_students(SCOPE, "9", "")

    gateway.add(upstream_config.class_students_url, status=404, body="")
    data, status = container.directory_service.class_students(SCOPE, "9", "t@x.org")

    assert (data, status) == ({}, 404)
    params = gateway.calls[0]["params"]
    assert (params["Class_ID"], params["Teacher_Email"]) == ("9", "t@x.org")
