import pytest

from src.school_attendance.school_attendance.common.scope import ScopeParams
from src.school_attendance.school_attendance.core.exceptions import ScopeError, ValidationError
from src.school_attendance.school_attendance.substitutes.model import SubstituteRecord, decode_substitutes
from src.school_attendance.school_attendance.substitutes.service import count_distinct_substitutes


def test_count_accepts_bare_list_and_records_object():
    items = [{"email": "SUB@X.com"}, {"email": "sub@x.com"}, {"name": "Other"}]
    assert count_distinct_substitutes(items) == 2
    assert count_distinct_substitutes({"records": items}) == 2


def test_identifier_key_order():
    record = SubstituteRecord.decode({"name": "N", "sub_name": "S", "email": "", "substitute_email": "E@X"})
    assert record.identifier == "e@x"
    assert SubstituteRecord.decode({"name": "N", "sub_name": "S"}).identifier == "s"


def test_malformed_payloads_count_zero():
    for payload in (None, "", "text", 42, {"records": "nope"}, {"items": []}, [None, 3, "x", {}]):
        assert count_distinct_substitutes(payload) == 0


def test_decode_keeps_one_record_per_item():
    assert len(decode_substitutes([{}, "junk", {"email": "a"}])) == 3


def test_list_assignments_requires_admin_email(container):
    with pytest.raises(ScopeError):
        container.substitute_service.list_assignments(ScopeParams("D1", "S1"))


def test_list_assignments_passes_status_through(container, gateway, upstream_config):
    gateway.add_json(upstream_config.subs_list_url, {"message": "denied"}, status=403)
    data, status = container.substitute_service.list_assignments(ScopeParams("D1", "S1", "a@x.org"))
    assert status == 403
    assert data == {"message": "denied"}
    assert gateway.calls[0]["params"] == {"district_code": "D1", "school_code": "S1", "admin_email": "a@x.org"}


def test_unrestrict_lists_missing_fields_in_order(container):
    with pytest.raises(ValidationError) as exc:
        container.substitute_service.unrestrict_teacher(ScopeParams("D1", ""), {"teacher_email": "t@x.org"})
    assert str(exc.value) == "Missing required fields: admin_email, sub_email, class_id, class_name, school_code"


def test_unrestrict_forwards_as_query_and_wraps_text(container, gateway, upstream_config):
    gateway.add(upstream_config.subs_unrestrict_url, body="granted")
    body = {"teacher_email": " t@x.org ", "sub_email": "s@x.org", "class_id": 12, "class_name": "Bio"}

    data, status = container.substitute_service.unrestrict_teacher(ScopeParams("D1", "S1", "a@x.org"), body)

    assert (data, status) == ({"message": "granted"}, 200)
    params = gateway.calls[0]["params"]
    assert params["teacher_email"] == "t@x.org"
    assert params["class_id"] == "12"
    assert params["district_code"] == "D1"


def test_view_all_reports_upstream_error(container, gateway, upstream_config):
    gateway.add_json(upstream_config.view_all_subs_url, {"detail": "x"}, status=500)
    data, status = container.substitute_service.view_all(ScopeParams("D1"))
    assert status == 500
    assert data == {"error": "Failed to fetch substitutes (500)"}
    assert gateway.calls[0]["params"] == {"district_code": "D1"}


def test_view_all_without_json_body_is_an_error(container, gateway, upstream_config):
    gateway.add(upstream_config.view_all_subs_url, body="<html>maintenance</html>")
    data, status = container.substitute_service.view_all(ScopeParams("D1"))
    assert status == 500
    assert data == {"error": "Failed to fetch substitutes"}


def test_assign_lookup_forwards_client_params_over_scope(container, gateway, upstream_config):
    gateway.add_json(upstream_config.assign_sub_url, [{"sub_email": "s@x.org"}])

    data, status = container.substitute_service.assign_lookup(
        ScopeParams("D1", "S1", "a@x.org"), {"sub_email": "s@x.org", "class_id": "9"}
    )

    assert (data, status) == ([{"sub_email": "s@x.org"}], 200)
    assert gateway.calls[0]["params"] == {
        "district_code": "D1",
        "school_code": "S1",
        "admin_email": "a@x.org",
        "sub_email": "s@x.org",
        "class_id": "9",
    }


def test_assign_requires_full_admin_scope(container, gateway):
    with pytest.raises(ScopeError):
        container.substitute_service.assign(ScopeParams("D1", "S1"), {"sub_email": "s@x.org"})
    assert gateway.calls == []


def test_assign_posts_body_with_scope_taking_precedence(container, gateway, upstream_config):
    gateway.add(upstream_config.assign_sub_url, status=201, body="")

    data, status = container.substitute_service.assign(
        ScopeParams("D1", "S1", "a@x.org"), {"sub_email": "s@x.org", "district_code": "OTHER"}
    )

    assert (data, status) == (None, 201)
    call = gateway.calls[0]
    assert call["method"] == "POST"
    assert call["payload"] == {
        "sub_email": "s@x.org",
        "district_code": "D1",
        "school_code": "S1",
        "admin_email": "a@x.org",
    }
