from __future__ import annotations

import json
import threading

import pytest

from src.school_attendance.school_attendance.container import build_container
from src.school_attendance.school_attendance.main import create_app
from src.school_attendance.school_attendance.upstream.config import UpstreamConfig
from src.school_attendance.school_attendance.upstream.gateway import UpstreamResponse

BASE = "https://upstream.test/api"
CSV_URL = f"{BASE}/csv_from_table_blueberry_USE_test"
SUBS_URL = f"{BASE}/adminSubAssignmentsList"
UNRESTRICT_URL = f"{BASE}/admin_unrestrictTeacherAccess"
VIEW_ALL_URL = f"{BASE}/admin_view_all_subs"
VERIFY_URL = f"{BASE}/verify_user"
ADMIN_CHECK_URL = f"{BASE}/admin_check"
TEACHER_CSV_URL = f"{BASE}/teacher_csv"
ASSIGN_SUB_URL = f"{BASE}/assign_sub"
CLASS_SEARCH_URL = f"{BASE}/admin_searchByClass"
STUDENT_SEARCH_URL = f"{BASE}/Admin_Student_Search"
TEACHER_SEARCH_URL = f"{BASE}/admin_search_teachers"
STUDENT_CLASSES_URL = f"{BASE}/Get_Student_Classes_for_admin"
CLASS_STUDENTS_URL = f"{BASE}/Admin_AllStudentsFromParticularClass"


class FakeGateway:
    """In-memory stand-in for the upstream data service."""

    def __init__(self):
        self.routes = {}
        self.calls = []
        self._lock = threading.Lock()

    def add(self, url, *, status=200, body=b"", error=None):
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.routes[url] = error if error is not None else UpstreamResponse(status_code=status, content=body)

    def add_json(self, url, payload, *, status=200):
        self.add(url, status=status, body=json.dumps(payload))

    def get(self, url, *, params=None, headers=None):
        return self._answer({"method": "GET", "url": url, "params": dict(params or {}), "headers": dict(headers or {})})

    def post(self, url, *, payload=None, headers=None):
        return self._answer({"method": "POST", "url": url, "payload": payload, "headers": dict(headers or {})})

    def _answer(self, call):
        with self._lock:
            self.calls.append(call)
        url = call["url"]
        result = self.routes.get(url)
        if result is None:
            return UpstreamResponse(status_code=404, content=b"not found")
        if isinstance(result, Exception):
            raise result
        return result

    def calls_to(self, url):
        return [c for c in self.calls if c["url"] == url]


@pytest.fixture
def fixed_now_ms():
    return 1_700_000_999_000


@pytest.fixture
def upstream_config():
    return UpstreamConfig(
        attendance_export_url=CSV_URL,
        subs_list_url=SUBS_URL,
        subs_unrestrict_url=UNRESTRICT_URL,
        view_all_subs_url=VIEW_ALL_URL,
        verify_user_url=VERIFY_URL,
        admin_check_url=ADMIN_CHECK_URL,
        teacher_export_url=TEACHER_CSV_URL,
        assign_sub_url=ASSIGN_SUB_URL,
        class_search_url=CLASS_SEARCH_URL,
        student_search_url=STUDENT_SEARCH_URL,
        teacher_search_url=TEACHER_SEARCH_URL,
        student_classes_url=STUDENT_CLASSES_URL,
        class_students_url=CLASS_STUDENTS_URL,
        api_key="test-key",
        timeout=5.0,
    )


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def container(upstream_config, gateway):
    return build_container(upstream_config=upstream_config, gateway=gateway)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
