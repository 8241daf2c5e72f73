from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.constants import DEFAULT_UPSTREAM_TIMEOUT


def _strip(url: str) -> str:
    return (url or "").strip().rstrip("/")


def _endpoint(override: str, base: str, path: str) -> str:
    if override:
        return _strip(override)
    if not base:
        return ""
    return f"{base}/{path}"


@dataclass(frozen=True)
class UpstreamConfig:
    """Resolved upstream endpoints and credentials."""

    attendance_export_url: str
    subs_list_url: str
    subs_unrestrict_url: str
    view_all_subs_url: str
    verify_user_url: str = ""
    admin_check_url: str = ""
    teacher_export_url: str = ""
    assign_sub_url: str = ""
    class_search_url: str = ""
    student_search_url: str = ""
    teacher_search_url: str = ""
    student_classes_url: str = ""
    class_students_url: str = ""
    api_key: str = ""
    timeout: float = DEFAULT_UPSTREAM_TIMEOUT

    @classmethod
    def from_settings(cls, settings: Any) -> "UpstreamConfig":
        base = _strip(getattr(settings, "UPSTREAM_BASE_URL", ""))
        return cls(
            attendance_export_url=_endpoint(
                getattr(settings, "ATTENDANCE_EXPORT_URL", ""), base, "csv_from_table_blueberry_USE_test"
            ),
            subs_list_url=_endpoint(getattr(settings, "SUBS_LIST_URL", ""), base, "adminSubAssignmentsList"),
            subs_unrestrict_url=_endpoint(
                getattr(settings, "SUBS_UNRESTRICT_URL", ""), base, "admin_unrestrictTeacherAccess"
            ),
            view_all_subs_url=_endpoint(getattr(settings, "VIEW_ALL_SUBS_URL", ""), base, "admin_view_all_subs"),
            verify_user_url=_strip(getattr(settings, "VERIFY_USER_URL", "")),
            admin_check_url=_strip(getattr(settings, "ADMIN_CHECK_URL", "")),
            teacher_export_url=_strip(getattr(settings, "TEACHER_EXPORT_URL", "")),
            assign_sub_url=_strip(getattr(settings, "ASSIGN_SUB_URL", "")),
            class_search_url=_endpoint(getattr(settings, "CLASS_SEARCH_URL", ""), base, "admin_searchByClass"),
            student_search_url=_endpoint(getattr(settings, "STUDENT_SEARCH_URL", ""), base, "Admin_Student_Search"),
            teacher_search_url=_endpoint(getattr(settings, "TEACHER_SEARCH_URL", ""), base, "admin_search_teachers"),
            student_classes_url=_endpoint(
                getattr(settings, "STUDENT_CLASSES_URL", ""), base, "Get_Student_Classes_for_admin"
            ),
            class_students_url=_endpoint(
                getattr(settings, "CLASS_STUDENTS_URL", ""), base, "Admin_AllStudentsFromParticularClass"
            ),
            api_key=str(getattr(settings, "UPSTREAM_API_KEY", "") or ""),
            timeout=float(getattr(settings, "UPSTREAM_TIMEOUT", DEFAULT_UPSTREAM_TIMEOUT)),
        )

    def headers(self, accept: str = "application/json") -> dict:
        h = {"Accept": accept}
        if self.api_key:
            h["Authorization"] = f"Bearer {self.api_key}"
        return h
