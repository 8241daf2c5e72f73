import os


def _env(*names: str, default: str = "") -> str:
    """First non-empty environment variable among ``names``."""
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return default


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "school-attendance-dev-key"

    # Upstream data service
    UPSTREAM_BASE_URL = _env("UPSTREAM_BASE_URL", "XANO_BASE_URL", "NEXT_PUBLIC_XANO_BASE")
    UPSTREAM_API_KEY = _env("UPSTREAM_API_KEY", "XANO_API_KEY")
    UPSTREAM_TIMEOUT = float(os.environ.get("UPSTREAM_TIMEOUT", "15"))

    ATTENDANCE_EXPORT_URL = _env("ATTENDANCE_EXPORT_URL", "XANO_CSV_DOWNLOAD_URL")
    SUBS_LIST_URL = _env("SUBS_LIST_URL", "XANO_ADMIN_SUBS_LIST_URL", "XANO_SUBS_LIST_URL")
    SUBS_UNRESTRICT_URL = _env("SUBS_UNRESTRICT_URL", "XANO_ADMIN_UNRESTRICT_URL", "XANO_UNRESTRICT_TEACHER_URL")
    VIEW_ALL_SUBS_URL = _env("VIEW_ALL_SUBS_URL", "XANO_ADMIN_VIEW_ALL_SUBS")
    VERIFY_USER_URL = _env("VERIFY_USER_URL", "XANO_VERIFY_USER_URL")
    ADMIN_CHECK_URL = _env("ADMIN_CHECK_URL", "XANO_ADMIN_CHECK_URL")
    TEACHER_EXPORT_URL = _env("TEACHER_EXPORT_URL", "XANO_TEACHER_CSV_DOWNLOAD_URL")
    ASSIGN_SUB_URL = _env("ASSIGN_SUB_URL", "XANO_ASSIGN_SUB_URL")
    CLASS_SEARCH_URL = _env("CLASS_SEARCH_URL", "XANO_SEARCH_CLASSES_URL")
    STUDENT_SEARCH_URL = _env("STUDENT_SEARCH_URL", "XANO_STUDENT_SEARCH_URL", "XANO_STUDENTS_SEARCH_URL")
    TEACHER_SEARCH_URL = _env("TEACHER_SEARCH_URL", "XANO_SEARCH_TEACHERS_URL")
    STUDENT_CLASSES_URL = _env("STUDENT_CLASSES_URL", "XANO_STUDENTS_CLASSES_URL", "XANO_STUDENT_CLASSES_URL")
    CLASS_STUDENTS_URL = _env("CLASS_STUDENTS_URL", "XANO_CLASS_STUDENTS_URL")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE", "")
