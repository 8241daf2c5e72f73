SECRET_KEY = "test-secret"

UPSTREAM_BASE_URL = "https://upstream.test/api"
UPSTREAM_API_KEY = "test-key"
UPSTREAM_TIMEOUT = 5.0

ATTENDANCE_EXPORT_URL = ""
SUBS_LIST_URL = ""
SUBS_UNRESTRICT_URL = ""
VIEW_ALL_SUBS_URL = ""
VERIFY_USER_URL = "https://upstream.test/api/verify_user"
ADMIN_CHECK_URL = "https://upstream.test/api/admin_check"
TEACHER_EXPORT_URL = "https://upstream.test/api/teacher_csv"
ASSIGN_SUB_URL = "https://upstream.test/api/assign_sub"
CLASS_SEARCH_URL = ""
STUDENT_SEARCH_URL = ""
TEACHER_SEARCH_URL = ""
STUDENT_CLASSES_URL = ""
CLASS_STUDENTS_URL = ""

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
LOG_FILE = ""
