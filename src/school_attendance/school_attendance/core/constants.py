"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

RECOGNIZED_PERIODS = ("1", "2", "3", "4", "5")
ACTIVITY_LIMIT = 6
ACTIVITY_TITLE = "Parent notification sent"

# Numeric timestamps below this are epoch seconds, otherwise epoch milliseconds.
EPOCH_SECONDS_THRESHOLD = 2e10

# Ordered alias lists; order is authoritative.
STUDENT_ID_KEYS = ("student_id", "studentid", "id")
STUDENT_NAME_KEYS = ("student_name", "name", "student")
STATUS_KEYS = ("attendance_status", "status", "attendance")
CLASS_NAME_KEYS = ("class_name", "class")
PERIOD_KEYS = ("period",)
TEACHER_NAME_KEYS = ("teacher_name", "teacher")
CREATED_AT_KEYS = ("created_at", "timestamp", "time", "created")

SUBSTITUTE_ID_KEYS = ("substitute_email", "email", "sub_name", "name")

DEFAULT_UPSTREAM_TIMEOUT = 15.0
NO_STORE_HEADERS = {"Cache-Control": "no-store"}
