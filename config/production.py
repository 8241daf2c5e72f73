import os

from config.config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

UPSTREAM_BASE_URL = Config.UPSTREAM_BASE_URL
UPSTREAM_API_KEY = Config.UPSTREAM_API_KEY
UPSTREAM_TIMEOUT = Config.UPSTREAM_TIMEOUT

ATTENDANCE_EXPORT_URL = Config.ATTENDANCE_EXPORT_URL
SUBS_LIST_URL = Config.SUBS_LIST_URL
SUBS_UNRESTRICT_URL = Config.SUBS_UNRESTRICT_URL
VIEW_ALL_SUBS_URL = Config.VIEW_ALL_SUBS_URL
VERIFY_USER_URL = Config.VERIFY_USER_URL
ADMIN_CHECK_URL = Config.ADMIN_CHECK_URL
TEACHER_EXPORT_URL = Config.TEACHER_EXPORT_URL
ASSIGN_SUB_URL = Config.ASSIGN_SUB_URL
CLASS_SEARCH_URL = Config.CLASS_SEARCH_URL
STUDENT_SEARCH_URL = Config.STUDENT_SEARCH_URL
TEACHER_SEARCH_URL = Config.TEACHER_SEARCH_URL
STUDENT_CLASSES_URL = Config.STUDENT_CLASSES_URL
CLASS_STUDENTS_URL = Config.CLASS_STUDENTS_URL

DEBUG = False

LOG_LEVEL = Config.LOG_LEVEL
LOG_FILE = os.getenv("LOG_FILE", "school_attendance.log")
