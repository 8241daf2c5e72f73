from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles issued by the upstream user directory."""

    ADMIN = "admin"
    TEACHER = "teacher"
    SUB = "sub"
    PARENT = "parent"


class AttendanceStatus(str, Enum):
    """Normalized attendance status; anything else is unknown and dropped."""

    PRESENT = "present"
    ABSENT = "absent"
    PENDING = "pending"
