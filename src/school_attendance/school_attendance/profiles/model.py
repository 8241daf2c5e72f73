from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.enums import Role

PROFILE_FIELDS = ("email", "full_name", "role", "district_code", "school_code", "sub_assigned", "Phone_ID")


def _scalar(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class UserProfile:
    """User directory entry as returned by the upstream verify endpoint."""

    email: Optional[str] = None
    full_name: Optional[str] = None
    role: Optional[str] = None
    district_code: Optional[str] = None
    school_code: Optional[str] = None
    sub_assigned: Optional[str] = None
    phone_id: Optional[str] = None

    @classmethod
    def decode(cls, payload: Any) -> "UserProfile":
        """Upstream answers with an object or a list; an empty answer is an all-null profile."""
        if isinstance(payload, list):
            payload = payload[0] if payload else None
        if not isinstance(payload, dict):
            return cls()
        return cls(
            email=_scalar(payload.get("email")),
            full_name=_scalar(payload.get("full_name")),
            role=_scalar(payload.get("role")),
            district_code=_scalar(payload.get("district_code")),
            school_code=_scalar(payload.get("school_code")),
            sub_assigned=_scalar(payload.get("sub_assigned")),
            phone_id=_scalar(payload.get("Phone_ID")),
        )

    @property
    def role_enum(self) -> Optional[Role]:
        try:
            return Role((self.role or "").lower())
        except ValueError:
            return None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "email": self.email,
            "full_name": self.full_name,
            "role": self.role,
            "district_code": self.district_code,
            "school_code": self.school_code,
            "sub_assigned": self.sub_assigned,
            "Phone_ID": self.phone_id,
        }
