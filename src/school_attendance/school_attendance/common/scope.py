from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from ..core.exceptions import ScopeError

DISTRICT_KEYS = ("district_code", "district")
SCHOOL_KEYS = ("school_code", "school")
EMAIL_KEYS = ("email", "admin_email", "session_email")


@dataclass(frozen=True)
class ScopeParams:
    """District/school identifiers bounding every upstream query."""

    district_code: str = ""
    school_code: str = ""
    email: str = ""

    def require(self, *, school: bool = True, email: bool = False) -> "ScopeParams":
        if not self.district_code or (school and not self.school_code) or (email and not self.email):
            raise ScopeError("Missing admin scope")
        return self

    def query_params(self, *, include_school: bool = True) -> dict:
        params = {"district_code": self.district_code}
        if include_school:
            params["school_code"] = self.school_code
        if self.email:
            params["email"] = self.email
            params["admin_email"] = self.email
        return params


def _first(sources: Sequence[Optional[Mapping[str, Any]]], keys: Sequence[str]) -> str:
    for source in sources:
        if not source:
            continue
        for key in keys:
            value = source.get(key)
            if value is not None and str(value).strip():
                return str(value).strip()
    return ""


def resolve_scope(*sources: Optional[Mapping[str, Any]]) -> ScopeParams:
    """Build the scope from mappings in precedence order (first hit wins)."""
    return ScopeParams(
        district_code=_first(sources, DISTRICT_KEYS),
        school_code=_first(sources, SCHOOL_KEYS),
        email=_first(sources, EMAIL_KEYS),
    )
