from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def missing_fields(values: Mapping[str, Any], required: Sequence[str]) -> List[str]:
    """Names from ``required`` whose value is empty, in ``required`` order."""
    return [name for name in required if not str(values.get(name) or "").strip()]


def require_fields(values: Mapping[str, Any], required: Sequence[str]) -> None:
    missing = missing_fields(values, required)
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")
