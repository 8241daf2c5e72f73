from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence


def _present(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return value is not None


def pick(row: Mapping[str, Any], keys: Sequence[str]) -> Optional[Any]:
    """Resolve a logical field through an ordered alias list.

    Exact header names are tried first for every alias, then the same aliases
    are compared case-insensitively. Empty and whitespace-only values never match.
    """
    for key in keys:
        if _present(row.get(key)):
            return row[key]

    for key in keys:
        wanted = key.lower()
        for header, value in row.items():
            if isinstance(header, str) and header.lower() == wanted and _present(value):
                return value
    return None
