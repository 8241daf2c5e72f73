from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.constants import SUBSTITUTE_ID_KEYS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubstituteRecord:
    """Upstream substitute-assignment record, reduced to what we count on."""

    identifier: Optional[str]
    raw: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def decode(cls, item: Any) -> "SubstituteRecord":
        if not isinstance(item, dict):
            return cls(identifier=None)

        identifier = None
        for key in SUBSTITUTE_ID_KEYS:
            value = item.get(key)
            if isinstance(value, bool) or value is None:
                continue
            if isinstance(value, (str, int, float)) and value:
                identifier = str(value).lower()
                break
        return cls(identifier=identifier, raw=item)


def substitute_items(payload: Any) -> List[Any]:
    """Accept a bare list or ``{"records": [...]}``; anything else is empty."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("records"), list):
        return payload["records"]
    if payload not in (None, {}, ""):
        logger.debug("Unexpected substitutes payload of type %s, treating as empty", type(payload).__name__)
    return []


def decode_substitutes(payload: Any) -> List[SubstituteRecord]:
    return [SubstituteRecord.decode(item) for item in substitute_items(payload)]
