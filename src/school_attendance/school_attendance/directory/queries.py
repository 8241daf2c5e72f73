"""Turn free-text search boxes into the upstream's query parameters."""

from __future__ import annotations

import re
from typing import Dict

_SEPARATORS_RE = re.compile(r"[\s._-]+")
_DIGITS_RE = re.compile(r"^[0-9]+$")
_LETTERS_RE = re.compile(r"^[A-Z]+$")
# e.g. "MM022", "ENG10A"
_CODE_RE = re.compile(r"^([A-Z]+)([0-9]+)([A-Z]*)$")


def is_numeric_id(q: str) -> bool:
    return bool(_DIGITS_RE.match(q.strip()))


def classify_class_query(q: str) -> Dict[str, str]:
    """Map a class search string to ``class_id`` / ``class_name`` / ``class_code``.

    Separators are dropped and letters upper-cased. Digits are kept as typed so
    leading zeros survive ("mm-022" -> name "MM", id "022").
    """
    cleaned = _SEPARATORS_RE.sub("", q.strip()).upper()

    if _DIGITS_RE.match(cleaned):
        return {"class_id": cleaned}

    code = _CODE_RE.match(cleaned)
    if code:
        return {
            "class_name": code.group(1) + code.group(3),
            "class_id": code.group(2),
            "class_code": cleaned,
        }

    if _LETTERS_RE.match(cleaned):
        return {"class_name": cleaned}

    params = {}
    letters = "".join(re.findall(r"[A-Z]+", cleaned))
    numbers = "".join(re.findall(r"[0-9]+", cleaned))
    if letters:
        params["class_name"] = letters
    if numbers:
        params["class_id"] = numbers
    params["class_code"] = cleaned
    return params


def student_search_params(q: str) -> Dict[str, str]:
    q = q.strip()
    return {"student_id": q} if is_numeric_id(q) else {"student_name": q}


def student_lookup_params(q: str) -> Dict[str, str]:
    """Same split as :func:`student_search_params`, under the lookup endpoint's names."""
    q = q.strip()
    return {"Student_ID_Search": q} if is_numeric_id(q) else {"Student_Name_Search": q}
