"""Minimal CSV reader for upstream attendance exports.

Only double-quoted fields are understood; a comma is a separator when an even
number of double quotes follows it on the same line. Malformed lines never
raise, they are aligned to the header as well as possible.
"""

from __future__ import annotations

import re
from typing import Dict, List

_SPLIT_RE = re.compile(r',(?=(?:[^"]*"[^"]*")*[^"]*$)')


def _clean(value: str) -> str:
    value = value.strip()
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def split_csv_line(line: str) -> List[str]:
    """Split one line into trimmed, unquoted fields."""
    return [_clean(v) for v in _SPLIT_RE.split(line)]


def parse_csv(text: str) -> List[Dict[str, str]]:
    """Parse a header line plus records into a list of ``header -> value`` dicts."""
    if not text:
        return []

    lines = [ln for ln in text.replace("\r", "").split("\n") if ln.strip()]
    if not lines:
        return []

    headers = split_csv_line(lines[0])
    rows: List[Dict[str, str]] = []
    for line in lines[1:]:
        values = split_csv_line(line)
        row: Dict[str, str] = {}
        for idx, header in enumerate(headers):
            row[header] = values[idx] if idx < len(values) else ""
        rows.append(row)
    return rows
