"""Summarize an attendance export offline.

Runs the same aggregation as /api/live-dashboard on local files, e.g. an export
downloaded through /api/csv:

    python scripts/summarize_attendance.py attendance.csv --subs subs.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from src.school_attendance.school_attendance.dashboard.aggregator import DashboardAggregator  # noqa: E402


def main() -> None:
    p = argparse.ArgumentParser(
        description="Print the live dashboard summary for a CSV attendance export",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("csv_file", type=Path, help="Attendance export (CSV)")
    p.add_argument("--subs", type=Path, default=None, help="Substitute list (JSON array or {records: [...]})")
    p.add_argument("--indent", type=int, default=2)
    args = p.parse_args()

    try:
        csv_text = args.csv_file.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise SystemExit(f"Cannot read {args.csv_file}: {e}")

    subs_payload = []
    if args.subs:
        try:
            subs_payload = json.loads(args.subs.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise SystemExit(f"Cannot read substitutes from {args.subs}: {e}")

    summary = DashboardAggregator().summarize(csv_text, subs_payload)
    print(json.dumps(summary.to_dict(), indent=args.indent, ensure_ascii=False))


if __name__ == "__main__":
    main()
