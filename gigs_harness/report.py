"""JSON and HTML summaries of a harness run."""
from __future__ import annotations

import datetime as dt
import html
import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from .registry import CaseEntry
    from .runner import TestResult

HTML_NAME = "gigs_report.html"
JSON_NAME = "gigs_report.json"

STATUS_COLORS = {
    "PASS": "#2e7d32",
    "FAIL": "#c62828",
    "SKIP": "#6d6d6d",
}


def summarize(results: Sequence[Tuple["CaseEntry", "TestResult"]]) -> Dict[str, int]:
    counts = {"pass": 0, "fail": 0, "skip": 0}
    for _, result in results:
        counts[result.status] = counts.get(result.status, 0) + 1
    counts["total"] = len(results)
    return counts


def _utc(generated_at: dt.datetime) -> dt.datetime:
    """Naive timestamps are taken to be UTC already."""

    if generated_at.tzinfo is None:
        return generated_at.replace(tzinfo=dt.timezone.utc)
    return generated_at.astimezone(dt.timezone.utc)


def to_payload(results: Sequence[Tuple["CaseEntry", "TestResult"]], generated_at: dt.datetime) -> Dict[str, Any]:
    return {
        "generated": _utc(generated_at).strftime("%Y-%m-%dT%H:%M:%SZ"),
        "summary": summarize(results),
        "tests": [
            {
                "series": entry.series,
                "id": entry.case_id,
                "kind": entry.kind,
                "description": entry.name,
                "status": result.status,
                "message": result.message,
                "details": result.details,
            }
            for entry, result in results
        ],
    }


def generate_json(
    results: Sequence[Tuple["CaseEntry", "TestResult"]],
    generated_at: dt.datetime,
    report_dir: Path,
) -> Path:
    path = Path(report_dir) / JSON_NAME
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(to_payload(results, generated_at), indent=2, default=str), encoding="utf-8")
    return path


def _render_details(message: str, details: Optional[Dict[str, Any]]) -> str:
    parts: List[str] = [html.escape(message)]
    if details:
        parts.append("<br><pre>" + html.escape(json.dumps(details, indent=2, default=str)) + "</pre>")
    return "".join(parts)


def render_html(results: Sequence[Tuple["CaseEntry", "TestResult"]], generated_at: dt.datetime) -> str:
    timestamp = _utc(generated_at).strftime("%Y-%m-%d %H:%M UTC")
    counts = summarize(results)

    rows_html: List[str] = []
    for entry, result in results:
        status = result.status.upper()
        color = STATUS_COLORS.get(status, "#424242")
        rows_html.append(
            f"<tr><td>{entry.series}</td><td>{html.escape(entry.case_id)}</td>"
            f"<td>{html.escape(entry.name)}</td>"
            f"<td style='color:{color}; font-weight:bold'>{status}</td>"
            f"<td>{_render_details(result.message, result.details)}</td></tr>"
        )

    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>GIGS Conformance Report</title>
  <style>
    body {{ font-family: Arial, sans-serif; margin: 2rem; }}
    table {{ border-collapse: collapse; width: 100%; }}
    th, td {{ border: 1px solid #ddd; padding: 8px; vertical-align: top; }}
    th {{ background-color: #f5f5f5; text-align: left; }}
    tr:nth-child(even) {{ background-color: #fafafa; }}
  </style>
</head>
<body>
  <h1>GIGS Conformance Report</h1>
  <p>Generated: {timestamp}</p>
  <p>{counts['pass']} passed, {counts['fail']} failed, {counts['skip']} skipped of {counts['total']}.</p>
  <table>
    <thead>
      <tr>
        <th>Series</th>
        <th>Test ID</th>
        <th>Description</th>
        <th>Status</th>
        <th>Details</th>
      </tr>
    </thead>
    <tbody>
      {''.join(rows_html)}
    </tbody>
  </table>
</body>
</html>
"""


def generate_html(
    results: Sequence[Tuple["CaseEntry", "TestResult"]],
    generated_at: dt.datetime,
    report_dir: Path,
) -> Path:
    path = Path(report_dir) / HTML_NAME
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_html(results, generated_at), encoding="utf-8")
    return path
