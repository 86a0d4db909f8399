"""
Export decoded line results to various formats (text, JSON, CSV).
"""

import csv
import io
import json
from typing import Optional

from .processor import LineResult


def to_text(results: list[LineResult], unique_count: Optional[int] = None) -> str:
    """
    Export line results as a human-readable report.

    Args:
        results: Decoded lines, in input order
        unique_count: Number of 1/4/7/8 output digits, if computed

    Returns:
        Report as string
    """
    lines = []
    lines.append("Seven-Segment Readings")
    lines.append("=" * 60)
    lines.append(f"{'Line':>6} | {'Value':>5} | Wiring")
    lines.append("-" * 60)

    for result in results:
        lines.append(f"{result.line_number:>6} | {result.value:04d}  | {result.mapping}")

    lines.append("-" * 60)
    if unique_count is not None:
        lines.append(f"Digits 1, 4, 7, 8 in outputs: {unique_count}")
    lines.append(f"Sum of readings: {sum(r.value for r in results)}")

    return "\n".join(lines)


def to_json(results: list[LineResult], unique_count: Optional[int] = None) -> str:
    """Export line results as a JSON document."""
    doc = {
        "sum": sum(r.value for r in results),
        "lines": [
            {
                "line": r.line_number,
                "digits": list(r.digits),
                "value": r.value,
                "method": r.mapping.method,
                "wiring": r.mapping.wiring(),
            }
            for r in results
        ],
    }
    if unique_count is not None:
        doc["unique_digits"] = unique_count
    return json.dumps(doc, indent=2)


def to_csv(results: list[LineResult]) -> str:
    """Export one CSV row per line: number, value and wiring."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(["line", "value", "wiring"])
    for r in results:
        writer.writerow([r.line_number, r.value, str(r.mapping)])
    return buf.getvalue()
