"""Analysis report serializers."""

from __future__ import annotations

from pathlib import Path

from lingform.models import TextReport


def to_json(report: TextReport) -> str:
    """Serialize an analysis report to formatted JSON."""
    return report.model_dump_json(indent=2)


def write_json(report: TextReport, output_path: str | Path) -> None:
    """Write analysis report JSON to disk."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(report) + "\n", encoding="utf-8")
