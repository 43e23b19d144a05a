#!/usr/bin/env python3
"""Run language-identification evaluation and write release-gate artifacts.

Manifest format (JSONL):
{"id": "case-001", "text": "I have no special chars", "language": "eng"}
"""

from __future__ import annotations

import argparse
import csv
import json
import subprocess
import sys
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from lingform.analyze import AnalyzerPipeline, build_pipeline
from lingform.config import load_config
from lingform.eval import score_predictions, summarize
from lingform.iso.languages import LANGUAGES
from lingform.logging_ import setup_logging


@dataclass(frozen=True)
class EvalCase:
    case_id: str
    text: str
    language: str


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate lingform language identification.")
    parser.add_argument("--manifest", required=True, help="Path to evaluation JSONL manifest")
    parser.add_argument("--output-root", default="eval/runs", help="Artifact root directory")
    parser.add_argument(
        "--analyzers",
        default=None,
        help="Comma-separated analyzer names (default: from config)",
    )
    return parser.parse_args()


def load_manifest(path: Path) -> list[EvalCase]:
    cases: list[EvalCase] = []
    for line_num, raw_line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue
        payload = json.loads(line)
        cases.append(
            EvalCase(
                case_id=str(payload.get("id") or f"line-{line_num}"),
                text=str(payload["text"]),
                language=LANGUAGES.resolve(str(payload["language"])).code,
            )
        )
    return cases


def run_eval(cases: list[EvalCase], pipeline: AnalyzerPipeline, *, workers: int = 1) -> dict[str, Any]:
    rows: list[dict[str, Any]] = []
    pairs: list[tuple[str, str | None]] = []

    started = time.perf_counter()
    infos = pipeline.run_many([case.text for case in cases], max_workers=workers)
    total_runtime_sec = time.perf_counter() - started

    for case, info in zip(cases, infos):
        predicted = info.language.code if info.language is not None else None
        pairs.append((case.language, predicted))
        rows.append(
            {
                "case_id": case.case_id,
                "expected": case.language,
                "predicted": predicted or "",
                "correct": predicted == case.language,
                "script": info.script.code if info.script is not None else "",
                "source": info.sources.get("language", ""),
            }
        )

    summary = summarize(score_predictions(pairs))
    summary["total_runtime_sec"] = round(total_runtime_sec, 4)
    summary["workers"] = workers
    return {"summary": summary, "rows": rows}


def write_artifacts(output_root: Path, *, manifest: Path, analyzers: list[str], result: dict[str, Any]) -> Path:
    timestamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%SZ")
    git_sha = _git_sha()
    out_dir = output_root / f"{timestamp}_{git_sha[:8]}"
    out_dir.mkdir(parents=True, exist_ok=True)

    metrics_payload = {
        "generated_at": datetime.now(UTC).isoformat(),
        "git_sha": git_sha,
        "analyzers": analyzers,
        "manifest_path": str(manifest),
        "summary": result["summary"],
    }
    (out_dir / "metrics.json").write_text(
        json.dumps(metrics_payload, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )

    with (out_dir / "per_case.csv").open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(result["rows"][0].keys()) if result["rows"] else [])
        if result["rows"]:
            writer.writeheader()
            writer.writerows(result["rows"])

    (out_dir / "run.json").write_text(
        json.dumps({"command": " ".join([sys.executable, *sys.argv])}, indent=2) + "\n",
        encoding="utf-8",
    )
    return out_dir


def _git_sha() -> str:
    try:
        proc = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            check=True,
            text=True,
            capture_output=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return proc.stdout.strip()


def main() -> int:
    args = parse_args()
    config = load_config()
    setup_logging(config.log_level)
    analyzers = [name.strip() for name in args.analyzers.split(",")] if args.analyzers else list(config.analyzers)

    manifest = Path(args.manifest)
    cases = load_manifest(manifest)
    with build_pipeline(analyzers, langdetect_seed=config.langdetect_seed) as pipeline:
        result = run_eval(cases, pipeline, workers=config.workers)
    out_dir = write_artifacts(Path(args.output_root), manifest=manifest, analyzers=analyzers, result=result)
    print(json.dumps(result["summary"], indent=2))
    print(f"Artifacts written to: {out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
