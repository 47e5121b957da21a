from __future__ import annotations

import argparse
import csv
import json
import statistics
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from archiver.pipeline.batch import compressed_path_for, decompressed_path_for

REPORT_COLUMNS = [
    "input_path",
    "status",
    "original_size_bytes",
    "compressed_size_bytes",
    "decompressed_size_bytes",
    "compression_ratio",
    "success",
]


def _iter_files(root: Path) -> Iterable[Path]:
    return sorted(p for p in root.rglob("*") if p.is_file())


def _format_csv_value(value: object) -> object:
    if value is None:
        return ""
    return value


def _file_row(input_file: Path, input_root: Path, output_root: Path) -> Dict[str, object]:
    rel_path = input_file.relative_to(input_root)
    original_size = input_file.stat().st_size
    row: Dict[str, object] = {
        "input_path": str(rel_path),
        "status": "ok",
        "original_size_bytes": original_size,
        "compressed_size_bytes": None,
        "decompressed_size_bytes": None,
        "compression_ratio": None,
        "success": False,
    }

    compressed_path = compressed_path_for(rel_path, output_root)
    if not compressed_path.exists():
        row["status"] = "missing_compressed"
        return row
    compressed_size = compressed_path.stat().st_size
    row["compressed_size_bytes"] = compressed_size
    if original_size:
        row["compression_ratio"] = compressed_size / original_size

    decompressed_path = decompressed_path_for(rel_path, output_root)
    if not decompressed_path.exists():
        row["status"] = "missing_decompressed"
        return row
    decompressed = decompressed_path.read_bytes()
    row["decompressed_size_bytes"] = len(decompressed)
    row["success"] = decompressed == input_file.read_bytes()
    return row


def generate_report(
    input_root: Path,
    output_root: Path,
    report_dir: Path,
    formats: Sequence[str] = ("csv", "json"),
) -> Dict[str, object]:
    """
    Compare a batch run's outputs against the original files.

    Per file: sizes, compression ratio (compressed / original) and whether
    the decompressed copy is byte-identical.
    """
    input_root = input_root.resolve()
    output_root = output_root.resolve()
    report_dir = report_dir.resolve()

    rows: List[Dict[str, object]] = [
        _file_row(input_file, input_root, output_root) for input_file in _iter_files(input_root)
    ]

    ratios: List[float] = [r["compression_ratio"] for r in rows if r["compression_ratio"] is not None]
    success_count = sum(1 for r in rows if r["success"])
    total_original = sum(r["original_size_bytes"] for r in rows)
    total_compressed = sum(r["compressed_size_bytes"] or 0 for r in rows)

    summary = {
        "total_files": len(rows),
        "compressed_present": sum(1 for r in rows if r["compressed_size_bytes"] is not None),
        "success_count": success_count,
        "success_rate": (success_count / len(rows)) if rows else 0.0,
        "total_original_bytes": total_original,
        "total_compressed_bytes": total_compressed,
        "overall_ratio": (total_compressed / total_original) if total_original else 0.0,
        "mean_ratio": statistics.mean(ratios) if ratios else 0.0,
        "median_ratio": statistics.median(ratios) if ratios else 0.0,
    }

    meta = {
        "input_root": str(input_root),
        "output_root": str(output_root),
        "report_dir": str(report_dir),
        "generated_at_utc": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }

    report_dir.mkdir(parents=True, exist_ok=True)
    formats = [fmt.lower() for fmt in formats]

    if "csv" in formats:
        csv_path = report_dir / "report.csv"
        with csv_path.open("w", newline="", encoding="utf-8") as csv_file:
            writer = csv.DictWriter(csv_file, fieldnames=REPORT_COLUMNS)
            writer.writeheader()
            for row in rows:
                writer.writerow({k: _format_csv_value(row.get(k)) for k in REPORT_COLUMNS})

    if "json" in formats:
        json_path = report_dir / "report.json"
        report_payload = {"meta": meta, "summary": summary, "files": rows}
        json_path.write_text(json.dumps(report_payload, indent=2), encoding="utf-8")

    return {"meta": meta, "summary": summary, "files": rows}


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate compression reports for a batch run.",
    )
    parser.add_argument("--input-root", required=True, help="Path to original input data root.")
    parser.add_argument("--output-root", required=True, help="Path to batch output root.")
    parser.add_argument(
        "--report-dir",
        default="",
        help="Output directory for reports (default: <output-root>/report).",
    )
    parser.add_argument(
        "--formats",
        default="csv,json",
        help="Comma-separated list of formats: csv,json (default: csv,json).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    input_root = Path(args.input_root)
    output_root = Path(args.output_root)
    report_dir = Path(args.report_dir) if args.report_dir else output_root / "report"
    formats = [fmt.strip() for fmt in args.formats.split(",") if fmt.strip()]
    generate_report(
        input_root=input_root,
        output_root=output_root,
        report_dir=report_dir,
        formats=formats,
    )
    print(f"Report written to {report_dir}")


if __name__ == "__main__":
    main()
