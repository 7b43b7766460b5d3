#!/usr/bin/env python3
"""
Measures Report Script
======================
Prints the key-metrics report for the live warehouse or a JSON snapshot.

Usage:
    python scripts/report.py
    python scripts/report.py --snapshot exports/gold.json
    python scripts/report.py --snapshot exports/gold.json --extended --workers 4
    python scripts/report.py --json
"""

import argparse
import json
import sys
from pathlib import Path

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from warehouse_explorer.measures.definitions import EXTENDED_MEASURES, STANDARD_MEASURES
from warehouse_explorer.measures.report import Report, build_report
from warehouse_explorer.schema.accessor import SchemaAccessor
from warehouse_explorer.schema.sources import MemorySource

# =============================================================================
# Pure Functions (easy to test)
# =============================================================================


def snapshot_accessor(path: Path) -> SchemaAccessor:
    """
    Accessor over a JSON snapshot.

    The snapshot is {relation_label: [rows...]}, e.g. {"fact_sales": [...]}.
    """
    source = MemorySource.from_json(path)
    tables = {label: label for label in ("fact_sales", "dim_customers", "dim_products")}
    return SchemaAccessor(source, tables=tables)


def report_to_json(report: Report) -> str:
    """Serialize a report as JSON rows, keeping errors and completeness."""
    payload = {
        "complete": report.complete,
        "rows": [
            {
                "measure_name": r.measure_name,
                "measure_value": r.measure_value,
                "error": r.error,
                "message": r.message,
            }
            for r in report.results
        ],
    }
    return json.dumps(payload, indent=2, default=str)


def validate_workers(value: str) -> int:
    """argparse type: positive worker count."""
    workers = int(value)
    if workers < 1:
        raise argparse.ArgumentTypeError("--workers must be >= 1")
    return workers


# =============================================================================
# CLI
# =============================================================================


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Key business metrics report")

    parser.add_argument("--snapshot", type=Path, help="JSON snapshot instead of the warehouse")
    parser.add_argument("--extended", action="store_true", help="Include extended measures")
    parser.add_argument("--workers", type=validate_workers, default=None, help="Parallel measures")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    args = parser.parse_args(argv)

    if args.snapshot and not args.snapshot.exists():
        print(f"Error: snapshot not found: {args.snapshot}")
        return 1

    accessor = snapshot_accessor(args.snapshot) if args.snapshot else SchemaAccessor.from_settings()
    catalog = EXTENDED_MEASURES if args.extended else STANDARD_MEASURES

    report = build_report(catalog, accessor, max_workers=args.workers)

    print(report_to_json(report) if args.json else report.render())
    return 1 if report.failed else 0


if __name__ == "__main__":
    sys.exit(main())
