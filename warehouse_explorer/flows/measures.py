#!/usr/bin/env python3
"""
Measures Report Flow
====================
Computes the key business metrics of the Gold layer as one report.

Each measure runs as its own Prefect task; rows are assembled in
catalog order no matter which task finishes first.

Usage:
    python warehouse_explorer/flows/measures.py
"""

# Ensure the package is importable when running as script
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from prefect import flow, get_run_logger, task
from prefect.events import emit_event

from warehouse_explorer.measures.definitions import (
    EXTENDED_MEASURES,
    STANDARD_MEASURES,
    MeasureDefinition,
)
from warehouse_explorer.measures.evaluator import MeasureResult
from warehouse_explorer.measures.report import Report, evaluate_safely
from warehouse_explorer.schema.accessor import SchemaAccessor


@task(name="evaluate-measure")
def evaluate_measure(definition: MeasureDefinition) -> MeasureResult:
    """Evaluate one measure against the configured warehouse."""
    logger = get_run_logger()
    result = evaluate_safely(definition, SchemaAccessor.from_settings())

    if result.ok:
        logger.info(f"   {definition.name} = {result.measure_value} ({definition.describe()})")
    else:
        logger.warning(f"   ⚠️ {definition.name}: {result.error}: {result.message}")

    return result


@flow(name="measures-report", log_prints=True)
def measures_report_flow(include_extended: bool = False) -> dict:
    """
    Build the measures report.

    Args:
        include_extended: Also compute line items, product keys, and ordering customers

    Returns:
        Summary with report rows and failure count
    """
    logger = get_run_logger()
    logger.info("📊 Starting measures-report flow")

    catalog = EXTENDED_MEASURES if include_extended else STANDARD_MEASURES
    logger.info(f"   {len(catalog)} measures")
    logger.info("-" * 40)

    futures = [evaluate_measure.submit(definition) for definition in catalog]
    report = Report(tuple(future.result() for future in futures))

    logger.info("\n" + report.render())

    summary = {
        "rows": report.rows(),
        "total": report.total,
        "failed": report.failed,
        "complete": report.complete,
    }

    emit_event(
        event="warehouse.measures.complete",
        resource={"prefect.resource.id": "warehouse-explorer.measures-report"},
        payload={"total": report.total, "failed": report.failed},
    )

    return summary


def main():
    """CLI entry point."""
    result = measures_report_flow()

    print("\nMeasures report complete!")
    for row in result["rows"]:
        print(f"{row['measure_name']}: {row['measure_value']}")


if __name__ == "__main__":
    main()
