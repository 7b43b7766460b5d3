#!/usr/bin/env python3
"""
Validate Flow
=============
Runs data quality checks on the Gold layer.

Emits Prefect events on DQ failures for alerting.

Usage:
    python warehouse_explorer/flows/validate.py
"""

# Ensure the package is importable when running as script
import sys
from dataclasses import asdict
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from prefect import flow, get_run_logger
from prefect.events import emit_event

from warehouse_explorer.schema.accessor import SchemaAccessor
from warehouse_explorer.validation.core import FAIL
from warehouse_explorer.validation.data_quality import validate_warehouse


@flow(name="validate-warehouse", log_prints=True)
def validate_flow() -> dict:
    """
    Run data quality checks on the Gold layer.

    Validates:
    - Required fields
    - Primary key uniqueness
    - Referential integrity
    - Consistency and business rules

    Returns:
        DQ report summary
    """
    logger = get_run_logger()
    logger.info("🔍 Starting validate-warehouse flow")

    dq_report = validate_warehouse(SchemaAccessor.from_settings())

    for stat in dq_report.statistics:
        logger.info(f"   [{stat.category}] {stat.metric}: {stat.value}")

    summary = {
        "total_checks": dq_report.total,
        "passed": dq_report.passed,
        "warnings": dq_report.warnings,
        "failed": dq_report.failed,
        "checks": [asdict(c) for c in dq_report.checks],
        "statistics": [asdict(s) for s in dq_report.statistics],
    }

    if dq_report.failed > 0:
        logger.error(f"❌ DQ FAILED: {dq_report.failed} checks failed")

        emit_event(
            event="warehouse.dq.failure",
            resource={"prefect.resource.id": "warehouse-explorer.validate-warehouse"},
            payload={
                "failed_count": dq_report.failed,
                "total_checks": dq_report.total,
                "failed_checks": [
                    {"check": c.check, "percentage": c.percentage}
                    for c in dq_report.by_status(FAIL)
                ],
            },
        )
    else:
        logger.info(f"✅ DQ PASSED: {dq_report.passed}/{dq_report.total} checks passed")

        emit_event(
            event="warehouse.dq.success",
            resource={"prefect.resource.id": "warehouse-explorer.validate-warehouse"},
            payload={"passed": dq_report.passed, "total_checks": dq_report.total},
        )

    return summary


def main():
    """CLI entry point."""
    result = validate_flow()

    print("\nValidation complete!")
    print(f"Passed: {result['passed']}/{result['total_checks']}")
    print(f"Failed: {result['failed']}")


if __name__ == "__main__":
    main()
