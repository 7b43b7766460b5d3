"""
Data Quality Validation
=======================
Runs every check against the star schema and records the KPI values.
"""

from warehouse_explorer.measures.report import build_report
from warehouse_explorer.schema.accessor import SchemaAccessor
from warehouse_explorer.validation.checks import (
    check_consistency,
    check_primary_keys,
    check_referential_integrity,
    check_required_fields,
    collect_statistics,
)
from warehouse_explorer.validation.core import ValidationReport, add_stat


def _read_relation(accessor: SchemaAccessor, relation: str) -> list[dict]:
    # Project the declared columns so extra physical columns are ignored
    columns = list(accessor.describe(relation).column_names)
    return list(accessor.scan(relation, columns))


def validate_warehouse(accessor: SchemaAccessor) -> ValidationReport:
    """
    Run comprehensive data quality validation.

    Reads each relation once through the accessor, then checks:
    - Required fields
    - Primary key uniqueness
    - Referential integrity
    - Consistency and business rules

    Args:
        accessor: Schema accessor over the Gold layer

    Returns:
        ValidationReport with all checks and statistics
    """
    fact_sales = _read_relation(accessor, "fact_sales")
    dim_customers = _read_relation(accessor, "dim_customers")
    dim_products = _read_relation(accessor, "dim_products")

    report = ValidationReport()

    add_stat(report, "VOLUME", "fact_sales rows", f"{len(fact_sales):,}")
    add_stat(report, "VOLUME", "dim_customers rows", f"{len(dim_customers):,}")
    add_stat(report, "VOLUME", "dim_products rows", f"{len(dim_products):,}")

    check_required_fields(report, fact_sales, dim_customers, dim_products)
    check_primary_keys(report, dim_customers, dim_products)
    check_referential_integrity(report, fact_sales, dim_customers, dim_products)
    check_consistency(report, fact_sales)
    collect_statistics(report, fact_sales, dim_customers)

    measures = build_report(accessor=accessor)
    for result in measures.results:
        add_stat(
            report,
            "KPI",
            result.measure_name,
            str(result.measure_value),
            description=result.message,
        )

    return report
