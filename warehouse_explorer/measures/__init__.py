"""
Measures Layer
==============
KPI catalog, aggregation evaluator, and report assembler.
"""

from warehouse_explorer.measures.definitions import (
    EXTENDED_MEASURES,
    STANDARD_MEASURES,
    Aggregation,
    MeasureDefinition,
)
from warehouse_explorer.measures.evaluator import MeasureResult, check_definition, evaluate
from warehouse_explorer.measures.report import Report, build_report

__all__ = [
    "EXTENDED_MEASURES",
    "STANDARD_MEASURES",
    "Aggregation",
    "MeasureDefinition",
    "MeasureResult",
    "Report",
    "build_report",
    "check_definition",
    "evaluate",
]
