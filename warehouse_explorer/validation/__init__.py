"""
Validation Layer
================
Data quality checks for the dimensional model.
"""

from warehouse_explorer.validation.core import ValidationReport, add_check, add_stat
from warehouse_explorer.validation.data_quality import validate_warehouse

__all__ = [
    "ValidationReport",
    "add_check",
    "add_stat",
    "validate_warehouse",
]
