"""
Measure Definitions
===================
Declarative KPI catalog. Declaration order is report order.

Adding a measure means adding a MeasureDefinition here; the evaluator
and report assembler need no change.
"""

from dataclasses import dataclass
from enum import Enum


class Aggregation(str, Enum):
    """Supported aggregation kinds."""

    SUM = "sum"
    AVG = "avg"
    COUNT = "count"
    COUNT_DISTINCT = "count_distinct"


@dataclass(frozen=True)
class MeasureDefinition:
    """A single KPI: aggregation over one column of one relation."""

    name: str
    source: str
    aggregation: Aggregation
    column: str | None = None

    def describe(self) -> str:
        target = self.column or "*"
        return f"{Aggregation(self.aggregation).value}({self.source}.{target})"


STANDARD_MEASURES: tuple[MeasureDefinition, ...] = (
    MeasureDefinition("Total Sales", "fact_sales", Aggregation.SUM, "sales_amount"),
    MeasureDefinition("Total Quantity", "fact_sales", Aggregation.SUM, "quantity"),
    MeasureDefinition("Average Price", "fact_sales", Aggregation.AVG, "price"),
    MeasureDefinition("Total Orders", "fact_sales", Aggregation.COUNT_DISTINCT, "order_number"),
    MeasureDefinition("Total Products", "dim_products", Aggregation.COUNT_DISTINCT, "product_name"),
    MeasureDefinition("Total Customers", "dim_customers", Aggregation.COUNT, "customer_key"),
)

# Exploration extras: line items vs distinct orders, key counts, buying customers
EXTENDED_MEASURES: tuple[MeasureDefinition, ...] = STANDARD_MEASURES + (
    MeasureDefinition("Total Line Items", "fact_sales", Aggregation.COUNT, "order_number"),
    MeasureDefinition("Product Keys", "dim_products", Aggregation.COUNT, "product_key"),
    MeasureDefinition(
        "Ordering Customers", "fact_sales", Aggregation.COUNT_DISTINCT, "customer_key"
    ),
)
