"""
Date Range Exploration
======================
Temporal boundaries of the fact and customer relations.
"""

from dataclasses import dataclass
from datetime import date

from warehouse_explorer.schema.accessor import SchemaAccessor


@dataclass(frozen=True)
class DateSpan:
    """First and last date of a column. Both None when no dates exist."""

    first: date | None
    last: date | None

    @property
    def range_days(self) -> int | None:
        if self.first is None or self.last is None:
            return None
        return (self.last - self.first).days

    @property
    def range_years(self) -> int | None:
        # Calendar-year boundaries crossed, not full years elapsed
        if self.first is None or self.last is None:
            return None
        return self.last.year - self.first.year


def date_span(accessor: SchemaAccessor, relation: str, column: str) -> DateSpan:
    """Min and max of a date column in one pass, ignoring NULLs."""
    first = last = None
    for row in accessor.scan(relation, [column]):
        value = row[column]
        if value is None:
            continue
        if first is None or value < first:
            first = value
        if last is None or value > last:
            last = value
    return DateSpan(first=first, last=last)


def order_date_range(accessor: SchemaAccessor) -> dict:
    """
    First and last order date, with the span in years and days.

    Returns:
        {first_order_date, last_order_date, order_range_years, order_range_days}
    """
    span = date_span(accessor, "fact_sales", "order_date")
    return {
        "first_order_date": span.first,
        "last_order_date": span.last,
        "order_range_years": span.range_years,
        "order_range_days": span.range_days,
    }


def customer_age_range(accessor: SchemaAccessor, as_of: date | None = None) -> dict:
    """
    Oldest and youngest customer birthdates, with ages.

    Args:
        accessor: Schema accessor
        as_of: Reference date for ages (default: today)

    Returns:
        {oldest_birthdate, youngest_birthdate, oldest_age, youngest_age}
    """
    as_of = as_of or date.today()
    span = date_span(accessor, "dim_customers", "birthdate")
    return {
        "oldest_birthdate": span.first,
        "youngest_birthdate": span.last,
        "oldest_age": as_of.year - span.first.year if span.first else None,
        "youngest_age": as_of.year - span.last.year if span.last else None,
    }


def extreme_customers(accessor: SchemaAccessor) -> list[dict]:
    """
    Customers born on the earliest or latest birthdate.

    Returns:
        [{first_name, birthdate}, ...] in relation order
    """
    span = date_span(accessor, "dim_customers", "birthdate")
    if span.first is None:
        return []

    extremes = {span.first, span.last}
    return [
        {"first_name": row["first_name"], "birthdate": row["birthdate"]}
        for row in accessor.scan("dim_customers", ["first_name", "birthdate"])
        if row["birthdate"] in extremes
    ]
