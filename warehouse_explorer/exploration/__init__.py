"""
Exploration Layer
=================
Read-only exploration of structure, dimension values and date ranges.
"""

from warehouse_explorer.exploration.date_range import (
    DateSpan,
    customer_age_range,
    date_span,
    extreme_customers,
    order_date_range,
)
from warehouse_explorer.exploration.dimensions import (
    country_variants,
    customer_countries,
    distinct_values,
    product_hierarchy,
)
from warehouse_explorer.exploration.structure import list_columns, list_relations

__all__ = [
    "DateSpan",
    "country_variants",
    "customer_age_range",
    "customer_countries",
    "date_span",
    "distinct_values",
    "extreme_customers",
    "list_columns",
    "list_relations",
    "order_date_range",
    "product_hierarchy",
]
