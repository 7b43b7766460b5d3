"""
Gold Relations
==============
Row shapes of the star schema: fact_sales, dim_customers, dim_products.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class ColumnKind(str, Enum):
    """Logical column types."""

    IDENTIFIER = "identifier"
    STRING = "string"
    INTEGER = "integer"
    NUMERIC = "numeric"
    DATE = "date"

    @property
    def is_numeric(self) -> bool:
        return self in (ColumnKind.INTEGER, ColumnKind.NUMERIC)


@dataclass(frozen=True)
class ColumnSpec:
    """A column of a relation. `nullable` is reported and checked by DQ, not enforced on scan."""

    name: str
    kind: ColumnKind
    nullable: bool = True


@dataclass(frozen=True)
class RelationSchema:
    """Expected row shape of a relation."""

    name: str
    columns: tuple[ColumnSpec, ...]

    @property
    def column_names(self) -> tuple[str, ...]:
        return tuple(c.name for c in self.columns)

    def column(self, name: str) -> ColumnSpec | None:
        for spec in self.columns:
            if spec.name == name:
                return spec
        return None


def coerce_value(value, kind: ColumnKind):
    """
    Convert a raw storage value to its column kind.

    Supabase returns dates as ISO strings and numerics as JSON numbers or
    strings; in-memory snapshots may already hold Python objects.

    Raises:
        ValueError: If the value cannot be represented as `kind`
    """
    if value is None:
        return None

    if kind is ColumnKind.DATE:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            return date.fromisoformat(value[:10])
        raise ValueError(f"expected a date, got {type(value).__name__}")

    if kind is ColumnKind.INTEGER:
        if isinstance(value, bool):
            raise ValueError("expected an integer, got bool")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            return int(value)
        raise ValueError(f"expected an integer, got {value!r}")

    if kind is ColumnKind.NUMERIC:
        if isinstance(value, bool):
            raise ValueError("expected a number, got bool")
        if isinstance(value, (int, float, Decimal)):
            return value
        if isinstance(value, str):
            return float(value)
        raise ValueError(f"expected a number, got {type(value).__name__}")

    # identifier / string: keep identifiers as stored (ints or strings)
    if kind is ColumnKind.STRING and not isinstance(value, str):
        return str(value)
    return value


FACT_SALES = RelationSchema(
    name="fact_sales",
    columns=(
        ColumnSpec("order_number", ColumnKind.IDENTIFIER, nullable=False),
        ColumnSpec("product_key", ColumnKind.IDENTIFIER),
        ColumnSpec("customer_key", ColumnKind.IDENTIFIER),
        ColumnSpec("order_date", ColumnKind.DATE),
        ColumnSpec("sales_amount", ColumnKind.NUMERIC),
        ColumnSpec("quantity", ColumnKind.INTEGER),
        ColumnSpec("price", ColumnKind.NUMERIC),
    ),
)

DIM_CUSTOMERS = RelationSchema(
    name="dim_customers",
    columns=(
        ColumnSpec("customer_key", ColumnKind.IDENTIFIER, nullable=False),
        ColumnSpec("first_name", ColumnKind.STRING),
        ColumnSpec("birthdate", ColumnKind.DATE),
        ColumnSpec("country", ColumnKind.STRING),
    ),
)

DIM_PRODUCTS = RelationSchema(
    name="dim_products",
    columns=(
        ColumnSpec("product_key", ColumnKind.IDENTIFIER, nullable=False),
        ColumnSpec("category", ColumnKind.STRING),
        ColumnSpec("subcategory", ColumnKind.STRING),
        ColumnSpec("product_name", ColumnKind.STRING),
    ),
)

GOLD_RELATIONS: dict[str, RelationSchema] = {
    schema.name: schema for schema in (FACT_SALES, DIM_CUSTOMERS, DIM_PRODUCTS)
}
