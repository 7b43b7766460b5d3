"""
Dimension Exploration
=====================
Distinct categorical values of the dimension relations.
"""

from collections import defaultdict

from warehouse_explorer.schema.accessor import SchemaAccessor


def _sort_key(values: tuple) -> tuple:
    # NULLs last, then by value
    return tuple((v is None, v if v is not None else "") for v in values)


def distinct_values(accessor: SchemaAccessor, relation: str, columns: list[str]) -> list[tuple]:
    """
    Distinct combinations of `columns`, ordered by every column ascending.

    Args:
        accessor: Schema accessor
        relation: Relation label
        columns: Columns to combine

    Returns:
        Sorted list of value tuples (NULLs sort last)
    """
    seen = set()
    for row in accessor.scan(relation, columns):
        seen.add(tuple(row[c] for c in columns))
    return sorted(seen, key=_sort_key)


def customer_countries(accessor: SchemaAccessor) -> list[str | None]:
    """All countries customers come from."""
    return [values[0] for values in distinct_values(accessor, "dim_customers", ["country"])]


def product_hierarchy(accessor: SchemaAccessor) -> list[tuple]:
    """Unique (category, subcategory, product_name) combinations."""
    return distinct_values(
        accessor, "dim_products", ["category", "subcategory", "product_name"]
    )


def normalize_label(value: str) -> str:
    """Collapse case and whitespace differences."""
    return " ".join(value.split()).upper()


def country_variants(accessor: SchemaAccessor) -> dict[str, list[str]]:
    """
    Find countries spelled more than one way.

    Returns:
        {normalized country: [spellings...]} for every country with 2+ spellings
    """
    spellings: dict[str, set[str]] = defaultdict(set)
    for country in customer_countries(accessor):
        if country:
            spellings[normalize_label(country)].add(country)

    return {
        normalized: sorted(found)
        for normalized, found in sorted(spellings.items())
        if len(found) > 1
    }
