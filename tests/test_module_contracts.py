"""
Module Contract Tests
=====================
Validates that catalogs and relation schemas follow the defined contracts.
"""

import importlib
import pkgutil


def test_measure_modules_publish_catalogs():
    """The definitions module must satisfy the catalog protocol."""
    from warehouse_explorer.measures import definitions
    from warehouse_explorer.protocols import MeasureCatalogModule

    assert isinstance(definitions, MeasureCatalogModule)


def test_catalog_definitions_are_valid():
    """Every catalog measure must reference a known relation and a fitting column."""
    from warehouse_explorer.measures import EXTENDED_MEASURES, check_definition
    from warehouse_explorer.schema import GOLD_RELATIONS

    for definition in EXTENDED_MEASURES:
        assert definition.source in GOLD_RELATIONS, f"{definition.name}: unknown source"
        check_definition(definition, GOLD_RELATIONS[definition.source])


def test_catalog_names_are_unique():
    from warehouse_explorer.measures import EXTENDED_MEASURES

    names = [m.name for m in EXTENDED_MEASURES]
    assert len(names) == len(set(names))


def test_standard_catalog_order():
    """The standard report lists the six KPIs in a fixed order."""
    from warehouse_explorer.measures import STANDARD_MEASURES

    assert [m.describe() for m in STANDARD_MEASURES] == [
        "sum(fact_sales.sales_amount)",
        "sum(fact_sales.quantity)",
        "avg(fact_sales.price)",
        "count_distinct(fact_sales.order_number)",
        "count_distinct(dim_products.product_name)",
        "count(dim_customers.customer_key)",
    ]


def test_relation_keys_are_required():
    """The first column of each relation is its non-nullable key."""
    from warehouse_explorer.schema import GOLD_RELATIONS

    for name, schema in GOLD_RELATIONS.items():
        key = schema.columns[0]
        assert key.nullable is False, f"{name}.{key.name} must be NOT NULL"


def test_flow_modules_have_entry_points():
    """All flow modules must expose a main() CLI entry point."""
    from warehouse_explorer import flows

    for _, name, _ in pkgutil.iter_modules(flows.__path__):
        if name.startswith("_"):
            continue

        module = importlib.import_module(f"warehouse_explorer.flows.{name}")

        assert hasattr(module, "main"), f"flows.{name} missing main()"
