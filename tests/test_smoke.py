"""
Smoke Tests
===========
Basic sanity checks for imports and configuration.
"""


def test_imports():
    """Verify core modules can be imported."""
    from warehouse_explorer import config
    from warehouse_explorer.flows import explore, measures, validate

    assert hasattr(config, "get_settings")
    assert hasattr(explore, "explore_flow")
    assert hasattr(measures, "measures_report_flow")
    assert hasattr(validate, "validate_flow")


def test_settings_loads(settings):
    """Verify settings can be instantiated (uses fixture from conftest.py)."""
    assert settings.supabase_url == "https://test.supabase.co"
    assert settings.environment in ("dev", "prod", "staging")
    assert settings.page_size > 0


def test_relation_tables_default(settings):
    assert settings.relation_tables["fact_sales"] == "gold.fact_sales"
    assert set(settings.relation_tables) == {"fact_sales", "dim_customers", "dim_products"}


def test_dev_routing(settings):
    """In dev, gold tables are read from the dev schema."""
    from warehouse_explorer.db import _resolve_table

    if settings.environment == "dev":
        assert _resolve_table("gold.fact_sales") == ("dev", "gold_fact_sales")
    else:
        assert _resolve_table("gold.fact_sales") == ("gold", "fact_sales")
