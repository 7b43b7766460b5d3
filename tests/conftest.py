"""
Pytest Configuration
====================
Shared fixtures for all tests.
"""

import os
from datetime import date

import pytest


@pytest.fixture(scope="session", autouse=True)
def set_test_env():
    """Set up test environment variables before any tests run."""
    os.environ["SUPABASE_URL"] = os.environ.get("SUPABASE_URL", "https://test.supabase.co")
    os.environ["SUPABASE_SERVICE_KEY"] = os.environ.get("SUPABASE_SERVICE_KEY", "test-key")
    os.environ["ENVIRONMENT"] = os.environ.get("ENVIRONMENT", "dev")

    # Clear any cached settings
    from warehouse_explorer.config import get_settings

    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Provide settings instance for tests."""
    from warehouse_explorer.config import get_settings

    return get_settings()


def sale(order_number, sales_amount, quantity, price, **overrides) -> dict:
    """A complete fact_sales row."""
    row = {
        "order_number": order_number,
        "product_key": 1,
        "customer_key": 1,
        "order_date": date(2024, 1, 15),
        "sales_amount": sales_amount,
        "quantity": quantity,
        "price": price,
    }
    row.update(overrides)
    return row


def customer(customer_key, first_name="Ann", birthdate=date(1980, 5, 1), country="Germany"):
    return {
        "customer_key": customer_key,
        "first_name": first_name,
        "birthdate": birthdate,
        "country": country,
    }


def product(product_key, product_name, category="Bikes", subcategory="Road Bikes"):
    return {
        "product_key": product_key,
        "category": category,
        "subcategory": subcategory,
        "product_name": product_name,
    }


@pytest.fixture
def make_accessor():
    """Build a SchemaAccessor over in-memory relations keyed by label."""
    from warehouse_explorer.schema import MemorySource, SchemaAccessor

    def _make(fact_sales=None, dim_customers=None, dim_products=None):
        source = MemorySource(
            {
                "fact_sales": fact_sales or [],
                "dim_customers": dim_customers or [],
                "dim_products": dim_products or [],
            }
        )
        tables = {label: label for label in ("fact_sales", "dim_customers", "dim_products")}
        return SchemaAccessor(source, tables=tables)

    return _make


@pytest.fixture
def scenario_sales() -> list[dict]:
    """Three line items across two orders."""
    return [
        sale("A", 10, 2, 5),
        sale("A", 20, 1, 20),
        sale("B", 30, 3, 10),
    ]


@pytest.fixture
def accessor(make_accessor, scenario_sales):
    """Accessor over a small, consistent star schema."""
    return make_accessor(
        fact_sales=scenario_sales,
        dim_customers=[customer(1), customer(2, "Bob", date(1995, 2, 3), "France")],
        dim_products=[product(1, "Widget"), product(2, "Widget"), product(3, "Gadget")],
    )


# =============================================================================
# Fake Supabase client
# =============================================================================


class FakeQuery:
    """Chainable stand-in for a PostgREST query builder."""

    def __init__(self, client, schema: str) -> None:
        self.client = client
        self.schema_name = schema
        self.table_name = None
        self.columns = "*"
        self.count_mode = None
        self.head = False
        self.bounds = None

    def table(self, name: str) -> "FakeQuery":
        self.table_name = name
        return self

    def select(self, columns: str = "*", count=None, head: bool = False) -> "FakeQuery":
        self.columns = columns
        self.count_mode = count
        self.head = head
        return self

    def range(self, start: int, end: int) -> "FakeQuery":
        self.bounds = (start, end)
        return self

    def execute(self):
        return self.client.run(self)


class FakeSupabaseClient:
    """
    In-memory Supabase client.

    Tables are keyed by resolved "schema.table". Errors are keyed by a
    resolved table name or a selected column and hold an APIError payload.
    """

    def __init__(self, tables=None, errors=None) -> None:
        self.tables = tables or {}
        self.errors = errors or {}
        self.requests: list[FakeQuery] = []

    def schema(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def run(self, query: FakeQuery):
        from types import SimpleNamespace

        from postgrest.exceptions import APIError

        self.requests.append(query)
        key = f"{query.schema_name}.{query.table_name}"
        selected = [c.strip() for c in query.columns.split(",")]

        for name in [key, *selected]:
            if name in self.errors:
                raise APIError(self.errors[name])
        if key not in self.tables:
            raise APIError({"code": "PGRST205", "message": f"Could not find the table '{key}'"})

        rows = self.tables[key]
        if query.head:
            return SimpleNamespace(data=[], count=len(rows) if query.count_mode else None)

        if query.bounds is not None:
            start, end = query.bounds
            rows = rows[start : end + 1]
        if query.columns != "*":
            rows = [{c: row[c] for c in selected if c in row} for row in rows]
        return SimpleNamespace(data=rows, count=None)


@pytest.fixture
def use_environment(monkeypatch):
    """Switch ENVIRONMENT for one test, resetting cached settings."""
    from warehouse_explorer.config import get_settings

    def _use(name: str) -> None:
        monkeypatch.setenv("ENVIRONMENT", name)
        get_settings.cache_clear()

    yield _use

    get_settings.cache_clear()


@pytest.fixture
def fake_supabase(monkeypatch, use_environment):
    """Route warehouse_explorer.db to a FakeSupabaseClient (dev schema routing)."""
    from warehouse_explorer import db

    use_environment("dev")
    client = FakeSupabaseClient()
    monkeypatch.setattr(db, "get_supabase_client", lambda: client)
    return client
