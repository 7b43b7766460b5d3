"""
Database Client
===============
Read-only Supabase helpers for the warehouse schemas (bronze, silver, gold).

Environment-aware routing:
    ENVIRONMENT=dev  → all tables are read from the 'dev' schema
    ENVIRONMENT=prod → tables are read from their defined schema (gold, silver, ...)
"""

from collections.abc import Iterator
from functools import lru_cache

from postgrest.exceptions import APIError

from warehouse_explorer.config import get_settings
from warehouse_explorer.errors import RelationNotFoundError, SchemaMismatchError

# PostgREST / Postgres codes for a table that does not exist
MISSING_TABLE_CODES = {"42P01", "PGRST205"}

# Codes for a selected column that does not exist
MISSING_COLUMN_CODES = {"42703", "PGRST204"}


@lru_cache
def get_supabase_client():
    """
    Get Supabase client.

    Returns:
        Supabase client instance
    """
    # Import here to avoid requiring supabase for in-memory snapshots
    from supabase import create_client

    settings = get_settings()
    return create_client(settings.supabase_url, settings.supabase_service_key)


def _resolve_table(table_name: str) -> tuple[str, str]:
    """
    Resolve table name to (schema, table) based on environment.

    In dev: all tables route to 'dev' schema, prefixed with their schema name
    In prod: tables use their defined schema (gold, silver, etc.)

    Args:
        table_name: Full table name (e.g., 'gold.fact_sales')

    Returns:
        Tuple of (schema, table)

    Examples:
        ENVIRONMENT=prod: 'gold.fact_sales' → ('gold', 'fact_sales')
        ENVIRONMENT=dev:  'gold.fact_sales' → ('dev', 'gold_fact_sales')
    """
    settings = get_settings()

    # Parse schema.table
    if "." in table_name:
        schema, table = table_name.split(".", 1)
    else:
        schema, table = "public", table_name

    if settings.environment == "dev":
        return "dev", f"{schema}_{table}"

    return schema, table


def _raise_for_schema(table_name: str, error: APIError) -> None:
    if error.code in MISSING_TABLE_CODES:
        raise RelationNotFoundError(table_name, error.message or "") from error
    if error.code in MISSING_COLUMN_CODES:
        raise SchemaMismatchError(table_name, error.message or "missing column") from error


def stream_table(
    table_name: str,
    columns: list[str] | None = None,
    page_size: int | None = None,
) -> Iterator[dict]:
    """
    Stream records from a table, one page at a time.

    Args:
        table_name: Full table name (e.g., 'gold.fact_sales')
        columns: Columns to select (default: all)
        page_size: Rows per request (default: settings.page_size)

    Yields:
        Records as dicts
    """
    client = get_supabase_client()
    schema, table = _resolve_table(table_name)
    select = ", ".join(columns) if columns else "*"
    size = page_size or get_settings().page_size
    start = 0

    while True:
        query = client.schema(schema).table(table).select(select).range(start, start + size - 1)
        try:
            result = query.execute()
        except APIError as e:
            _raise_for_schema(table_name, e)
            raise

        page = list(result.data)  # type: ignore[arg-type]
        yield from page

        if len(page) < size:
            return
        start += size


def count_rows(table_name: str) -> int:
    """
    Count rows in a table without fetching them.

    Args:
        table_name: Full table name (e.g., 'gold.dim_customers')

    Returns:
        Exact row count
    """
    client = get_supabase_client()
    schema, table = _resolve_table(table_name)

    try:
        result = (
            client.schema(schema).table(table).select("*", count="exact", head=True).execute()
        )
    except APIError as e:
        _raise_for_schema(table_name, e)
        raise

    return result.count or 0
