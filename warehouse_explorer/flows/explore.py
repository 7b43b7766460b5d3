#!/usr/bin/env python3
"""
Explore Flow
============
Read-only tour of the Gold layer: structure, dimensions, date ranges.

Usage:
    python warehouse_explorer/flows/explore.py
"""

# Ensure the package is importable when running as script
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from prefect import flow, get_run_logger

from warehouse_explorer.exploration import (
    country_variants,
    customer_age_range,
    customer_countries,
    extreme_customers,
    list_columns,
    list_relations,
    order_date_range,
    product_hierarchy,
)
from warehouse_explorer.schema.accessor import SchemaAccessor


@flow(name="explore-warehouse", log_prints=True)
def explore_flow() -> dict:
    """
    Explore the Gold layer.

    Returns:
        Summary of structure, dimension values, and date ranges
    """
    logger = get_run_logger()
    logger.info("🔍 Starting explore-warehouse flow")
    accessor = SchemaAccessor.from_settings()

    # ==================== STRUCTURE ====================
    logger.info("\n🗂️ Database structure")
    logger.info("-" * 40)

    relations = list_relations(accessor)
    columns = {}
    for relation in relations:
        name = relation["relation"]
        columns[name] = list_columns(accessor, name)
        logger.info(f"   {name} ({relation['table']}): {relation['column_count']} columns")

    # ==================== DIMENSIONS ====================
    logger.info("\n🌍 Dimensions")
    logger.info("-" * 40)

    countries = customer_countries(accessor)
    logger.info(f"   countries: {len(countries):,}")

    variants = country_variants(accessor)
    for normalized, spellings in variants.items():
        logger.warning(f"   ⚠️ {normalized} spelled as {spellings}")

    hierarchy = product_hierarchy(accessor)
    logger.info(f"   category/subcategory/product combinations: {len(hierarchy):,}")

    # ==================== DATE RANGES ====================
    logger.info("\n📅 Date ranges")
    logger.info("-" * 40)

    orders = order_date_range(accessor)
    logger.info(
        f"   orders: {orders['first_order_date']} → {orders['last_order_date']} "
        f"({orders['order_range_years']} years, {orders['order_range_days']} days)"
    )

    ages = customer_age_range(accessor)
    logger.info(f"   customer ages: {ages['youngest_age']} to {ages['oldest_age']}")

    extremes = extreme_customers(accessor)
    for customer in extremes:
        logger.info(f"   {customer['first_name']}: {customer['birthdate']}")

    return {
        "relations": relations,
        "columns": columns,
        "countries": countries,
        "country_variants": variants,
        "product_hierarchy": hierarchy,
        "order_date_range": orders,
        "customer_age_range": ages,
        "extreme_customers": extremes,
    }


def main():
    """CLI entry point."""
    result = explore_flow()

    print("\nExploration complete!")
    print(f"Relations: {len(result['relations'])}")
    print(f"Countries: {len(result['countries'])}")


if __name__ == "__main__":
    main()
