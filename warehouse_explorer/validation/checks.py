"""
Data Quality Checks
===================
Individual check functions organized by category.
"""

from collections import Counter, defaultdict

from warehouse_explorer.exploration.dimensions import normalize_label
from warehouse_explorer.validation.core import ValidationReport, add_check, add_stat

# Absolute difference allowed between sales_amount and quantity * price
AMOUNT_TOLERANCE = 0.01


def check_required_fields(
    report: ValidationReport,
    fact_sales: list[dict],
    dim_customers: list[dict],
    dim_products: list[dict],
) -> None:
    """Check that keys and dates are populated."""
    required = [
        ("fact_sales", fact_sales, ["order_number", "product_key", "customer_key", "order_date"]),
        ("dim_customers", dim_customers, ["customer_key"]),
        ("dim_products", dim_products, ["product_key", "product_name"]),
    ]

    for relation, rows, columns in required:
        if not rows:
            continue
        for column in columns:
            add_check(
                report,
                "REQUIRED_FIELD",
                f"{relation}.{column} NOT NULL",
                sum(1 for r in rows if r.get(column) is not None),
                len(rows),
            )


def check_primary_keys(
    report: ValidationReport,
    dim_customers: list[dict],
    dim_products: list[dict],
) -> None:
    """Check dimension keys are unique."""
    for relation, rows, key in [
        ("dim_customers", dim_customers, "customer_key"),
        ("dim_products", dim_products, "product_key"),
    ]:
        if not rows:
            continue
        counts = Counter(r[key] for r in rows if r.get(key) is not None)
        duplicates = sum(c - 1 for c in counts.values() if c > 1)
        add_check(
            report,
            "PRIMARY_KEY",
            f"{relation}.{key} UNIQUE",
            len(rows) - duplicates,
            len(rows),
            message=f"{duplicates} duplicates" if duplicates else "OK",
        )


def check_referential_integrity(
    report: ValidationReport,
    fact_sales: list[dict],
    dim_customers: list[dict],
    dim_products: list[dict],
) -> None:
    """Check fact foreign keys resolve to dimension rows."""
    if not fact_sales:
        return

    valid_customer_keys = set(c["customer_key"] for c in dim_customers)
    valid_product_keys = set(p["product_key"] for p in dim_products)

    for column, valid_keys, target in [
        ("customer_key", valid_customer_keys, "dim_customers"),
        ("product_key", valid_product_keys, "dim_products"),
    ]:
        with_key = [s for s in fact_sales if s.get(column) is not None]
        without = len(fact_sales) - len(with_key)
        matched = sum(1 for s in with_key if s[column] in valid_keys)
        add_check(
            report,
            "REFERENTIAL_INTEGRITY",
            f"fact_sales.{column} → {target}",
            matched,
            len(with_key),
            message=f"{matched}/{len(with_key)} match ({without} NULL)",
        )


def check_consistency(report: ValidationReport, fact_sales: list[dict]) -> None:
    """Check line amounts and order grain."""
    if not fact_sales:
        return

    priced = [
        s
        for s in fact_sales
        if s.get("sales_amount") is not None
        and s.get("quantity") is not None
        and s.get("price") is not None
    ]
    consistent = sum(
        1
        for s in priced
        if abs(float(s["sales_amount"]) - s["quantity"] * float(s["price"])) <= AMOUNT_TOLERANCE
    )
    add_check(
        report,
        "CONSISTENCY",
        "fact_sales.sales_amount = quantity × price",
        consistent,
        len(priced),
        message=f"{len(priced) - consistent} mismatched lines",
        threshold=95,
    )

    # One order spans one or more line items
    orders = len(set(s["order_number"] for s in fact_sales if s.get("order_number") is not None))
    add_check(
        report,
        "CONSISTENCY",
        "distinct orders ≤ line items",
        1 if orders <= len(fact_sales) else 0,
        1,
        message=f"Orders: {orders:,}, Lines: {len(fact_sales):,}",
    )

    negatives = sum(
        1
        for s in fact_sales
        if any((s.get(c) or 0) < 0 for c in ("sales_amount", "quantity", "price"))
    )
    add_check(
        report,
        "BUSINESS_LOGIC",
        "fact_sales amounts are non-negative",
        len(fact_sales) - negatives,
        len(fact_sales),
    )


def collect_statistics(
    report: ValidationReport,
    fact_sales: list[dict],
    dim_customers: list[dict],
) -> None:
    """Collect informational statistics."""
    if fact_sales:
        dates = [s["order_date"] for s in fact_sales if s.get("order_date")]
        if dates:
            first, last = min(dates), max(dates)
            add_stat(
                report,
                "DATE_RANGE",
                "fact_sales.order_date",
                f"{first} → {last} ({(last - first).days:,} days)",
            )

        lines_per_order = Counter(s.get("order_number") for s in fact_sales)
        multi_line = sum(1 for c in lines_per_order.values() if c >= 2)
        add_stat(
            report,
            "CARDINALITY",
            "Orders with 2+ line items",
            f"{multi_line:,}/{len(lines_per_order):,} ({multi_line / len(lines_per_order) * 100:.1f}%)",
        )

    if dim_customers:
        countries = Counter(c.get("country") for c in dim_customers)
        add_stat(
            report,
            "DIMENSION",
            "Distinct customer countries",
            f"{len(countries):,}",
        )

        spellings: dict[str, set[str]] = defaultdict(set)
        for country in countries:
            if country:
                spellings[normalize_label(country)].add(country)
        for normalized, found in sorted(spellings.items()):
            if len(found) > 1:
                add_stat(
                    report,
                    "DIMENSION",
                    f"Country spelled {len(found)} ways",
                    normalized,
                    description=", ".join(sorted(found)),
                )
