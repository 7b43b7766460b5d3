"""
Database Structure
==================
Relations and their columns, as registered with the accessor.
"""

from warehouse_explorer.schema.accessor import SchemaAccessor


def list_relations(accessor: SchemaAccessor) -> list[dict]:
    """
    List the relations the accessor can read.

    Returns:
        One record per relation: {relation, table, column_count}
    """
    return [
        {
            "relation": name,
            "table": accessor.tables.get(name),
            "column_count": len(schema.columns),
        }
        for name, schema in accessor.relations.items()
    ]


def list_columns(accessor: SchemaAccessor, relation: str) -> list[dict]:
    """
    Describe the columns of a relation.

    Args:
        accessor: Schema accessor
        relation: Relation label (e.g., 'dim_customers')

    Returns:
        One record per column in declaration order:
        {ordinal_position, column_name, data_type, is_nullable}
    """
    schema = accessor.describe(relation)
    return [
        {
            "ordinal_position": position,
            "column_name": spec.name,
            "data_type": spec.kind.value,
            "is_nullable": spec.nullable,
        }
        for position, spec in enumerate(schema.columns, 1)
    ]
