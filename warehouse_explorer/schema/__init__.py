"""
Schema Layer
============
Relation schemas, row sources, and the typed accessor over them.
"""

from warehouse_explorer.schema.accessor import SchemaAccessor
from warehouse_explorer.schema.relations import (
    GOLD_RELATIONS,
    ColumnKind,
    ColumnSpec,
    RelationSchema,
)
from warehouse_explorer.schema.sources import MemorySource, SupabaseSource

__all__ = [
    "GOLD_RELATIONS",
    "ColumnKind",
    "ColumnSpec",
    "MemorySource",
    "RelationSchema",
    "SchemaAccessor",
    "SupabaseSource",
]
