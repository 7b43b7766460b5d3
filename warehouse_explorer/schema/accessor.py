"""
Schema Accessor
===============
Read-only, typed access to the star schema relations.

The accessor maps catalog-assigned relation labels (fact_sales,
dim_customers, dim_products) to physical tables, checks every row
against the relation schema and coerces values to their column kinds.
It holds no mutable state, so one instance can serve concurrent scans.
"""

from collections.abc import Iterator, Mapping

from warehouse_explorer.config import get_settings
from warehouse_explorer.errors import RelationNotFoundError, SchemaMismatchError
from warehouse_explorer.protocols import RowSource
from warehouse_explorer.schema.relations import GOLD_RELATIONS, RelationSchema, coerce_value


class SchemaAccessor:
    """Typed relation reader over a RowSource."""

    def __init__(
        self,
        source: RowSource,
        relations: Mapping[str, RelationSchema] = GOLD_RELATIONS,
        tables: Mapping[str, str] | None = None,
    ) -> None:
        self.source = source
        self.relations = dict(relations)
        self.tables = dict(tables if tables is not None else get_settings().relation_tables)

    @classmethod
    def from_settings(cls) -> "SchemaAccessor":
        """Accessor reading the configured warehouse through Supabase."""
        from warehouse_explorer.schema.sources import SupabaseSource

        return cls(SupabaseSource(page_size=get_settings().page_size))

    def describe(self, relation: str) -> RelationSchema:
        """
        Get the schema of a relation.

        Raises:
            RelationNotFoundError: If the label is unknown
        """
        try:
            return self.relations[relation]
        except KeyError:
            raise RelationNotFoundError(relation) from None

    def table_for(self, relation: str) -> str:
        """Physical table name behind a relation label."""
        self.describe(relation)
        try:
            return self.tables[relation]
        except KeyError:
            raise RelationNotFoundError(relation, "no table mapped") from None

    def scan(self, relation: str, columns: list[str] | None = None) -> Iterator[dict]:
        """
        Lazily read rows of a relation.

        Args:
            relation: Relation label
            columns: Projection (default: every schema column)

        Yields:
            Rows as {column: typed value}, holding exactly the projected columns

        Raises:
            RelationNotFoundError: If the label or its table is unknown
            SchemaMismatchError: If the projection names an unknown column,
                or a row has missing/extra fields or an uncoercible value
        """
        schema = self.describe(relation)
        table = self.table_for(relation)

        if columns is not None:
            unknown = [c for c in columns if schema.column(c) is None]
            if unknown:
                raise SchemaMismatchError(relation, f"unknown columns {unknown}")
            specs = [schema.column(c) for c in columns]
        else:
            specs = list(schema.columns)

        return self._typed_rows(relation, table, specs, columns)

    def _typed_rows(self, relation, table, specs, columns) -> Iterator[dict]:
        expected = {spec.name for spec in specs}

        for index, row in enumerate(self.source.fetch(table, columns)):
            keys = set(row)
            if keys != expected:
                missing = sorted(expected - keys)
                extra = sorted(keys - expected)
                raise SchemaMismatchError(
                    relation, f"row {index}: missing={missing} extra={extra}"
                )

            typed = {}
            for spec in specs:
                try:
                    typed[spec.name] = coerce_value(row[spec.name], spec.kind)
                except ValueError as e:
                    raise SchemaMismatchError(relation, f"row {index}: {spec.name}: {e}") from e
            yield typed

    def count(self, relation: str) -> int:
        """Row count of a relation, without materializing rows."""
        return self.source.count(self.table_for(relation))
