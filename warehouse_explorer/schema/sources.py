"""
Row Sources
===========
Storage backends for the schema accessor.

- MemorySource: in-process snapshot (tests, offline JSON exports)
- SupabaseSource: paged reads from the warehouse via Supabase
"""

import json
from collections.abc import Iterator, Mapping
from pathlib import Path

from warehouse_explorer import db
from warehouse_explorer.errors import RelationNotFoundError


class MemorySource:
    """Rows held in memory, keyed by physical table name."""

    def __init__(self, tables: Mapping[str, list[dict]]) -> None:
        self._tables = {name: list(rows) for name, rows in tables.items()}

    @classmethod
    def from_json(cls, path: Path) -> "MemorySource":
        """Load a snapshot written as {table_name: [rows...]}."""
        return cls(json.loads(Path(path).read_text()))

    def _rows(self, table: str) -> list[dict]:
        try:
            return self._tables[table]
        except KeyError:
            raise RelationNotFoundError(table, "table not in snapshot") from None

    def fetch(self, table: str, columns: list[str] | None = None) -> Iterator[dict]:
        rows = self._rows(table)
        for row in rows:
            if columns is None:
                yield dict(row)
            else:
                # Missing columns stay missing so the accessor can report them
                yield {c: row[c] for c in columns if c in row}

    def count(self, table: str) -> int:
        return len(self._rows(table))


class SupabaseSource:
    """Paged, read-only access to warehouse tables through Supabase."""

    def __init__(self, page_size: int | None = None) -> None:
        self.page_size = page_size

    def fetch(self, table: str, columns: list[str] | None = None) -> Iterator[dict]:
        return db.stream_table(table, columns=columns, page_size=self.page_size)

    def count(self, table: str) -> int:
        return db.count_rows(table)
