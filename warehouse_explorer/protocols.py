"""
Module Protocols
================
Type contracts for row sources and catalog modules.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class RowSource(Protocol):
    """
    Contract for storage backends behind the schema accessor.

    A source knows physical tables only; relation labels and row shapes
    are the accessor's concern.
    """

    def fetch(self, table: str, columns: list[str] | None = None) -> Iterator[dict]:
        """Yield rows of a table, projected to `columns` when given."""
        ...

    def count(self, table: str) -> int:
        """Return the number of rows in a table."""
        ...


@runtime_checkable
class MeasureCatalogModule(Protocol):
    """
    Contract for modules that publish measure catalogs.

    Each module exposes its catalogs as ordered tuples of definitions.
    """

    STANDARD_MEASURES: tuple
    EXTENDED_MEASURES: tuple
