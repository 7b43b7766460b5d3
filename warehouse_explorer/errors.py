"""
Errors
======
Failures raised while reading relations and evaluating measures.
"""


class WarehouseError(Exception):
    """Base class for warehouse explorer errors."""


class RelationNotFoundError(WarehouseError):
    """A relation label (or its physical table) does not exist."""

    def __init__(self, relation: str, detail: str = "") -> None:
        self.relation = relation
        message = f"Unknown relation: {relation}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class SchemaMismatchError(WarehouseError):
    """A row or projection does not match the relation schema."""

    def __init__(self, relation: str, detail: str) -> None:
        self.relation = relation
        self.detail = detail
        super().__init__(f"{relation}: {detail}")


class UnsupportedAggregationError(WarehouseError):
    """A measure definition combines an aggregation with an invalid column."""

    def __init__(self, measure: str, detail: str) -> None:
        self.measure = measure
        self.detail = detail
        super().__init__(f"{measure}: {detail}")
