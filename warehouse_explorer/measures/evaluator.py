"""
Aggregation Evaluator
=====================
Evaluates one MeasureDefinition against the schema accessor.

Null handling:
    sum            nulls count as 0; an empty relation yields None
    avg            nulls excluded; no non-null values yields None
    count          non-null values of the column (all rows when column is None)
    count_distinct distinct non-null values; empty or all-null yields 0
"""

from dataclasses import dataclass

from warehouse_explorer.errors import UnsupportedAggregationError
from warehouse_explorer.measures.definitions import Aggregation, MeasureDefinition
from warehouse_explorer.schema.accessor import SchemaAccessor
from warehouse_explorer.schema.relations import RelationSchema


@dataclass(frozen=True)
class MeasureResult:
    """One report row."""

    measure_name: str
    measure_value: int | float | None
    error: str | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


class SumAccumulator:
    def __init__(self) -> None:
        self.rows = 0
        self.total = 0

    def add(self, value) -> None:
        self.rows += 1
        if value is not None:
            self.total += value

    def result(self):
        return self.total if self.rows else None


class AvgAccumulator:
    def __init__(self) -> None:
        self.total = 0
        self.count = 0

    def add(self, value) -> None:
        if value is not None:
            self.total += value
            self.count += 1

    def result(self):
        return float(self.total) / self.count if self.count else None


class CountAccumulator:
    def __init__(self) -> None:
        self.count = 0

    def add(self, value) -> None:
        if value is not None:
            self.count += 1

    def result(self):
        return self.count


class DistinctAccumulator:
    """Set-cardinality accumulator; memory grows with distinct values only."""

    def __init__(self) -> None:
        self.seen: set = set()

    def add(self, value) -> None:
        if value is not None:
            self.seen.add(value)

    def result(self):
        return len(self.seen)


ACCUMULATORS = {
    Aggregation.SUM: SumAccumulator,
    Aggregation.AVG: AvgAccumulator,
    Aggregation.COUNT: CountAccumulator,
    Aggregation.COUNT_DISTINCT: DistinctAccumulator,
}


def check_definition(definition: MeasureDefinition, schema: RelationSchema) -> Aggregation:
    """
    Validate a definition against its relation schema.

    Args:
        definition: Measure to check
        schema: Schema of definition.source

    Returns:
        The definition's aggregation as an Aggregation member

    Raises:
        UnsupportedAggregationError: If aggregation and column don't fit together
    """
    try:
        aggregation = Aggregation(definition.aggregation)
    except ValueError:
        raise UnsupportedAggregationError(
            definition.name, f"unknown aggregation {definition.aggregation!r}"
        ) from None

    if definition.column is None:
        if aggregation is not Aggregation.COUNT:
            raise UnsupportedAggregationError(
                definition.name, f"{aggregation.value} needs a column"
            )
        return aggregation

    spec = schema.column(definition.column)
    if spec is None:
        raise UnsupportedAggregationError(
            definition.name, f"column {definition.column!r} not in {schema.name}"
        )

    if aggregation in (Aggregation.SUM, Aggregation.AVG) and not spec.kind.is_numeric:
        raise UnsupportedAggregationError(
            definition.name,
            f"{aggregation.value} on non-numeric column {definition.column!r} ({spec.kind.value})",
        )

    return aggregation


def evaluate(definition: MeasureDefinition, accessor: SchemaAccessor) -> MeasureResult:
    """
    Compute a single measure.

    Args:
        definition: Measure to evaluate
        accessor: Source of relation rows

    Returns:
        MeasureResult with the scalar value

    Raises:
        RelationNotFoundError: If definition.source is unknown
        UnsupportedAggregationError: If the definition is invalid (raised before scanning)
        SchemaMismatchError: If a scanned row does not match the relation schema
    """
    schema = accessor.describe(definition.source)
    aggregation = check_definition(definition, schema)

    if definition.column is None:
        return MeasureResult(definition.name, accessor.count(definition.source))

    accumulator = ACCUMULATORS[aggregation]()
    for row in accessor.scan(definition.source, [definition.column]):
        accumulator.add(row[definition.column])

    return MeasureResult(definition.name, accumulator.result())
