"""
Report Assembler
================
Runs a measure catalog through the evaluator and collects one
(measure_name, measure_value) row per definition, in catalog order.
"""

import threading
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from warehouse_explorer.config import get_settings
from warehouse_explorer.errors import SchemaMismatchError, UnsupportedAggregationError
from warehouse_explorer.measures.definitions import STANDARD_MEASURES, MeasureDefinition
from warehouse_explorer.measures.evaluator import MeasureResult, evaluate
from warehouse_explorer.schema.accessor import SchemaAccessor

# Failures isolated to a single measure; anything else aborts the build
RECOVERABLE_ERRORS = (UnsupportedAggregationError, SchemaMismatchError)


@dataclass(frozen=True)
class Report:
    """Ordered measure results. `complete` is False for a cancelled build."""

    results: tuple[MeasureResult, ...]
    complete: bool = True

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.ok)

    @property
    def total(self) -> int:
        return len(self.results)

    def names(self) -> list[str]:
        return [r.measure_name for r in self.results]

    def value(self, measure_name: str):
        for result in self.results:
            if result.measure_name == measure_name:
                return result.measure_value
        raise KeyError(measure_name)

    def rows(self) -> list[dict]:
        """Two-column rows: {measure_name, measure_value}."""
        return [
            {"measure_name": r.measure_name, "measure_value": r.measure_value}
            for r in self.results
        ]

    def render(self) -> str:
        """Render as a plain two-column text table."""
        cells = [("measure_name", "measure_value")]
        for r in self.results:
            cells.append((r.measure_name, _format_value(r)))

        width = max(len(name) for name, _ in cells)
        lines = [f"{name:<{width}}  {value}" for name, value in cells]
        lines.insert(1, "-" * width + "  " + "-" * 13)
        if not self.complete:
            lines.append("(partial report: build cancelled)")
        return "\n".join(lines)


def _format_value(result: MeasureResult) -> str:
    if result.error:
        return f"NULL [{result.error}: {result.message}]"
    value = result.measure_value
    if value is None:
        return "NULL"
    if isinstance(value, float):
        return f"{value:,.4f}"
    return f"{value:,}"


def evaluate_safely(definition: MeasureDefinition, accessor: SchemaAccessor) -> MeasureResult:
    """
    Evaluate a measure, turning per-measure failures into a tagged null result.

    Raises:
        RelationNotFoundError: Unknown relations abort the whole report
    """
    try:
        return evaluate(definition, accessor)
    except RECOVERABLE_ERRORS as e:
        return MeasureResult(
            measure_name=definition.name,
            measure_value=None,
            error=type(e).__name__,
            message=str(e),
        )


def build_report(
    catalog: Sequence[MeasureDefinition] = STANDARD_MEASURES,
    accessor: SchemaAccessor | None = None,
    *,
    max_workers: int | None = None,
    cancel_event: threading.Event | None = None,
) -> Report:
    """
    Build the measures report.

    Args:
        catalog: Ordered measure definitions (default: the six standard KPIs)
        accessor: Relation reader (default: configured Supabase warehouse)
        max_workers: Evaluate up to this many measures concurrently (default: settings.max_workers)
        cancel_event: When set, stop between measure evaluations

    Returns:
        Report with one row per evaluated definition, in catalog order

    Raises:
        RelationNotFoundError: If any definition references an unknown relation
    """
    if accessor is None:
        accessor = SchemaAccessor.from_settings()

    max_workers = max_workers or get_settings().max_workers
    if max_workers <= 1:
        return _build_sequential(catalog, accessor, cancel_event)
    return _build_concurrent(catalog, accessor, max_workers, cancel_event)


def _cancelled(cancel_event: threading.Event | None) -> bool:
    return cancel_event is not None and cancel_event.is_set()


def _build_sequential(catalog, accessor, cancel_event) -> Report:
    results = []
    for definition in catalog:
        if _cancelled(cancel_event):
            return Report(tuple(results), complete=False)
        results.append(evaluate_safely(definition, accessor))
    return Report(tuple(results))


def _evaluate_unless_cancelled(definition, accessor, cancel_event) -> MeasureResult | None:
    # None marks a measure skipped after cancellation
    if _cancelled(cancel_event):
        return None
    return evaluate_safely(definition, accessor)


def _build_concurrent(catalog, accessor, max_workers, cancel_event) -> Report:
    results = []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(_evaluate_unless_cancelled, d, accessor, cancel_event)
            for d in catalog
        ]

        for future in futures:
            try:
                result = future.result()
            except Exception:
                for pending in futures:
                    pending.cancel()
                raise

            if result is None:
                for pending in futures:
                    pending.cancel()
                return Report(tuple(results), complete=False)
            results.append(result)

    return Report(tuple(results))
