"""Batch analysis and largest-shape ranking over collections of DrawableShape.

Batch analysis isolates failures per item: a GeometryError or arithmetic
fault on one shape becomes a Failure result for that shape and the rest of
the batch runs on.
Ranking is all-or-nothing, so any error aborts the request.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from shapesight.engine.errors import EmptyCollectionError, GeometryError
from shapesight.engine.metrics import ShapeMetrics, compute_metrics
from shapesight.engine.shapes import DrawableShape
from shapesight.engine.units import METERS, MeasurementUnit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    shape_id: str
    metrics: ShapeMetrics


@dataclass(frozen=True)
class Failure:
    shape_id: str
    error: str


ShapeAnalysisResult = Union[Success, Failure]


@dataclass(frozen=True)
class BatchSummary:
    results: tuple[ShapeAnalysisResult, ...]
    total_area: float
    shape_count: int

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.results if isinstance(r, Failure))


class RankingCriterion(str, enum.Enum):
    AREA = "area"
    PERIMETER = "perimeter"


@dataclass(frozen=True)
class RankedEntry:
    shape_id: str
    value: float


@dataclass(frozen=True)
class LargestShape:
    shape: DrawableShape
    metrics: ShapeMetrics
    ranked: tuple[RankedEntry, ...]


def analyze_one(shape: DrawableShape, unit: MeasurementUnit = METERS) -> ShapeAnalysisResult:
    try:
        return Success(shape_id=shape.id, metrics=compute_metrics(shape.geometry, unit))
    except (GeometryError, ArithmeticError) as e:
        logger.warning("Shape %s FAILED: %s", shape.id, e)
        return Failure(shape_id=shape.id, error=str(e))


def batch_analyze(shapes: Sequence[DrawableShape], unit: MeasurementUnit = METERS) -> BatchSummary:
    """Compute metrics for every shape, in input order, without aborting on failures."""
    results = tuple(analyze_one(s, unit) for s in shapes)
    total_area = sum(r.metrics.area for r in results if isinstance(r, Success))

    summary = BatchSummary(results=results, total_area=total_area, shape_count=len(shapes))
    logger.debug(
        "Batch complete: %d/%d shapes ok, total area %.4f",
        summary.shape_count - summary.failed_count,
        summary.shape_count,
        total_area,
    )
    return summary


def _criterion_value(metrics: ShapeMetrics, criterion: RankingCriterion) -> float:
    if criterion is RankingCriterion.PERIMETER:
        return metrics.perimeter
    return metrics.area


def find_largest_shape(
    shapes: Sequence[DrawableShape],
    criterion: RankingCriterion = RankingCriterion.AREA,
    unit: MeasurementUnit = METERS,
) -> LargestShape:
    """Pick the shape with the greatest area or perimeter and rank the rest.

    Ties go to the shape seen first. The ranking holds every shape, sorted by
    value descending.

    Raises:
        EmptyCollectionError: if ``shapes`` is empty.
    """
    if not shapes:
        raise EmptyCollectionError("No shapes provided")

    best: tuple[DrawableShape, ShapeMetrics] | None = None
    best_value = float("-inf")
    entries: list[RankedEntry] = []

    for shape in shapes:
        metrics = compute_metrics(shape.geometry, unit)
        value = _criterion_value(metrics, criterion)
        entries.append(RankedEntry(shape_id=shape.id, value=value))
        if value > best_value:
            best_value = value
            best = (shape, metrics)

    if best is None:
        raise GeometryError("No valid shapes found")

    ranked = tuple(sorted(entries, key=lambda e: e.value, reverse=True))
    return LargestShape(shape=best[0], metrics=best[1], ranked=ranked)
