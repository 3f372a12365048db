"""ShapeSight geometry engine."""

from shapesight.engine.batch import (
    BatchSummary,
    Failure,
    LargestShape,
    RankedEntry,
    RankingCriterion,
    ShapeAnalysisResult,
    Success,
    batch_analyze,
    find_largest_shape,
)
from shapesight.engine.errors import GeometryError
from shapesight.engine.metrics import BoundingBox, ShapeMetrics, compute_metrics
from shapesight.engine.polygons import PolygonProperties, analyze_polygon, is_convex
from shapesight.engine.primitives import Point, cross_product, distance
from shapesight.engine.shapes import Circle, DrawableShape, Polygon, Rectangle, Shape, Triangle
from shapesight.engine.transforms import transform_shape
from shapesight.engine.triangles import TriangleInfo, analyze_triangle, classify_triangle
from shapesight.engine.units import FEET, METERS, Custom, MeasurementUnit

__all__ = [
    "BatchSummary",
    "BoundingBox",
    "Circle",
    "Custom",
    "DrawableShape",
    "FEET",
    "Failure",
    "GeometryError",
    "LargestShape",
    "METERS",
    "MeasurementUnit",
    "Point",
    "Polygon",
    "PolygonProperties",
    "RankedEntry",
    "RankingCriterion",
    "Rectangle",
    "Shape",
    "ShapeAnalysisResult",
    "ShapeMetrics",
    "Success",
    "Triangle",
    "TriangleInfo",
    "analyze_polygon",
    "analyze_triangle",
    "batch_analyze",
    "classify_triangle",
    "compute_metrics",
    "cross_product",
    "distance",
    "find_largest_shape",
    "is_convex",
    "transform_shape",
]
