"""Geometry error taxonomy.

Every error raised by the engine derives from GeometryError so the API layer
can map the whole family to a single client-error response.
"""

from __future__ import annotations


class GeometryError(Exception):
    """Base class for all geometry engine failures."""


class ShapeValidationError(GeometryError):
    """A shape is structurally malformed (e.g. a triangle without 3 vertices)."""


class DegenerateTriangleError(GeometryError):
    """Side lengths violate the triangle inequality."""


class TooFewVerticesError(GeometryError):
    """A polygon was given fewer than 3 vertices."""


class UnsupportedShapeError(GeometryError):
    """The object is not one of the known shape variants."""


class EmptyCollectionError(GeometryError):
    """A ranking was requested over zero shapes."""
