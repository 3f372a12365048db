"""Measurement units for metric output.

A unit only rescales lengths and areas. Coordinates (centroid, bounding box)
always stay in the shape's native unit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union, assert_never

from shapesight.engine.constants import FEET_PER_METER, SQUARE_FEET_PER_SQUARE_METER


@dataclass(frozen=True)
class Meters:
    pass


@dataclass(frozen=True)
class Feet:
    pass


@dataclass(frozen=True)
class Custom:
    """Arbitrary linear scale: lengths are multiplied by factor, areas by factor²."""

    factor: float


MeasurementUnit = Union[Meters, Feet, Custom]

METERS = Meters()
FEET = Feet()


def convert_distance(value: float, unit: MeasurementUnit) -> float:
    if isinstance(unit, Meters):
        return value
    if isinstance(unit, Feet):
        return value * FEET_PER_METER
    if isinstance(unit, Custom):
        return value * unit.factor
    assert_never(unit)


def convert_area(value: float, unit: MeasurementUnit) -> float:
    if isinstance(unit, Meters):
        return value
    if isinstance(unit, Feet):
        return value * SQUARE_FEET_PER_SQUARE_METER
    if isinstance(unit, Custom):
        return value * unit.factor * unit.factor
    assert_never(unit)
