"""Planar points and the translate/rotate frames branches are drawn in."""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, radians, sin
from typing import Tuple

Point = Tuple[float, float]

ORIGIN: Point = (0.0, 0.0)


def _rotate(point: Point, degrees: float) -> Point:
    # Screen frame: y grows downwards, so positive angles turn clockwise.
    theta = radians(degrees)
    x, y = point
    return (x * cos(theta) - y * sin(theta), x * sin(theta) + y * cos(theta))


def _add(a: Point, b: Point) -> Point:
    return (a[0] + b[0], a[1] + b[1])


@dataclass(frozen=True)
class Frame:
    """Local coordinate system: an origin plus an accumulated rotation."""

    origin: Point = ORIGIN
    rotation: float = 0.0

    def translate(self, offset: Point) -> "Frame":
        return Frame(origin=self.to_world(offset), rotation=self.rotation)

    def rotate(self, degrees: float) -> "Frame":
        return Frame(origin=self.origin, rotation=self.rotation + degrees)

    def to_world(self, point: Point) -> Point:
        """Map a point expressed in this frame to surface coordinates."""

        return _add(self.origin, _rotate(point, self.rotation))


IDENTITY = Frame()
