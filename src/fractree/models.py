"""Value types shared by the renderer and the drawing surfaces."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union

from .geometry import IDENTITY, ORIGIN, Frame, Point

Color = str

LENGTH_FACTOR = 0.75
WIDTH_FACTOR = 0.6
LEAF_THRESHOLD = 5.0
LEAF_RADIUS = 10.0
SHADOW_BLUR = 15.0
SHADOW_COLOR: Color = "rgba(0,0,0,1)"


@dataclass(frozen=True)
class ParameterSet:
    """Everything that shapes and colors one render pass."""

    initial_length: float
    initial_branch_width: float
    angle_spread_degrees: float
    curve_offset_a: float
    curve_offset_b: float
    branch_color: Color
    leaf_color: Color

    def replace(self, **changes: object) -> "ParameterSet":
        return replace(self, **changes)


DEFAULT_PARAMETERS = ParameterSet(
    initial_length=120.0,
    initial_branch_width=15.0,
    angle_spread_degrees=0.0,
    curve_offset_a=10.0,
    curve_offset_b=0.0,
    branch_color="brown",
    leaf_color="green",
)


@dataclass(frozen=True)
class StrokeCurve:
    """Cubic curve from the frame's local origin to ``end``."""

    control1: Point
    control2: Point
    end: Point
    color: Color
    width: float
    frame: Frame = IDENTITY
    depth: int = 0
    shadow_blur: float = SHADOW_BLUR
    shadow_color: Color = SHADOW_COLOR
    start: Point = field(default=ORIGIN)


@dataclass(frozen=True)
class FillArc:
    """Filled arc path around ``center``; angles are radians."""

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    color: Color
    frame: Frame = IDENTITY
    depth: int = 0


DrawCommand = Union[StrokeCurve, FillArc]
