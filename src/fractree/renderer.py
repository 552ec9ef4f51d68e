"""Recursive fractal tree generation.

The renderer never touches a drawing backend. It walks the branch recursion
and yields :class:`~fractree.models.StrokeCurve` and
:class:`~fractree.models.FillArc` commands, each carrying the frame it must
be drawn in. Parameters are frozen for the whole traversal: every recursive
call receives the same :class:`~fractree.models.ParameterSet`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import pi
from typing import Iterable, Iterator

from .geometry import IDENTITY, Frame, Point
from .models import (
    LEAF_RADIUS,
    LEAF_THRESHOLD,
    LENGTH_FACTOR,
    WIDTH_FACTOR,
    Color,
    DrawCommand,
    FillArc,
    ParameterSet,
    StrokeCurve,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandCounts:
    strokes: int
    leaves: int

    @property
    def total(self) -> int:
        return self.strokes + self.leaves


def _is_leaf(length: float) -> bool:
    # Written as a negation so NaN lengths terminate as well.
    return not length >= LEAF_THRESHOLD


def control_points(length: float, angle: float, curve_b: float) -> tuple[Point, Point]:
    """Bezier control points of a branch, leaning with the branch direction."""

    mid = -length / 2
    if angle < 0:
        return (curve_b, mid), (curve_b, mid)
    return (curve_b, mid), (-curve_b, mid)


def _stroke(frame: Frame, length: float, angle: float, width: float, params: ParameterSet, depth: int) -> StrokeCurve:
    control1, control2 = control_points(length, angle, params.curve_offset_b)
    return StrokeCurve(
        control1=control1,
        control2=control2,
        end=(0.0, -length),
        color=params.branch_color,
        width=width,
        frame=frame,
        depth=depth,
    )


def _leaf(frame: Frame, length: float, params: ParameterSet, depth: int) -> FillArc:
    return FillArc(
        center=(0.0, -length),
        radius=LEAF_RADIUS,
        start_angle=0.0,
        end_angle=pi / 2,
        color=params.leaf_color,
        frame=frame,
        depth=depth,
    )


def _branch(
    frame: Frame,
    length: float,
    angle: float,
    width: float,
    params: ParameterSet,
    depth: int,
) -> Iterator[DrawCommand]:
    yield _stroke(frame, length, angle, width, params, depth)
    if _is_leaf(length):
        yield _leaf(frame, length, params, depth)
        return

    tip = (0.0, -length)
    child_length = length * LENGTH_FACTOR
    child_width = width * WIDTH_FACTOR
    for child_angle in (angle + params.curve_offset_a, angle - params.curve_offset_a):
        child_frame = frame.translate(tip).rotate(child_angle)
        yield from _branch(child_frame, child_length, child_angle, child_width, params, depth + 1)


def render(origin: Point, parameters: ParameterSet) -> Iterator[DrawCommand]:
    """Yield the draw commands of a whole tree rooted at ``origin``.

    A tree whose trunk is already shorter than the leaf threshold is a single
    leaf marker with no stroke.
    """

    logger.debug("Rendering tree at %s with %s", origin, parameters)
    angle = parameters.angle_spread_degrees
    frame = IDENTITY.translate(origin).rotate(angle)
    if _is_leaf(parameters.initial_length):
        yield _leaf(frame, parameters.initial_length, parameters, 0)
        return
    yield from _branch(frame, parameters.initial_length, angle, parameters.initial_branch_width, parameters, 0)


def render_tree(
    origin: Point,
    length: float,
    angle: float,
    branch_width: float,
    branch_color: Color,
    leaf_color: Color,
    curve_a: float,
    curve_b: float,
) -> Iterator[DrawCommand]:
    """Positional form of :func:`render`."""

    parameters = ParameterSet(
        initial_length=length,
        initial_branch_width=branch_width,
        angle_spread_degrees=angle,
        curve_offset_a=curve_a,
        curve_offset_b=curve_b,
        branch_color=branch_color,
        leaf_color=leaf_color,
    )
    return render(origin, parameters)


def recursion_depth(length: float) -> int:
    """Number of shrink steps before a branch of ``length`` becomes a leaf."""

    depth = 0
    while not _is_leaf(length):
        length *= LENGTH_FACTOR
        depth += 1
    return depth


def count_commands(commands: Iterable[DrawCommand]) -> CommandCounts:
    strokes = 0
    leaves = 0
    for command in commands:
        if isinstance(command, StrokeCurve):
            strokes += 1
        else:
            leaves += 1
    return CommandCounts(strokes=strokes, leaves=leaves)
