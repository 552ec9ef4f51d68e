"""Drawing surfaces that execute draw commands."""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from dataclasses import dataclass, replace
from math import cos, sin
from typing import Iterable, Iterator, Optional, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFilter

from .geometry import IDENTITY, Frame, Point
from .models import DrawCommand, FillArc, StrokeCurve

logger = logging.getLogger(__name__)

RGBA = Tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)

_FUNCTIONAL_COLOR = re.compile(
    r"^\s*rgba?\(\s*([-+\d.eE]+)\s*,\s*([-+\d.eE]+)\s*,\s*([-+\d.eE]+)\s*(?:,\s*([-+\d.eE]+)\s*)?\)\s*$"
)


def _channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


def parse_color(value: str) -> Optional[RGBA]:
    """Parse a CSS color string, returning ``None`` when it is not a color.

    ``rgb()``/``rgba()`` accept fractional channels, which Pillow's own
    parser rejects.
    """

    match = _FUNCTIONAL_COLOR.match(value) if isinstance(value, str) else None
    if match:
        try:
            red, green, blue = (float(match.group(i)) for i in (1, 2, 3))
            alpha = float(match.group(4)) if match.group(4) is not None else 1.0
        except ValueError:
            return None
        return (_channel(red), _channel(green), _channel(blue), _channel(alpha * 255))
    try:
        return ImageColor.getcolor(value, "RGBA")
    except (ValueError, TypeError, AttributeError):
        return None


@dataclass(frozen=True)
class SurfaceState:
    frame: Frame = IDENTITY
    stroke_color: RGBA = BLACK
    fill_color: RGBA = BLACK


class DrawingSurface:
    """Base surface: a stack of saved states plus the two drawing primitives.

    Subclasses implement :meth:`stroke_curve` and :meth:`fill_arc` against
    :attr:`state`, which is only changed inside :meth:`scope`.
    """

    def __init__(self) -> None:
        self._states: list[SurfaceState] = [SurfaceState()]

    @property
    def state(self) -> SurfaceState:
        return self._states[-1]

    @property
    def depth(self) -> int:
        return len(self._states) - 1

    @contextmanager
    def scope(self, frame: Frame) -> Iterator["DrawingSurface"]:
        """Save the current state, switch to ``frame`` and restore on exit."""

        self._states.append(replace(self.state, frame=frame))
        try:
            yield self
        finally:
            self._states.pop()

    def _set_style(self, field_name: str, value: str) -> RGBA:
        color = parse_color(value)
        if color is None:
            logger.warning("Ignoring invalid color %r", value)
        else:
            self._states[-1] = replace(self.state, **{field_name: color})
        return getattr(self.state, field_name)

    def set_stroke_color(self, value: str) -> RGBA:
        return self._set_style("stroke_color", value)

    def set_fill_color(self, value: str) -> RGBA:
        return self._set_style("fill_color", value)

    def stroke_curve(self, command: StrokeCurve) -> None:
        raise NotImplementedError

    def fill_arc(self, command: FillArc) -> None:
        raise NotImplementedError


def draw(commands: Iterable[DrawCommand], surface: DrawingSurface) -> int:
    """Execute ``commands`` on ``surface``; returns how many were drawn."""

    drawn = 0
    for command in commands:
        with surface.scope(command.frame):
            if isinstance(command, StrokeCurve):
                surface.stroke_curve(command)
            else:
                surface.fill_arc(command)
        drawn += 1
    return drawn


def bezier_points(start: Point, control1: Point, control2: Point, end: Point, segments: int) -> list[Point]:
    points = []
    for step in range(segments + 1):
        t = step / segments
        u = 1.0 - t
        a, b, c, d = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
        points.append(
            (
                a * start[0] + b * control1[0] + c * control2[0] + d * end[0],
                a * start[1] + b * control1[1] + c * control2[1] + d * end[1],
            )
        )
    return points


def arc_points(center: Point, radius: float, start_angle: float, end_angle: float, segments: int) -> list[Point]:
    sweep = end_angle - start_angle
    return [
        (
            center[0] + radius * cos(start_angle + sweep * step / segments),
            center[1] + radius * sin(start_angle + sweep * step / segments),
        )
        for step in range(segments + 1)
    ]


class RasterSurface(DrawingSurface):
    """Pillow-backed surface.

    Shadows go to a separate mask that is blurred and composited beneath the
    tree when the image is requested.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: str = "white",
        curve_segments: int = 24,
        arc_segments: int = 16,
        shadow_blur: Optional[float] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        super().__init__()
        self.size = (int(width), int(height))
        self.background = parse_color(background) or (255, 255, 255, 255)
        self.curve_segments = curve_segments
        self.arc_segments = arc_segments
        self.shadow_blur = shadow_blur
        self._layer = Image.new("RGBA", self.size, (0, 0, 0, 0))
        self._shadow = Image.new("L", self.size, 0)
        self._mask_blur = 0.0
        self._draw = ImageDraw.Draw(self._layer, "RGBA")
        self._shadow_draw = ImageDraw.Draw(self._shadow)

    def _to_world(self, points: list[Point]) -> list[Point]:
        frame = self.state.frame
        return [frame.to_world(point) for point in points]

    def stroke_curve(self, command: StrokeCurve) -> None:
        color = self.set_stroke_color(command.color)
        local = bezier_points(command.start, command.control1, command.control2, command.end, self.curve_segments)
        points = self._to_world(local)
        width = max(1, int(round(command.width)))
        self._draw.line(points, fill=color, width=width, joint="curve")
        blur = command.shadow_blur if self.shadow_blur is None else self.shadow_blur
        if blur > 0:
            self._mask_blur = max(self._mask_blur, blur)
            self._shadow_draw.line(points, fill=255, width=width, joint="curve")

    def fill_arc(self, command: FillArc) -> None:
        color = self.set_fill_color(command.color)
        local = arc_points(command.center, command.radius, command.start_angle, command.end_angle, self.arc_segments)
        points = self._to_world(local)
        self._draw.polygon(points, fill=color)
        if self._mask_blur > 0:
            self._shadow_draw.polygon(points, fill=255)

    def to_image(self) -> Image.Image:
        """Flatten background, blurred shadow and tree into an RGB image."""

        canvas = Image.new("RGBA", self.size, self.background)
        if self._mask_blur > 0:
            mask = self._shadow.filter(ImageFilter.GaussianBlur(self._mask_blur / 2))
            canvas.paste((0, 0, 0, 255), mask=mask)
        canvas.alpha_composite(self._layer)
        return canvas.convert("RGB")
