"""Serialization helpers for API and UI clients."""

from __future__ import annotations

from typing import Iterable

from .geometry import Frame
from .models import DrawCommand, FillArc, ParameterSet, StrokeCurve


def parameters_to_dict(parameters: ParameterSet) -> dict[str, object]:
    return {
        "initial_length": parameters.initial_length,
        "initial_branch_width": parameters.initial_branch_width,
        "angle_spread_degrees": parameters.angle_spread_degrees,
        "curve_offset_a": parameters.curve_offset_a,
        "curve_offset_b": parameters.curve_offset_b,
        "branch_color": parameters.branch_color,
        "leaf_color": parameters.leaf_color,
    }


def frame_to_dict(frame: Frame) -> dict[str, object]:
    return {"origin": list(frame.origin), "rotation": frame.rotation}


def command_to_dict(command: DrawCommand) -> dict[str, object]:
    if isinstance(command, StrokeCurve):
        return {
            "type": "stroke_curve",
            "frame": frame_to_dict(command.frame),
            "depth": command.depth,
            "start": list(command.start),
            "control1": list(command.control1),
            "control2": list(command.control2),
            "end": list(command.end),
            "color": command.color,
            "width": command.width,
            "shadow_blur": command.shadow_blur,
            "shadow_color": command.shadow_color,
        }
    if isinstance(command, FillArc):
        return {
            "type": "fill_arc",
            "frame": frame_to_dict(command.frame),
            "depth": command.depth,
            "center": list(command.center),
            "radius": command.radius,
            "start_angle": command.start_angle,
            "end_angle": command.end_angle,
            "color": command.color,
        }
    raise TypeError(f"Unknown draw command: {command!r}")


def commands_to_dicts(commands: Iterable[DrawCommand]) -> list[dict[str, object]]:
    return [command_to_dict(command) for command in commands]
