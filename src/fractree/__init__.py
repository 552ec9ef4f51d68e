"""Procedural fractal tree rendering toolkit."""

from .config import CONFIG, AppConfig
from .export import export_png, rasterize, save_png
from .geometry import IDENTITY, Frame, Point
from .logging_config import setup_logging
from .models import DEFAULT_PARAMETERS, DrawCommand, FillArc, ParameterSet, StrokeCurve
from .randomization import random_color, random_parameters
from .raster import DrawingSurface, RasterSurface, draw, parse_color
from .renderer import CommandCounts, control_points, count_commands, recursion_depth, render, render_tree
from .serialization import command_to_dict, commands_to_dicts, parameters_to_dict

__all__ = [
    "AppConfig",
    "CONFIG",
    "CommandCounts",
    "DEFAULT_PARAMETERS",
    "DrawCommand",
    "DrawingSurface",
    "FillArc",
    "Frame",
    "IDENTITY",
    "ParameterSet",
    "Point",
    "RasterSurface",
    "StrokeCurve",
    "command_to_dict",
    "commands_to_dicts",
    "control_points",
    "count_commands",
    "draw",
    "export_png",
    "parameters_to_dict",
    "parse_color",
    "random_color",
    "random_parameters",
    "rasterize",
    "recursion_depth",
    "render",
    "render_tree",
    "save_png",
    "setup_logging",
]
