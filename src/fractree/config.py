"""
Application configuration and defaults.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .geometry import Point
from .models import DEFAULT_PARAMETERS, SHADOW_BLUR, ParameterSet


@dataclass
class AppConfig:
    """Global application configuration."""

    # Canvas
    canvas_width: int = 1280
    canvas_height: int = 800
    background: str = "white"
    # The trunk starts this far above the bottom edge
    root_lift: float = 80.0

    # Raster quality
    curve_segments: int = 24
    arc_segments: int = 16

    # Export
    export_filename: str = "tree.png"

    # Request limits
    max_canvas_pixels: int = 4096 * 4096
    # Trunks above this grow past 2**17 branches
    max_length: float = 400.0

    # Shadow blur applied by raster surfaces; None keeps each command's own blur
    shadow_blur: Optional[float] = SHADOW_BLUR

    # Logging
    logger_name: str = "fractree"
    log_level: int = logging.INFO
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_datefmt: str = "%H:%M:%S"

    default_parameters: ParameterSet = DEFAULT_PARAMETERS

    def origin(self, width: Optional[int] = None, height: Optional[int] = None) -> Point:
        """Trunk origin: bottom centre of the canvas, lifted by ``root_lift``."""
        width = self.canvas_width if width is None else width
        height = self.canvas_height if height is None else height
        return (width / 2, height - self.root_lift)


# Global config instance
CONFIG = AppConfig()
