"""PNG export of rendered trees."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterable, Union

from .config import CONFIG, AppConfig
from .models import DrawCommand
from .raster import RasterSurface, draw

logger = logging.getLogger(__name__)


def rasterize(commands: Iterable[DrawCommand], width: int, height: int, config: AppConfig = CONFIG) -> RasterSurface:
    surface = RasterSurface(
        width,
        height,
        background=config.background,
        curve_segments=config.curve_segments,
        arc_segments=config.arc_segments,
        shadow_blur=config.shadow_blur,
    )
    drawn = draw(commands, surface)
    logger.debug("Rasterized %d commands onto %dx%d surface", drawn, width, height)
    return surface


def export_png(commands: Iterable[DrawCommand], width: int, height: int, config: AppConfig = CONFIG) -> bytes:
    """Encode the drawn tree as PNG bytes."""

    buffer = io.BytesIO()
    rasterize(commands, width, height, config).to_image().save(buffer, format="PNG")
    return buffer.getvalue()


def save_png(
    commands: Iterable[DrawCommand],
    width: int,
    height: int,
    path: Union[str, Path, None] = None,
    config: AppConfig = CONFIG,
) -> Path:
    target = Path(path) if path is not None else Path(config.export_filename)
    target.write_bytes(export_png(commands, width, height, config))
    logger.info("Saved tree to %s", target)
    return target
