"""Random parameter sets for the "generate tree" action."""

from __future__ import annotations

import logging
import random
from math import floor
from typing import Optional

from .models import Color, ParameterSet

logger = logging.getLogger(__name__)

LENGTH_RANGE = (100, 120)
BRANCH_WIDTH_RANGE = (1.0, 71.0)
CURVE_A_RANGE = (2.0, 22.0)
CURVE_B_RANGE = (0.0, 50.0)
CHANNEL_MAX = 255.0


def _uniform(rng: random.Random, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return rng.random() * (high - low) + low


def random_color(rng: Optional[random.Random] = None) -> Color:
    """CSS ``rgb()`` color with unrounded channels in [0, 255)."""

    rng = rng or random
    red, green, blue = (rng.random() * CHANNEL_MAX for _ in range(3))
    return f"rgb({red},{green},{blue})"


def random_parameters(rng: Optional[random.Random] = None) -> ParameterSet:
    rng = rng or random
    low, high = LENGTH_RANGE
    length = floor(rng.random() * (high - low) + low)
    parameters = ParameterSet(
        initial_length=float(length),
        initial_branch_width=_uniform(rng, BRANCH_WIDTH_RANGE),
        angle_spread_degrees=0.0,
        curve_offset_a=_uniform(rng, CURVE_A_RANGE),
        curve_offset_b=_uniform(rng, CURVE_B_RANGE),
        branch_color=random_color(rng),
        leaf_color=random_color(rng),
    )
    logger.debug("Randomized parameters: %s", parameters)
    return parameters
