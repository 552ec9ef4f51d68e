"""
Bounds of the randomized parameter sets.
"""

import random
import re

import pytest

from fractree.models import ParameterSet
from fractree.randomization import random_color, random_parameters

_RGB = re.compile(r"^rgb\(([^,]+),([^,]+),([^,]+)\)$")


def _channels(color):
    match = _RGB.match(color)
    assert match, color
    return [float(value) for value in match.groups()]


def test_random_parameters_stay_in_bounds():
    rng = random.Random(1234)
    for _ in range(1000):
        params = random_parameters(rng)
        assert isinstance(params, ParameterSet)
        assert 100 <= params.initial_length < 120
        assert params.initial_length == int(params.initial_length)
        assert 1 <= params.initial_branch_width < 71
        assert 2 <= params.curve_offset_a < 22
        assert 0 <= params.curve_offset_b < 50
        assert params.angle_spread_degrees == 0.0
        for color in (params.branch_color, params.leaf_color):
            assert all(0 <= channel < 255 for channel in _channels(color))


def test_default_generator_is_used_without_rng():
    for _ in range(1000):
        params = random_parameters()
        assert 100 <= params.initial_length < 120
        assert 1 <= params.initial_branch_width < 71


def test_seeded_generators_agree():
    assert random_parameters(random.Random(7)) == random_parameters(random.Random(7))


def test_color_channels_are_not_rounded():
    channels = [channel for seed in range(20) for channel in _channels(random_color(random.Random(seed)))]
    assert any(channel != int(channel) for channel in channels)


def test_parameter_sets_are_frozen():
    params = random_parameters(random.Random(1))
    with pytest.raises(Exception):
        params.initial_length = 5.0
    assert params.replace(initial_length=5.0).initial_length == 5.0
