from math import sqrt

import pytest

from fractree.geometry import IDENTITY, Frame


def test_identity_maps_points_unchanged():
    assert IDENTITY.to_world((3.0, -4.0)) == (3.0, -4.0)


def test_translate_then_rotate():
    frame = IDENTITY.translate((100.0, 200.0)).rotate(90.0)

    assert frame.origin == (100.0, 200.0)
    # Straight up in the local frame points right on screen after a clockwise quarter turn.
    assert frame.to_world((0.0, -10.0)) == pytest.approx((110.0, 200.0))


def test_rotations_compose_along_translations():
    parent = Frame((0.0, 0.0), 45.0)
    child = parent.translate((0.0, -sqrt(2.0))).rotate(45.0)

    assert child.origin == pytest.approx((1.0, -1.0))
    assert child.rotation == 90.0
    assert child.to_world((0.0, -1.0)) == pytest.approx((2.0, -1.0))


def test_frames_are_immutable():
    with pytest.raises(Exception):
        IDENTITY.rotation = 10.0
