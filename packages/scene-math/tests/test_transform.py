import math

import pytest

from scene_math import vec
from scene_math.transform import project, rotate_x, rotate_y, rotate_z, rotate_zyx


def approx_vec(v):
    return pytest.approx(v, abs=1e-9)


def test_rotate_x_quarter_turn():
    assert rotate_x((1.0, 1.0, 1.0), math.pi / 2) == approx_vec((1.0, -1.0, 1.0))


def test_rotate_y_quarter_turn():
    assert rotate_y((1.0, 0.0, 0.0), math.pi / 2) == approx_vec((0.0, 0.0, -1.0))


def test_rotate_z_quarter_turn():
    assert rotate_z((1.0, 0.0, 0.0), math.pi / 2) == approx_vec((0.0, 1.0, 0.0))


@pytest.mark.parametrize("rotate", [rotate_x, rotate_y, rotate_z])
def test_rotation_and_complement_is_identity(rotate):
    v = (0.3, -1.2, 2.5)
    theta = 0.7
    assert rotate(rotate(v, theta), math.tau - theta) == approx_vec(v)


@pytest.mark.parametrize("rotate", [rotate_x, rotate_y, rotate_z])
def test_rotation_preserves_length(rotate):
    v = (1.0, 2.0, -3.0)
    origin = (0.0, 0.0, 0.0)
    assert vec.distance(rotate(v, 1.1), origin) == pytest.approx(vec.distance(v, origin))


def test_rotate_zyx_applies_z_first():
    v = (1.0, 0.0, 0.0)
    # Z quarter turn moves x onto y, then X quarter turn moves y onto z.
    assert rotate_zyx(v, math.pi / 2, 0.0, math.pi / 2) == approx_vec((0.0, 0.0, 1.0))


def test_project_origin_lands_on_center():
    assert project((0.0, 0.0, 0.0), 4.0, 100.0, (160.0, 128.0)) == (160.0, 128.0)


def test_project_nearer_points_spread_further():
    center = (0.0, 0.0)
    near = project((1.0, 0.0, -1.0), 4.0, 100.0, center)
    far = project((1.0, 0.0, 1.0), 4.0, 100.0, center)
    assert near is not None and far is not None
    assert near[0] > far[0]


@pytest.mark.parametrize("z", [-4.0, -5.0])
def test_project_at_or_behind_eye_is_none(z):
    assert project((1.0, 1.0, z), 4.0, 100.0, (0.0, 0.0)) is None


def test_vec_helpers():
    assert vec.add((1.0, 2.0, 3.0), (1.0, 1.0, 1.0)) == (2.0, 3.0, 4.0)
    assert vec.sub((1.0, 2.0, 3.0), (1.0, 1.0, 1.0)) == (0.0, 1.0, 2.0)
    assert vec.scale((1.0, -2.0, 0.5), 2.0) == (2.0, -4.0, 1.0)
    assert vec.distance((0.0, 0.0, 0.0), (3.0, 4.0, 0.0)) == 5.0
