import pytest
from hypothesis import given
from hypothesis import strategies as st

from quark.culling import FrustumPlanes, is_sphere_visible, plane_point_distance

BOX = FrustumPlanes(
    (
        (1.0, 0.0, 0.0, 1.0),
        (-1.0, 0.0, 0.0, 1.0),
        (0.0, 1.0, 0.0, 1.0),
        (0.0, -1.0, 0.0, 1.0),
        (0.0, 0.0, 1.0, 1.0),
        (0.0, 0.0, -1.0, 1.0),
    )
)


@given(st.floats(-1e3, 1e3), st.floats(-1e3, 1e3), st.floats(-1e3, 1e3), st.floats(-1e3, 1e3))
def test_distance_of_origin_is_plane_offset(a, b, c, d):
    assert plane_point_distance((a, b, c, d), (0.0, 0.0, 0.0)) == d


def test_distance_flips_with_plane():
    p = (1.0, 2.0, 3.0)
    assert plane_point_distance((1.0, 0.0, 0.0, 0.0), p) == -plane_point_distance((-1.0, 0.0, 0.0, 0.0), p)


def test_origin_is_visible():
    assert is_sphere_visible(BOX, (0.0, 0.0, 0.0), 0.0) is True


def test_far_point_small_radius_is_hidden():
    assert is_sphere_visible(BOX, (5.0, 0.0, 0.0), 1.0) is False


def test_far_point_large_radius_is_visible():
    assert is_sphere_visible(BOX, (5.0, 0.0, 0.0), 10.0) is True


def test_wrong_plane_count_raises():
    with pytest.raises(ValueError):
        FrustumPlanes(((1.0, 0.0, 0.0, 0.0),))