"""Tests for the spherical interpolation helpers and look rotations."""

import numpy as np
import pytest

from camera_path.spherical import normalize, lerp, lerp_scalar, slerp, interpolate_on_sphere
from camera_path.camera_transform import look_rotation, CAMERA_FORWARD


X = np.array([1.0, 0.0, 0.0])
Y = np.array([0.0, 1.0, 0.0])
Z = np.array([0.0, 0.0, 1.0])


# ---------------------------------------------------------------------------
# normalize / lerp
# ---------------------------------------------------------------------------


class TestVectorHelpers:
    def test_normalize_unit_length(self):
        v = normalize([3.0, 4.0, 0.0])
        np.testing.assert_allclose(v, [0.6, 0.8, 0.0])

    def test_normalize_zero_vector_returns_zero(self):
        np.testing.assert_array_equal(normalize([0.0, 0.0, 0.0]), np.zeros(3))

    def test_normalize_tiny_vector_returns_zero(self):
        np.testing.assert_array_equal(normalize([1e-7, 0.0, 0.0]), np.zeros(3))

    def test_lerp_midpoint(self):
        np.testing.assert_allclose(lerp([0, 0, 0], [2, 4, 6], 0.5), [1, 2, 3])

    def test_lerp_clamps_factor(self):
        np.testing.assert_allclose(lerp([0, 0, 0], [1, 1, 1], 2.0), [1, 1, 1])
        np.testing.assert_allclose(lerp([0, 0, 0], [1, 1, 1], -1.0), [0, 0, 0])

    def test_lerp_scalar(self):
        assert lerp_scalar(10.0, 20.0, 0.25) == pytest.approx(12.5)


# ---------------------------------------------------------------------------
# slerp
# ---------------------------------------------------------------------------


class TestSlerp:
    def test_endpoints(self):
        np.testing.assert_allclose(slerp(X, Y, 0.0), X, atol=1e-12)
        np.testing.assert_allclose(slerp(X, Y, 1.0), Y, atol=1e-12)

    def test_midpoint_on_great_circle(self):
        mid = slerp(X, Y, 0.5)
        np.testing.assert_allclose(mid, [np.sqrt(0.5), np.sqrt(0.5), 0.0], atol=1e-12)

    @pytest.mark.parametrize("t", [0.0, 0.1, 0.33, 0.5, 0.9, 1.0])
    def test_result_is_unit_length(self, t):
        a = normalize([1.0, 2.0, -0.5])
        b = normalize([-0.3, 0.4, 2.0])
        assert np.linalg.norm(slerp(a, b, t)) == pytest.approx(1.0)

    @pytest.mark.parametrize("t", [0.0, 0.25, 0.5, 0.75, 1.0])
    def test_same_direction_returns_input(self, t):
        a = normalize([0.2, -1.0, 0.7])
        np.testing.assert_allclose(slerp(a, a, t), a, atol=1e-12)

    @pytest.mark.parametrize("t", [0.1, 0.3, 0.5, 0.8])
    def test_symmetric(self, t):
        a = normalize([1.0, 0.5, 0.0])
        b = normalize([-0.2, 0.1, 1.0])
        np.testing.assert_allclose(slerp(a, b, t), slerp(b, a, 1.0 - t), atol=1e-9)

    def test_constant_angular_velocity(self):
        angles = [np.arccos(np.clip(np.dot(X, slerp(X, Z, t)), -1, 1)) for t in (0.25, 0.5, 0.75)]
        np.testing.assert_allclose(angles, [np.pi / 8, np.pi / 4, 3 * np.pi / 8], atol=1e-12)

    @pytest.mark.parametrize("t", [0.0, 0.25, 0.5, 0.75, 1.0])
    def test_antipodal_collapses_along_start_axis(self, t):
        result = slerp(X, -X, t)
        assert np.all(np.isfinite(result))
        np.testing.assert_allclose(result, X * np.cos(np.pi * t), atol=1e-12)

    def test_antipodal_midpoint_is_near_zero(self):
        assert np.linalg.norm(slerp(X, -X, 0.5)) < 1e-12


# ---------------------------------------------------------------------------
# interpolate_on_sphere
# ---------------------------------------------------------------------------


class TestInterpolateOnSphere:
    def test_quarter_arc_midpoint(self):
        pos = interpolate_on_sphere([10, 0, 0], [0, 10, 0], [0, 0, 0], 0.5)
        np.testing.assert_allclose(pos, [10 * np.sqrt(0.5), 10 * np.sqrt(0.5), 0.0], atol=1e-9)
        assert np.linalg.norm(pos) == pytest.approx(10.0)

    def test_offset_center(self):
        center = np.array([5.0, -2.0, 1.0])
        start = center + [4.0, 0.0, 0.0]
        end = center + [0.0, 0.0, 4.0]
        pos = interpolate_on_sphere(start, end, center, 0.5)
        assert np.linalg.norm(pos - center) == pytest.approx(4.0)

    @pytest.mark.parametrize("t", np.linspace(0.0, 1.0, 11))
    def test_radius_between_endpoints(self, t):
        start = np.array([3.0, 1.0, 0.0])
        end = np.array([-1.0, 2.0, 8.0])
        pos = interpolate_on_sphere(start, end, np.zeros(3), t)
        r = np.linalg.norm(pos)
        lo, hi = sorted([np.linalg.norm(start), np.linalg.norm(end)])
        assert lo - 1e-9 <= r <= hi + 1e-9

    def test_start_at_center(self):
        pos = interpolate_on_sphere([0, 0, 0], [0, 0, 10], [0, 0, 0], 1.0)
        np.testing.assert_allclose(pos, [0, 0, 10], atol=1e-9)


# ---------------------------------------------------------------------------
# look_rotation
# ---------------------------------------------------------------------------


class TestLookRotation:
    def test_forward_is_identity(self):
        rotation = look_rotation(Z)
        np.testing.assert_allclose(rotation.as_matrix(), np.eye(3), atol=1e-12)

    @pytest.mark.parametrize("direction", [[1, 0, 0], [-1, 0, 0], [0.3, -0.2, -1.0], [2, 5, 1]])
    def test_points_forward_axis_along_direction(self, direction):
        rotation = look_rotation(direction)
        np.testing.assert_allclose(rotation.apply(CAMERA_FORWARD), normalize(direction), atol=1e-9)

    def test_keeps_camera_right_horizontal(self):
        rotation = look_rotation([1.0, -1.0, 1.0])
        right = rotation.apply([1.0, 0.0, 0.0])
        assert right[1] == pytest.approx(0.0, abs=1e-12)

    def test_zero_direction_returns_none(self):
        assert look_rotation([0.0, 0.0, 0.0]) is None

    def test_straight_down(self):
        rotation = look_rotation([0.0, -3.0, 0.0])
        np.testing.assert_allclose(rotation.apply(CAMERA_FORWARD), [0.0, -1.0, 0.0], atol=1e-9)
