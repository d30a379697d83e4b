"""Tests for scaling, rotation and perspective warps."""

import math

import numpy as np
import pytest

from services.transform_service import TransformService


@pytest.fixture
def service() -> TransformService:
    return TransformService()


@pytest.fixture
def pixels() -> np.ndarray:
    img = np.zeros((40, 60, 3), dtype=np.uint8)
    img[:, :30] = 255
    return img


class TestResize:
    def test_bigger(self, service, pixels):
        assert service.resize(pixels, 2, "cubic").shape == (80, 120, 3)

    def test_smaller(self, service, pixels):
        assert service.resize(pixels, 0.5, "area").shape == (20, 30, 3)

    @pytest.mark.parametrize("factor", [0, -1])
    def test_non_positive_factor(self, service, pixels, factor):
        with pytest.raises(ValueError):
            service.resize(pixels, factor)

    def test_unknown_interpolation(self, service, pixels):
        with pytest.raises(ValueError):
            service.resize(pixels, 2, "lanczos9")


class TestRotation:
    def test_rotate_90_swaps_axes(self, service, pixels):
        rotated = service.rotate_90_clockwise(pixels)
        assert rotated.shape == (60, 40, 3)
        # left half (white) ends up on top
        assert rotated[0, 0].tolist() == [255, 255, 255]
        assert rotated[59, 0].tolist() == [0, 0, 0]

    def test_bounds_at_45_degrees(self, service):
        new_x, new_y = service.rotated_bounds(40, 40, 45)
        assert new_x == pytest.approx(40 * math.sqrt(2))
        assert new_y == pytest.approx(40 * math.sqrt(2))

    def test_bounds_scale(self, service):
        new_x, new_y = service.rotated_bounds(40, 60, 0, scale=2)
        assert (new_x, new_y) == (120, 80)

    def test_rotation_matrix_recentres(self, service):
        matrix, size = service.rotation_matrix(40, 40, 45)
        assert matrix.shape == (2, 3)
        assert size == (56, 56)
        # the centre of the source lands in the centre of the canvas
        cx, cy = matrix @ np.array([20, 20, 1.0])
        assert cx == pytest.approx(40 * math.sqrt(2) / 2)
        assert cy == pytest.approx(40 * math.sqrt(2) / 2)

    def test_rotate_bound_canvas(self, service, pixels):
        rotated = service.rotate_bound(pixels, 45)
        expected = int(abs(60 * math.cos(math.pi / 4)) + abs(40 * math.sin(math.pi / 4)))
        assert rotated.shape == (expected, expected, 3)

    def test_rotate_bound_zero_angle_is_identity(self, service, pixels):
        np.testing.assert_array_equal(service.rotate_bound(pixels, 0), pixels)

    def test_rotation_rejects_bad_scale(self, service):
        with pytest.raises(ValueError):
            service.rotation_matrix(10, 10, 30, scale=0)


class TestPerspective:
    def test_identity_quad(self, service, pixels):
        quad = service.corners(40, 60)
        np.testing.assert_allclose(service.warp_perspective(pixels, quad, quad), pixels, atol=1)

    def test_keystone_quad(self, service):
        quad = service.keystone_quad(100, 200, 0.25)
        assert quad.tolist() == [[50, 0], [150, 0], [200, 100], [0, 100]]

    def test_keystone_output_size(self, service, pixels):
        dst = service.keystone_quad(40, 60, 0.15)
        out = service.warp_perspective(pixels, service.corners(40, 60), dst, size=(60, 40))
        assert out.shape == (40, 60, 3)
        # top corners fall outside the trapezoid
        assert out[0, 0].tolist() == [0, 0, 0]

    def test_bad_quad_shape(self, service, pixels):
        with pytest.raises(ValueError):
            service.warp_perspective(pixels, np.zeros((3, 2)), np.zeros((3, 2)))

    def test_bad_inset(self, service):
        with pytest.raises(ValueError):
            service.keystone_quad(10, 10, 0.5)
