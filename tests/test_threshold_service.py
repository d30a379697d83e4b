"""Tests for colour conversion and thresholding."""

import numpy as np
import pytest

from services.threshold_service import ThresholdService


@pytest.fixture
def service() -> ThresholdService:
    return ThresholdService()


def test_grayscale_drops_channels(service, logo_pixels):
    gray = service.to_grayscale(logo_pixels)
    assert gray.shape == (40, 60)
    assert gray[20, 30] == 200
    assert gray[0, 0] == 0


def test_rgb_swaps_channel_order(service):
    bgr = np.zeros((2, 2, 3), dtype=np.uint8)
    bgr[..., 0] = 255
    rgb = service.to_rgb(bgr)
    assert rgb[0, 0].tolist() == [0, 0, 255]


def test_binary_threshold_is_strict(service):
    gray = np.array([[5, 10, 11, 200]], dtype=np.uint8)
    assert service.binary(gray, 10).tolist() == [[0, 0, 255, 255]]


def test_inverse_binary_threshold(service):
    gray = np.array([[5, 10, 11, 200]], dtype=np.uint8)
    assert service.binary(gray, 10, inverse=True).tolist() == [[255, 255, 0, 0]]


def test_default_threshold_is_ten(service):
    assert service.threshold == 10


@pytest.mark.parametrize("method", ["mean", "gaussian"])
def test_adaptive_on_flat_image_is_white(service, method):
    flat = np.full((20, 20), 100, dtype=np.uint8)
    out = service.adaptive(flat, method=method)
    assert out.shape == flat.shape
    assert (out == 255).all()


def test_adaptive_picks_out_grid_lines(service, sudoku_pixels):
    out = service.adaptive(sudoku_pixels, method="mean")
    assert set(np.unique(out)) <= {0, 255}
    assert out[0, 5] == 0
    assert out[5, 5] == 255


def test_adaptive_rejects_even_block(service, sudoku_pixels):
    with pytest.raises(ValueError):
        service.adaptive(sudoku_pixels, block_size=4)


def test_adaptive_rejects_unknown_method(service, sudoku_pixels):
    with pytest.raises(ValueError):
        service.adaptive(sudoku_pixels, method="otsu")
