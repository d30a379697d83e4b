"""
Shared fixtures. Sample images are synthesised with numpy and written with
OpenCV, so the suite needs no binary assets.
"""

from pathlib import Path

import cv2
import numpy as np
import pytest


def _write(path: Path, pixels: np.ndarray) -> Path:
    assert cv2.imwrite(str(path), pixels)
    return path


@pytest.fixture
def photo_pixels() -> np.ndarray:
    """500x600 BGR gradient with a flat patch at (100, 100)."""
    rows, cols = 500, 600
    img = np.zeros((rows, cols, 3), dtype=np.uint8)
    img[..., 0] = np.linspace(0, 255, cols, dtype=np.uint8)[None, :]
    img[..., 1] = np.linspace(0, 255, rows, dtype=np.uint8)[:, None]
    img[..., 2] = 90
    img[90:111, 90:111] = (10, 20, 30)
    return img


@pytest.fixture
def logo_pixels() -> np.ndarray:
    """40x60 black canvas with a white rectangle in the middle."""
    logo = np.zeros((40, 60, 3), dtype=np.uint8)
    logo[10:30, 15:45] = (200, 200, 200)
    return logo


@pytest.fixture
def sudoku_pixels() -> np.ndarray:
    """Grid of dark lines on a light background."""
    grid = np.full((90, 90), 220, dtype=np.uint8)
    grid[::10, :] = 30
    grid[:, ::10] = 30
    return grid


@pytest.fixture
def photo_path(tmp_path, photo_pixels) -> Path:
    return _write(tmp_path / "messi.png", photo_pixels)


@pytest.fixture
def logo_path(tmp_path, logo_pixels) -> Path:
    return _write(tmp_path / "commons.png", logo_pixels)


@pytest.fixture
def sudoku_path(tmp_path, sudoku_pixels) -> Path:
    return _write(tmp_path / "sudoku.png", sudoku_pixels)


@pytest.fixture
def output_dir(tmp_path) -> Path:
    return tmp_path / "out"
