from __future__ import annotations

import math
import logging
from typing import Tuple

import cv2
import numpy as np

logger = logging.getLogger(__name__)

INTERPOLATIONS = {
    "nearest": cv2.INTER_NEAREST,
    "linear": cv2.INTER_LINEAR,
    "cubic": cv2.INTER_CUBIC,
    "area": cv2.INTER_AREA,
}


class TransformService:
    """
    Geometric transformations: scaling, right-angle rotation, rotation that
    keeps the whole image on the canvas, and perspective warps.
    """

    @staticmethod
    def resize(pixels: np.ndarray, factor: float, interpolation: str = "linear") -> np.ndarray:
        if factor <= 0:
            raise ValueError(f"Scale factor must be positive, got {factor}")
        if interpolation not in INTERPOLATIONS:
            raise ValueError(f"Unknown interpolation {interpolation!r}")
        return cv2.resize(
            pixels, None, fx=factor, fy=factor, interpolation=INTERPOLATIONS[interpolation]
        )

    @staticmethod
    def rotate_90_clockwise(pixels: np.ndarray) -> np.ndarray:
        return cv2.rotate(pixels, cv2.ROTATE_90_CLOCKWISE)

    @staticmethod
    def rotated_bounds(rows: int, cols: int, angle: float, scale: float = 1.0) -> Tuple[float, float]:
        """
        Width and height of the box enclosing the scaled image rotated by
        *angle* degrees.
        """
        rad = math.radians(angle)
        scale_x, scale_y = cols * scale, rows * scale
        new_x = abs(scale_x * math.cos(rad)) + abs(scale_y * math.sin(rad))
        new_y = abs(scale_x * math.sin(rad)) + abs(scale_y * math.cos(rad))
        return new_x, new_y

    def rotation_matrix(
        self, rows: int, cols: int, angle: float, scale: float = 1.0
    ) -> Tuple[np.ndarray, Tuple[int, int]]:
        """
        2x3 affine matrix rotating about the image centre, shifted so the
        result is centred in the enlarged canvas. Returns (matrix, (width, height)).
        """
        if scale <= 0:
            raise ValueError(f"Scale must be positive, got {scale}")

        # Scale -> Rotate -> Translate
        center = (cols // 2, rows // 2)
        matrix = cv2.getRotationMatrix2D(center, angle, scale)
        new_x, new_y = self.rotated_bounds(rows, cols, angle, scale)
        matrix[0, 2] += (new_x - cols) / 2
        matrix[1, 2] += (new_y - rows) / 2
        return matrix, (int(new_x), int(new_y))

    def rotate_bound(self, pixels: np.ndarray, angle: float, scale: float = 1.0) -> np.ndarray:
        rows, cols = pixels.shape[:2]
        matrix, size = self.rotation_matrix(rows, cols, angle, scale)
        logger.debug(f"Rotating {rows}x{cols} by {angle} deg onto {size[1]}x{size[0]} canvas")
        return cv2.warpAffine(pixels, matrix, size)

    @staticmethod
    def keystone_quad(rows: int, cols: int, inset: float) -> np.ndarray:
        """
        Corners (TL, TR, BR, BL) of a trapezoid whose top edge is pulled in
        by *inset* of the width on each side.
        """
        if not 0 <= inset < 0.5:
            raise ValueError(f"Inset must be in [0, 0.5), got {inset}")
        dx = cols * inset
        return np.float32([[dx, 0], [cols - dx, 0], [cols, rows], [0, rows]])

    @staticmethod
    def corners(rows: int, cols: int) -> np.ndarray:
        return np.float32([[0, 0], [cols, 0], [cols, rows], [0, rows]])

    @staticmethod
    def warp_perspective(
        pixels: np.ndarray, src_quad: np.ndarray, dst_quad: np.ndarray, size: Tuple[int, int] = None
    ) -> np.ndarray:
        """
        Map *src_quad* onto *dst_quad*. *size* is (width, height) and defaults
        to the input size.
        """
        src_quad = np.asarray(src_quad, dtype=np.float32)
        dst_quad = np.asarray(dst_quad, dtype=np.float32)
        if src_quad.shape != (4, 2) or dst_quad.shape != (4, 2):
            raise ValueError("Perspective quads must be 4x2 arrays of points")

        if size is None:
            size = (pixels.shape[1], pixels.shape[0])
        matrix = cv2.getPerspectiveTransform(src_quad, dst_quad)
        return cv2.warpPerspective(pixels, matrix, size)
