from typing import Tuple
import logging
import cv2
import numpy as np

from models.blend_weights import BlendWeights
from models.image import Image
from models.region import Region
from services.image_service import ImageService
from services.threshold_service import ThresholdService

logger = logging.getLogger(__name__)


class ArithmeticService:
    """
    Pixel arithmetic between a base image and a smaller overlay (logo).
    All methods taking an *roi* write their result back into it, so the
    image the ROI was taken from changes too.
    """

    def __init__(self):
        self.image_service = ImageService()
        self.threshold_service = ThresholdService()

    def bottom_left_region(self, base: Image, overlay: Image) -> Region:
        """Region of *base* with the overlay's size, anchored bottom-left."""
        base_rows, base_cols = self.image_service.get_image_dimensions(base)
        overlay_rows, overlay_cols = self.image_service.get_image_dimensions(overlay)
        if overlay_rows > base_rows or overlay_cols > base_cols:
            raise ValueError(
                f"Overlay {overlay_rows}x{overlay_cols} does not fit into {base_rows}x{base_cols} image"
            )
        return Region(0, base_rows - overlay_rows, overlay_cols, base_rows)

    @staticmethod
    def add(roi: np.ndarray, overlay: np.ndarray) -> np.ndarray:
        """Saturating addition; sums above 255 clip to 255."""
        roi[:] = cv2.add(roi, overlay)
        return roi

    @staticmethod
    def add_weighted(roi: np.ndarray, overlay: np.ndarray, weights: BlendWeights = None) -> np.ndarray:
        weights = weights or BlendWeights()
        roi[:] = cv2.addWeighted(roi, weights.alpha, overlay, weights.beta, weights.gamma)
        return roi

    def logo_masks(self, logo: np.ndarray, threshold: float = None) -> Tuple[np.ndarray, np.ndarray]:
        """
        Single-channel mask of the logo's foreground and its inverse.
        """
        gray = self.threshold_service.to_grayscale(logo)
        mask = self.threshold_service.binary(gray, threshold)
        mask_inv = cv2.bitwise_not(mask)
        return mask, mask_inv

    @staticmethod
    def _expand(mask: np.ndarray, like: np.ndarray) -> np.ndarray:
        # Replicate a single-channel mask to match the channel count of *like*
        if like.ndim == 2:
            return mask
        return cv2.merge([mask] * like.shape[2])

    def black_out(self, roi: np.ndarray, mask_inv: np.ndarray) -> np.ndarray:
        """Zero the ROI wherever the inverse mask is 0."""
        roi[:] = cv2.bitwise_and(roi, self._expand(mask_inv, roi))
        return roi

    def overlay(self, roi: np.ndarray, logo: np.ndarray, threshold: float = None) -> np.ndarray:
        """
        Paste the logo's foreground onto the ROI, keeping the ROI where the
        logo is background.
        """
        mask, mask_inv = self.logo_masks(logo, threshold)
        self.black_out(roi, mask_inv)
        foreground = cv2.bitwise_and(logo, self._expand(mask, logo))
        roi[:] = cv2.add(roi, foreground)
        return roi
