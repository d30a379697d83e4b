import os
import logging
import cv2
import numpy as np
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

ADAPTIVE_METHODS = {
    "mean": cv2.ADAPTIVE_THRESH_MEAN_C,
    "gaussian": cv2.ADAPTIVE_THRESH_GAUSSIAN_C,
}


class ThresholdService:
    """
    Colour-space conversion and thresholding.
    Every operation returns a new raster and leaves its input untouched.
    """

    def __init__(self):
        self.threshold = float(os.getenv("LOGO_THRESHOLD", "10"))
        self.max_value = 255.0
        self.block_size = int(os.getenv("ADAPTIVE_BLOCK_SIZE", "5"))
        self.c = float(os.getenv("ADAPTIVE_C", "4.0"))

    @staticmethod
    def to_grayscale(pixels: np.ndarray) -> np.ndarray:
        return cv2.cvtColor(pixels, cv2.COLOR_BGR2GRAY)

    @staticmethod
    def to_rgb(pixels: np.ndarray) -> np.ndarray:
        return cv2.cvtColor(pixels, cv2.COLOR_BGR2RGB)

    def binary(self, gray: np.ndarray, threshold: float = None, inverse: bool = False) -> np.ndarray:
        """
        Pixels above *threshold* become max_value (0 when *inverse*), the rest 0.
        """
        threshold = self.threshold if threshold is None else threshold
        kind = cv2.THRESH_BINARY_INV if inverse else cv2.THRESH_BINARY
        _, mask = cv2.threshold(gray, threshold, self.max_value, kind)
        return mask

    def adaptive(
        self,
        gray: np.ndarray,
        method: str = "mean",
        block_size: int = None,
        c: float = None,
    ) -> np.ndarray:
        """
        Binary threshold against the mean (or Gaussian-weighted sum) of each
        pixel's block_size x block_size neighbourhood minus *c*.
        """
        block_size = self.block_size if block_size is None else block_size
        c = self.c if c is None else c
        if method not in ADAPTIVE_METHODS:
            raise ValueError(f"Unknown adaptive method {method!r}, expected one of {sorted(ADAPTIVE_METHODS)}")
        if block_size <= 1 or block_size % 2 == 0:
            raise ValueError(f"Block size must be odd and > 1, got {block_size}")

        logger.debug(f"Adaptive threshold: method={method}, block_size={block_size}, c={c}")
        return cv2.adaptiveThreshold(
            gray, self.max_value, ADAPTIVE_METHODS[method], cv2.THRESH_BINARY, block_size, c
        )
