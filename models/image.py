from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: decoded pixels (+ optional path for bookkeeping).
    Pixels stay in the order OpenCV decodes them (BGR for colour images).
    """
    pixels: np.ndarray # Shape (H, W, C) or (H, W), dtype uint8.
    path: Path | None = None # Source or destination of the image.

    @property
    def rows(self) -> int:
        return self.pixels.shape[0]

    @property
    def cols(self) -> int:
        return self.pixels.shape[1]

    @property
    def channels(self) -> int:
        return 1 if self.pixels.ndim == 2 else self.pixels.shape[2]
