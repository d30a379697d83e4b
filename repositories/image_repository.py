from pathlib import Path
from typing import Union
import logging
import numpy as np
import cv2
from dotenv import load_dotenv
import os
import signal
from models.image import Image

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

IMREAD_TIMEOUT = int(os.getenv("IMREAD_TIMEOUT", "5"))

READ_MODES = {
    "color": cv2.IMREAD_COLOR,
    "gray": cv2.IMREAD_GRAYSCALE,
    "unchanged": cv2.IMREAD_UNCHANGED,
}


class ImageRepository:
    """
    Handles file I/O and pixel updates for Image entities.
    """
    def __init__(self):
        exts = os.getenv("VALID_IMAGE_EXTENSIONS", ".jpg,.jpeg,.png,.bmp,.tif,.tiff,.webp")
        self.VALID_EXTS = {ext.strip().lower() for ext in exts.split(",") if ext.strip()}

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    def retrieve_image_dimensions(self, img: Image):
        return img.pixels.shape[:2]

    @staticmethod
    def load(path: Union[str, Path], mode: str = "color", timeout: int = IMREAD_TIMEOUT) -> Image:
        path = Path(path)
        if mode not in READ_MODES:
            raise ValueError(f"Unknown read mode {mode!r}, expected one of {sorted(READ_MODES)}")

        # ─── timeout wrapper (5 s default) ────────────────────────────────
        def _handler(signum, frame):
            raise TimeoutError(f"cv2.imread timed-out after {timeout}s: {path}")

        previous = signal.signal(signal.SIGALRM, _handler)
        signal.alarm(timeout)
        try:
            pixels = cv2.imread(str(path), READ_MODES[mode])
        finally:
            signal.alarm(0)  # always disarm
            signal.signal(signal.SIGALRM, previous)
        # ──────────────────────────────────────────────────────────────────

        if pixels is None or pixels.size == 0:
            raise FileNotFoundError(f"Failed to read image: {path}")

        logger.debug(f"Decoded {path} ({mode}): {pixels.shape}")
        return Image(pixels=pixels, path=path)

    def save(self, image: Image) -> None:
        if image.path is None:
            raise OSError("Failed to write image: no output path set")

        path = Path(image.path)
        if path.suffix.lower() not in self.VALID_EXTS:
            raise OSError(f"Failed to write image: {path} (unsupported extension)")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            ok = cv2.imwrite(str(path), image.pixels)
        except (OSError, cv2.error) as err:
            raise OSError(f"Failed to write image: {path}") from err
        if not ok:
            raise OSError(f"Failed to write image: {path}")

        logger.debug(f"Encoded {path}: {image.pixels.shape}")

    @staticmethod
    def set_pixels(image: Image, new_pixels: np.ndarray) -> None:
        image.pixels = new_pixels
