from pathlib import Path
from typing import List, Tuple, Union
import logging
import cv2
import os
import numpy as np
from models.image import Image
from models.region import Region
from repositories.image_repository import ImageRepository
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

BLUE_BGR = (255, 0, 0)


class ImageService:
    """Basic raster helpers: I/O, inspection, regions, blur and borders."""
    def __init__(self):
        self.BLUR_KERNEL_SIZE = int(os.getenv("BLUR_KERNEL_SIZE", "35"))
        self.BORDER_SIZE = int(os.getenv("BORDER_SIZE", "10"))
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: str | Path, mode: str = "color") -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(path, mode=mode)

    def save(self, image: Image) -> None:
        """
        Business-level method to save the image to its path.
        """
        self.image_repository.save(image)
        logger.info(f"Wrote {image.path} ({image.rows}x{image.cols}, {image.channels} ch)")

    def save_as(self, pixels: np.ndarray, path: Union[str, Path]) -> Path:
        """Wrap *pixels* in an Image bound to *path* and save it."""
        image = self.create_image(pixels, path)
        self.save(image)
        return image.path

    def update_pixels(self, image: Image, new_pixels: np.ndarray) -> None:
        """
        Business-level method to replace the current image pixels.
        """
        self.image_repository.set_pixels(image, new_pixels)

    def get_image_dimensions(self, img: Image):
        return self.image_repository.retrieve_image_dimensions(img)

    @staticmethod
    def describe(img: Image) -> dict:
        """Rows, columns, channel count and sample type of an image."""
        return {
            "rows": img.rows,
            "cols": img.cols,
            "channels": img.channels,
            "dtype": str(img.pixels.dtype),
        }

    @staticmethod
    def split_channels(img: Image) -> Tuple[np.ndarray, ...]:
        return tuple(cv2.split(img.pixels))

    @staticmethod
    def merge_channels(channels: List[np.ndarray]) -> np.ndarray:
        return cv2.merge(list(channels))

    def pixel_at(self, img: Image, row: int, col: int) -> Tuple[int, ...]:
        """
        Sample value(s) at (row, col), one entry per channel.
        """
        height, width = self.get_image_dimensions(img)
        if not (0 <= row < height and 0 <= col < width):
            raise ValueError(f"Pixel ({row}, {col}) outside {height}x{width} image")
        value = img.pixels[row, col]
        return tuple(int(v) for v in np.atleast_1d(value))

    def region(self, img: Image, rect: Region) -> np.ndarray:
        """
        Return a view into img.pixels. Writes to the view change the image.
        """
        height, width = self.get_image_dimensions(img)
        if not rect.fits(height, width):
            raise ValueError(f"Region {rect} outside {height}x{width} image")
        return img.pixels[rect.min_y:rect.max_y, rect.min_x:rect.max_x]

    def blur_region(self, img: Image, rect: Region, ksize: int = None) -> np.ndarray:
        """Gaussian-blur a region of the image in place."""
        ksize = self.BLUR_KERNEL_SIZE if ksize is None else ksize
        if ksize <= 0 or ksize % 2 == 0:
            raise ValueError(f"Gaussian kernel size must be odd and positive, got {ksize}")

        roi = self.region(img, rect)
        roi[:] = cv2.GaussianBlur(roi, (ksize, ksize), 0)
        logger.debug(f"Blurred {rect} with {ksize}x{ksize} kernel")
        return roi

    def add_border(self, img: Image, size: int = None, color: Tuple[int, int, int] = BLUE_BGR) -> None:
        """Surround the image with a constant-colour border of *size* pixels."""
        size = self.BORDER_SIZE if size is None else size
        if size < 0:
            raise ValueError(f"Border size must be >= 0, got {size}")

        bordered = cv2.copyMakeBorder(
            img.pixels, size, size, size, size, cv2.BORDER_CONSTANT, value=color
        )
        self.update_pixels(img, bordered)

