"""
Basics: read an image, inspect it, blur a region in place, add a border.
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

from models.example_result import ExampleResult
from models.region import Region
from services.image_service import ImageService

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

MESSI_IMG_PATH = os.getenv("MESSI_IMG_PATH", "messi.jpg")
OUTPUT_DIR     = os.getenv("OUTPUT_DIR_PATH", ".")
BALL_REGION    = os.getenv("BALL_REGION", "214,383,292,460")    # min_x,min_y,max_x,max_y
PROBE_PIXEL    = (100, 100)                                   # (row, col)


def run_basics(
    image_path: str | Path = MESSI_IMG_PATH,
    output_dir: str | Path = OUTPUT_DIR,
    *,
    grayscale: bool = False,
    ball_region: Region = None,
    image_service: ImageService = ImageService(),
) -> ExampleResult:
    """
    1. read the image (colour by default)
    2. print its size, channel count and sample type
    3. split it into channels and print the samples at PROBE_PIXEL
    4. blur *ball_region* in place
    5. surround the image with a blue border
    6. write border_blur_messi.jpg
    """
    ball_region = ball_region or Region.from_string(BALL_REGION)
    img = image_service.load(image_path, mode="gray" if grayscale else "color")

    info = image_service.describe(img)
    print(f"{image_path} size: {info['rows']} x {info['cols']}, channels: {info['channels']}")

    channels = image_service.split_channels(img)
    print(f"Number of channels: {len(channels)}")
    print(f"Image type: {info['dtype']}")

    row, col = PROBE_PIXEL
    pixel = image_service.pixel_at(img, row, col)
    names = ("B", "G", "R") if len(pixel) == 3 else tuple(str(i) for i in range(len(pixel)))
    for name, value in zip(names, pixel):
        print(f"Pixel {name}: {value}")
    print(f"Pixel: {pixel}")

    image_service.blur_region(img, ball_region)
    image_service.add_border(img)

    out_path = Path(output_dir) / "border_blur_messi.jpg"
    image_service.save_as(img.pixels, out_path)
    return ExampleResult(name="basics", outputs=[out_path])
