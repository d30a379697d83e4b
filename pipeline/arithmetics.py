"""
Arithmetics: blend a logo into the bottom-left corner of a photo.
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

from models.blend_weights import BlendWeights
from models.example_result import ExampleResult
from services.arithmetic_service import ArithmeticService
from services.image_service import ImageService

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

MESSI_IMG_PATH = os.getenv("MESSI_IMG_PATH", "messi.jpg")
LOGO_IMG_PATH  = os.getenv("LOGO_IMG_PATH", "commons.png")
OUTPUT_DIR     = os.getenv("OUTPUT_DIR_PATH", ".")

# blend mode -> output file name
BLEND_OUTPUTS = {
    "add":      "add_logo_messi.jpeg",
    "weighted": "add_weighted_logo_messi.jpeg",
    "blackout": "wiki_commons_blackout_messi.jpeg",
    "overlay":  "wiki_commons_messi.jpeg",
}


def run_arithmetics(
    image_path: str | Path = MESSI_IMG_PATH,
    logo_path: str | Path = LOGO_IMG_PATH,
    output_dir: str | Path = OUTPUT_DIR,
    *,
    mode: str = "overlay",
    weights: BlendWeights = None,
    image_service: ImageService = ImageService(),
    arithmetic_service: ArithmeticService = ArithmeticService(),
) -> ExampleResult:
    """
    Combine the logo with the bottom-left region of the photo.

    Modes:
        add      - saturating addition
        weighted - alpha/beta weighted addition
        blackout - zero the logo's footprint in the photo
        overlay  - paste the logo's foreground over the photo
    """
    if mode not in BLEND_OUTPUTS:
        raise ValueError(f"Unknown blend mode {mode!r}, expected one of {sorted(BLEND_OUTPUTS)}")

    messi = image_service.load(image_path)
    logo = image_service.load(logo_path)

    print(f"{image_path} channels: {messi.channels}, size: {messi.rows}x{messi.cols}")
    print(f"{logo_path} channels: {logo.channels}, size: {logo.rows}x{logo.cols}")

    rect = arithmetic_service.bottom_left_region(messi, logo)
    roi = image_service.region(messi, rect)
    logger.debug(f"Blending {mode} into {rect}")

    if mode == "add":
        arithmetic_service.add(roi, logo.pixels)
    elif mode == "weighted":
        arithmetic_service.add_weighted(roi, logo.pixels, weights)
    elif mode == "blackout":
        _, mask_inv = arithmetic_service.logo_masks(logo.pixels)
        arithmetic_service.black_out(roi, mask_inv)
    else:
        arithmetic_service.overlay(roi, logo.pixels)

    out_path = Path(output_dir) / BLEND_OUTPUTS[mode]
    image_service.save_as(messi.pixels, out_path)
    return ExampleResult(name="arithmetics", outputs=[out_path])
