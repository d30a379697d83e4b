"""
Colours & thresholding: grayscale conversion, global and adaptive thresholds.
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

from models.example_result import ExampleResult
from services.image_service import ImageService
from services.threshold_service import ThresholdService

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

MESSI_IMG_PATH  = os.getenv("MESSI_IMG_PATH", "messi.jpg")
LOGO_IMG_PATH   = os.getenv("LOGO_IMG_PATH", "commons.png")
SUDOKU_IMG_PATH = os.getenv("SUDOKU_IMG_PATH", "sudoku.jpg")
OUTPUT_DIR      = os.getenv("OUTPUT_DIR_PATH", ".")


def run_colors_thresholding(
    image_path: str | Path = MESSI_IMG_PATH,
    logo_path: str | Path = LOGO_IMG_PATH,
    sudoku_path: str | Path = SUDOKU_IMG_PATH,
    output_dir: str | Path = OUTPUT_DIR,
    *,
    write_rgb: bool = False,
    image_service: ImageService = ImageService(),
    threshold_service: ThresholdService = ThresholdService(),
) -> ExampleResult:
    output_dir = Path(output_dir)
    result = ExampleResult(name="colors")

    # photo -> grayscale (and optionally RGB)
    messi = image_service.load(image_path)
    gray_messi = threshold_service.to_grayscale(messi.pixels)
    result.outputs.append(image_service.save_as(gray_messi, output_dir / "gray_messi.jpeg"))
    if write_rgb:
        rgb_messi = threshold_service.to_rgb(messi.pixels)
        result.outputs.append(image_service.save_as(rgb_messi, output_dir / "rgb_messi.jpeg"))

    # logo -> binary and inverse binary masks
    logo = image_service.load(logo_path)
    gray_logo = threshold_service.to_grayscale(logo.pixels)
    bin_logo = threshold_service.binary(gray_logo)
    inv_bin_logo = threshold_service.binary(gray_logo, inverse=True)
    result.outputs.append(image_service.save_as(bin_logo, output_dir / "bin_logo.jpeg"))
    result.outputs.append(image_service.save_as(inv_bin_logo, output_dir / "inv_bin_logo.jpeg"))

    # sudoku -> adaptive thresholds
    sudoku = image_service.load(sudoku_path, mode="gray")
    adpt_mean = threshold_service.adaptive(sudoku.pixels, method="mean")
    adpt_gauss = threshold_service.adaptive(sudoku.pixels, method="gaussian")
    result.outputs.append(image_service.save_as(adpt_mean, output_dir / "sudoku_adaptive_mean.jpeg"))
    result.outputs.append(image_service.save_as(adpt_gauss, output_dir / "sudoku_adaptive_gauss.jpeg"))

    return result
