"""
Geometric transformations: scaling, rotation and perspective warping.
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

from models.example_result import ExampleResult
from services.image_service import ImageService
from services.transform_service import TransformService

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

MESSI_IMG_PATH    = os.getenv("MESSI_IMG_PATH", "messi.jpg")
OUTPUT_DIR        = os.getenv("OUTPUT_DIR_PATH", ".")
ROTATION_ANGLE    = float(os.getenv("ROTATION_ANGLE", "45"))
PERSPECTIVE_INSET = float(os.getenv("PERSPECTIVE_INSET", "0.15"))


def run_geometric_transformations(
    image_path: str | Path = MESSI_IMG_PATH,
    output_dir: str | Path = OUTPUT_DIR,
    *,
    angle: float = ROTATION_ANGLE,
    scale: float = 1.0,
    inset: float = PERSPECTIVE_INSET,
    image_service: ImageService = ImageService(),
    transform_service: TransformService = TransformService(),
) -> ExampleResult:
    output_dir = Path(output_dir)
    result = ExampleResult(name="geometry")

    messi = image_service.load(image_path)
    rows, cols = image_service.get_image_dimensions(messi)
    print(f"Rows: {rows}, Cols: {cols}")

    bigger = transform_service.resize(messi.pixels, 2, interpolation="cubic")
    print(f"Rows: {bigger.shape[0]}, Cols: {bigger.shape[1]}")
    result.outputs.append(image_service.save_as(bigger, output_dir / "bigger_messi.jpeg"))

    smaller = transform_service.resize(messi.pixels, 0.5, interpolation="area")
    print(f"Rows: {smaller.shape[0]}, Cols: {smaller.shape[1]}")
    result.outputs.append(image_service.save_as(smaller, output_dir / "smaller_messi.jpeg"))

    rotated = transform_service.rotate_90_clockwise(messi.pixels)
    result.outputs.append(image_service.save_as(rotated, output_dir / "rotated_messi.jpeg"))

    # arbitrary rotation without cropping the corners
    rotated_bound = transform_service.rotate_bound(messi.pixels, angle, scale)
    result.outputs.append(image_service.save_as(rotated_bound, output_dir / "rotated_properly_messi.jpeg"))

    src = transform_service.corners(rows, cols)
    dst = transform_service.keystone_quad(rows, cols, inset)
    perspective = transform_service.warp_perspective(messi.pixels, src, dst)
    result.outputs.append(image_service.save_as(perspective, output_dir / "perspective_messi.jpeg"))

    return result
