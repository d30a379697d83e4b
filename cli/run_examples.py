import os
import sys
import logging
import argparse
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from pipeline.arithmetics import BLEND_OUTPUTS, run_arithmetics
from pipeline.basics import run_basics
from pipeline.colors_thresholding import run_colors_thresholding
from pipeline.geometric_transformations import run_geometric_transformations

logger = logging.getLogger(__name__)

OUTPUT_DIR = os.getenv("OUTPUT_DIR_PATH", ".")
EXAMPLES = ("basics", "arithmetics", "colors", "geometry")


def _configure_logging() -> None:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="cv-examples",
        description="Run the OpenCV tutorial examples against the sample images.",
    )
    ap.add_argument("example", choices=EXAMPLES + ("all",),
                    help="example to run")
    ap.add_argument("--output-dir", default=OUTPUT_DIR,
                    help="directory the output images are written to")
    ap.add_argument("--mode", choices=sorted(BLEND_OUTPUTS), default="overlay",
                    help="arithmetics: how the logo is combined with the photo")
    ap.add_argument("--grayscale", action="store_true",
                    help="basics: read the photo as a single-channel image")
    ap.add_argument("--rgb", action="store_true",
                    help="colors: also write the RGB-ordered copy of the photo")
    return ap


def run(example: str, args: argparse.Namespace):
    if example == "basics":
        return run_basics(output_dir=args.output_dir, grayscale=args.grayscale)
    if example == "arithmetics":
        return run_arithmetics(output_dir=args.output_dir, mode=args.mode)
    if example == "colors":
        return run_colors_thresholding(output_dir=args.output_dir, write_rgb=args.rgb)
    return run_geometric_transformations(output_dir=args.output_dir)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging()

    examples = EXAMPLES if args.example == "all" else (args.example,)
    for example in examples:
        try:
            result = run(example, args)
        except (OSError, ValueError) as err:
            # Read/write failures and bad geometry end the run
            print(err)
            return 1
        logger.info(f"{result.name}: wrote {len(result.outputs)} image(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
