"""Command line entry point: classify a single image or run the HTTP service."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from PIL import Image

from meat_quality.core.config import settings
from meat_quality.core.logging_config import configure_logging
from meat_quality.services.acquisition import IMAGE_READ_ERRORS

logger = logging.getLogger(__name__)


def parse_args(argv: List[str]) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="meat-quality",
        description="Classify meat freshness from a photo.",
    )
    parser.add_argument(
        "--log-level", default=settings.LOG_LEVEL,
        help="Logging level (DEBUG shows raw model output)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    classify = sub.add_parser("classify", help="Classify one image file")
    classify.add_argument("image", help="Path to the image")
    classify.add_argument(
        "--model", default=settings.MODEL_PATH,
        help="Path to the .tflite model",
    )

    serve = sub.add_parser("serve", help="Run the HTTP service")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser.parse_args(argv)


def run_classify(image_path: Path, model_path: str) -> int:
    # deferred so tensorflow is imported only once a command needs it
    from meat_quality.services.classifier import MODEL_LOAD_ERROR, MeatQualityClassifier
    from meat_quality.services.model_loader import ModelLoadError, load_engine

    engine = None
    try:
        engine = load_engine(model_path)
    except ModelLoadError:
        logger.exception("Error loading model")
        print(MODEL_LOAD_ERROR)

    clf = MeatQualityClassifier(engine, settings.IMAGE_SIZE)
    try:
        try:
            with Image.open(image_path) as img:
                img.load()
                image = img.copy()
        except IMAGE_READ_ERRORS as e:
            print(f"Cannot read image {image_path}: {e}", file=sys.stderr)
            return 1

        print(clf.classify(image).text)
    finally:
        clf.close()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(args.log_level)

    if args.command == "classify":
        return run_classify(Path(args.image), args.model)

    import uvicorn

    uvicorn.run("meat_quality.main:app", host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
