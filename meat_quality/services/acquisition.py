from __future__ import annotations
import logging
from io import BytesIO
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from PIL import Image

logger = logging.getLogger(__name__)

# NUL bytes in a path raise ValueError; oversized images raise DecompressionBombError
IMAGE_READ_ERRORS = (OSError, ValueError, Image.DecompressionBombError)

def decode_capture(image_bytes: bytes) -> Image.Image:
    img = Image.open(BytesIO(image_bytes))
    img.load()
    return img

def resolve_gallery_uri(uri: str, media_dir: str) -> Path:
    """Map a gallery URI onto a file inside ``media_dir``.

    Accepted forms are ``file://`` URIs, ``content://media/<path>`` URIs and
    bare relative paths. Anything resolving outside ``media_dir`` is refused.
    """
    root = Path(media_dir).resolve()
    parsed = urlparse(uri)

    if parsed.scheme == "file":
        path = Path(unquote(parsed.path))
    elif parsed.scheme == "content" and parsed.netloc == "media":
        path = root / unquote(parsed.path).lstrip("/")
    elif parsed.scheme == "":
        path = root / unquote(uri)
    else:
        raise OSError(f"Unsupported gallery uri: {uri}")

    path = path.resolve()
    if root != path and root not in path.parents:
        raise OSError(f"Gallery uri outside media dir: {uri}")
    return path

def read_gallery_image(uri: str, media_dir: str) -> Optional[Image.Image]:
    try:
        path = resolve_gallery_uri(uri, media_dir)
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except IMAGE_READ_ERRORS:
        logger.exception("Error loading image from gallery")
        return None
