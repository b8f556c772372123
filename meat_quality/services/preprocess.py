from __future__ import annotations
import numpy as np
from PIL import Image

IMAGE_SIZE = 224

def scale_image(img: Image.Image, size: int = IMAGE_SIZE) -> Image.Image:
    # plain stretch, no aspect ratio, no filtering
    return img.convert("RGB").resize((size, size), resample=Image.Resampling.NEAREST)

def image_to_tensor(img: Image.Image, size: int = IMAGE_SIZE) -> np.ndarray:
    """Flatten an image to the model's input layout.

    The image is scaled to ``size`` x ``size`` and every pixel, in row-major
    order, contributes its red, green and blue samples divided by 255. The
    result is a 1-D float32 array of ``3 * size * size`` values.
    """
    x = np.asarray(scale_image(img, size), dtype=np.float32)  # (H,W,3)
    return (x / 255.0).astype(np.float32).reshape(-1)
