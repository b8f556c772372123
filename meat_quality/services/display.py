from __future__ import annotations
import io
from typing import Optional

from PIL import Image

from .interpret import ClassificationResult

def pil_to_png_bytes(pil_img: Image.Image) -> bytes:
    buf = io.BytesIO()
    pil_img.save(buf, format="PNG")
    return buf.getvalue()

class Display:
    """Image preview and result text, written by the classification flow."""

    def __init__(self):
        self.preview: Optional[bytes] = None
        self.result_text: str = ""
        self.prediction: Optional[ClassificationResult] = None

    def show_image(self, img: Image.Image) -> None:
        self.preview = pil_to_png_bytes(img.convert("RGB"))

    def show_text(self, text: str, prediction: Optional[ClassificationResult] = None) -> None:
        self.result_text = text
        self.prediction = prediction
