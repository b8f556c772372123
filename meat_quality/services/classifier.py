from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from PIL import Image

from .engine import InferenceEngine
from .interpret import ClassificationResult, interpret
from .preprocess import IMAGE_SIZE, image_to_tensor

MODEL_NOT_INITIALIZED = "Model not initialized"
MODEL_LOAD_ERROR = "Error loading model"


@dataclass
class ClassificationOutcome:
    text: str
    result: Optional[ClassificationResult] = None


class MeatQualityClassifier:
    def __init__(self, engine: Optional[InferenceEngine], image_size: int = IMAGE_SIZE):
        self.engine = engine
        self.image_size = image_size

    @property
    def ready(self) -> bool:
        return self.engine is not None

    def classify(self, img: Image.Image) -> ClassificationOutcome:
        if self.engine is None:
            return ClassificationOutcome(text=MODEL_NOT_INITIALIZED)

        x = image_to_tensor(img, self.image_size)
        y = self.engine.infer(x)
        result = interpret(y)
        return ClassificationOutcome(text=result.text, result=result)

    def close(self) -> None:
        if self.engine is not None:
            self.engine.close()
            self.engine = None
