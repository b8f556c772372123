from __future__ import annotations
import logging
from typing import Protocol

import numpy as np

logger = logging.getLogger(__name__)

class InferenceEngine(Protocol):
    """Opaque pre-trained model: one flat input tensor in, one confidence vector out."""

    def infer(self, tensor: np.ndarray) -> np.ndarray: ...

    def close(self) -> None: ...


class TFLiteEngine:
    def __init__(self, interpreter):
        self.interpreter = interpreter
        self.input_details = interpreter.get_input_details()
        self.output_details = interpreter.get_output_details()
        self.input_shape = tuple(int(d) for d in self.input_details[0]["shape"])  # (1,H,W,3)

    def infer(self, tensor: np.ndarray) -> np.ndarray:
        if self.interpreter is None:
            raise RuntimeError("Inference engine is closed")

        x = np.asarray(tensor, dtype=np.float32).reshape(self.input_shape)
        self.interpreter.set_tensor(self.input_details[0]["index"], x)
        self.interpreter.invoke()

        y = self.interpreter.get_tensor(self.output_details[0]["index"])
        out = np.array(y, dtype=np.float32).flatten()
        logger.debug("Raw model output: %s", ", ".join(str(float(v)) for v in out))
        return out

    def close(self) -> None:
        # tf.lite.Interpreter has no explicit close; dropping the reference frees it
        self.interpreter = None
