import logging
from pathlib import Path

import tensorflow as tf

from .engine import TFLiteEngine

logger = logging.getLogger(__name__)

class ModelLoadError(RuntimeError):
    pass

def load_tflite_interpreter(path: str):
    model_path = Path(path)
    if not model_path.is_file():
        raise ModelLoadError(f"Model file not found: {model_path}")

    # the runtime maps the flatbuffer read-only from disk
    try:
        interpreter = tf.lite.Interpreter(model_path=str(model_path))
        interpreter.allocate_tensors()
    except (ValueError, RuntimeError) as e:
        raise ModelLoadError(f"Invalid model file {model_path}: {e}") from e
    return interpreter

def load_engine(path: str) -> TFLiteEngine:
    engine = TFLiteEngine(load_tflite_interpreter(path))
    logger.info("Model loaded: %s (input %s)", path, engine.input_shape)
    return engine
