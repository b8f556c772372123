import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from meat_quality.api.routes import router
from meat_quality.core.config import settings
from meat_quality.core.logging_config import configure_logging
from meat_quality.services.classifier import MODEL_LOAD_ERROR, MeatQualityClassifier
from meat_quality.services.display import Display
from meat_quality.services.model_loader import ModelLoadError, load_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)

    display = Display()
    engine = None
    try:
        engine = load_engine(settings.MODEL_PATH)
    except ModelLoadError:
        logger.exception("Error loading model")
        display.show_text(MODEL_LOAD_ERROR)

    app.state.display = display
    app.state.classifier = MeatQualityClassifier(engine, settings.IMAGE_SIZE)

    yield

    app.state.classifier.close()

app = FastAPI(
    title="Meat Quality Classifier",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(router)
