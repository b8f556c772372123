from pydantic import BaseModel, Field
from typing import List, Optional

class Prediction(BaseModel):
    index: int = Field(ge=0, le=2)
    label: str
    headline: str
    advisory: str
    confidences: List[float]

class ScreenResponse(BaseModel):
    result_text: str
    has_preview: bool
    prediction: Optional[Prediction] = None

class GalleryPickRequest(BaseModel):
    uri: str
