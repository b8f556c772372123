from fastapi import APIRouter, UploadFile, File, Depends, HTTPException, Request
from fastapi.responses import Response
from PIL import Image

from meat_quality.core.config import settings
from meat_quality.core.security import require_camera_permission
from meat_quality.schemas import GalleryPickRequest, Prediction, ScreenResponse
from meat_quality.services.acquisition import IMAGE_READ_ERRORS, decode_capture, read_gallery_image
from meat_quality.services.classifier import MeatQualityClassifier
from meat_quality.services.display import Display


router = APIRouter()

def get_classifier(request: Request) -> MeatQualityClassifier:
    return request.app.state.classifier

def get_display(request: Request) -> Display:
    return request.app.state.display

def _screen(display: Display) -> ScreenResponse:
    p = display.prediction
    return ScreenResponse(
        result_text=display.result_text,
        has_preview=display.preview is not None,
        prediction=Prediction(
            index=p.index,
            label=p.label,
            headline=p.headline,
            advisory=p.advisory,
            confidences=p.confidences,
        ) if p is not None else None,
    )

def _show_and_classify(img: Image.Image, clf: MeatQualityClassifier, display: Display) -> None:
    display.show_image(img)
    outcome = clf.classify(img)
    display.show_text(outcome.text, outcome.result)

@router.get("/health")
async def health(clf: MeatQualityClassifier = Depends(get_classifier)):
    return {"status": "ok", "model_loaded": clf.ready}

@router.post("/camera/capture", response_model=ScreenResponse)
async def camera_capture(
    _perm=Depends(require_camera_permission),
    image: UploadFile = File(...),
    clf: MeatQualityClassifier = Depends(get_classifier),
    display: Display = Depends(get_display),
):
    img_bytes = await image.read()
    if not img_bytes:
        raise HTTPException(400, "Empty image")

    try:
        img = decode_capture(img_bytes)
    except IMAGE_READ_ERRORS:
        raise HTTPException(400, "Invalid image")

    _show_and_classify(img, clf, display)
    return _screen(display)

@router.post("/gallery/pick", response_model=ScreenResponse)
async def gallery_pick(
    payload: GalleryPickRequest,
    clf: MeatQualityClassifier = Depends(get_classifier),
    display: Display = Depends(get_display),
):
    img = read_gallery_image(payload.uri, settings.MEDIA_DIR)
    if img is not None:
        _show_and_classify(img, clf, display)
    return _screen(display)

@router.get("/screen", response_model=ScreenResponse)
async def screen(display: Display = Depends(get_display)):
    return _screen(display)

@router.get("/screen/preview")
async def screen_preview(display: Display = Depends(get_display)):
    if display.preview is None:
        raise HTTPException(404, "No image")
    return Response(content=display.preview, media_type="image/png")
