import threading
import time

import cv2
from fastapi import Body, FastAPI, HTTPException, Response

from src.core.config import settings
from src.core.exceptions import DocumentNotFoundError, ImageLoadError
from src.domain.Models.frame import Frame
from src.application.document_warper_service import DocumentWarperService
from src.infrastructure.Detector.factory import create_plate_detector
from src.infrastructure.Display.opencv_display import HeadlessDisplay
from src.infrastructure.Image.image_loader import decode_image

app = FastAPI(title=settings.app_name)

# Los endpoints de imagen reciben el archivo crudo (Content-Type image/* u octet-stream).

_detector = None
_detector_lock = threading.Lock()


def get_detector():
    # los handlers corren en el threadpool: el cascade se crea una sola vez
    global _detector
    if _detector is None:
        with _detector_lock:
            if _detector is None:
                _detector = create_plate_detector()
    return _detector


@app.get("/health")
def health_check():
    return {"status": "ok", "env": settings.app_env}


@app.post("/documents/warp")
def warp_document(body: bytes = Body(b"", media_type="application/octet-stream")):
    """Recibe una imagen codificada en el body y devuelve el recorte rectificado en PNG."""
    try:
        image = decode_image(body)
        result = DocumentWarperService(display=HeadlessDisplay()).scan(image)
    except ImageLoadError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=422, detail=str(e))

    ok, encoded = cv2.imencode(".png", result.crop)
    if not ok:
        raise HTTPException(status_code=500, detail="No se pudo codificar el recorte")
    return Response(content=encoded.tobytes(), media_type="image/png")


@app.post("/plates/detect")
def detect_plates(body: bytes = Body(b"", media_type="application/octet-stream")):
    """Devuelve las regiones de placa encontradas en la imagen (sin escribir archivos)."""
    try:
        image = decode_image(body)
    except ImageLoadError as e:
        raise HTTPException(status_code=400, detail=str(e))

    frame = Frame(data=image, timestamp=time.time(), source="api")
    plates = get_detector().detect(frame)
    return {"plates": [p.to_dict() for p in plates]}
