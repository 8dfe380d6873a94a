import os
import logging

import cv2
import numpy as np

from src.core.exceptions import ImageLoadError

logger = logging.getLogger(__name__)


def load_image(path: str) -> np.ndarray:
    """
    Lee una imagen BGR del disco. Lanza ImageLoadError si no existe o no se puede decodificar.
    """
    if not path:
        raise ImageLoadError("No se indicó la ruta de la imagen")
    if not os.path.isfile(path):
        raise ImageLoadError(f"Imagen no encontrada: {path}")

    image = cv2.imread(path)
    if image is None or image.size == 0:
        raise ImageLoadError(f"Imagen ilegible: {path}")

    logger.debug("Imagen %s cargada (%dx%d)", path, image.shape[1], image.shape[0])
    return image


def decode_image(data: bytes) -> np.ndarray:
    """
    Decodifica bytes (PNG/JPEG/...) a imagen BGR.
    """
    if not data:
        raise ImageLoadError("Cuerpo de imagen vacío")

    buffer = np.frombuffer(data, dtype=np.uint8)
    image = cv2.imdecode(buffer, cv2.IMREAD_COLOR)
    if image is None:
        raise ImageLoadError("No se pudo decodificar la imagen")
    return image
