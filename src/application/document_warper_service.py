# src/application/document_warper_service.py
import logging
from typing import Callable, Optional, Tuple

import cv2
import numpy as np

from src.monitoring.metrics import documents_warped_total, document_warp_failures_total

from src.core.config import settings
from src.core.exceptions import CropWriteError, DocumentNotFoundError, ImageLoadError
from src.domain.Models.document_scan import DocumentScan
from src.domain.Interfaces.frame_display import IFrameDisplay
from src.domain.Services.document_preprocessor import preprocess
from src.domain.Services.contour_selector import find_largest_quadrilateral
from src.domain.Services.point_reorderer import reorder_points
from src.domain.Services.perspective_warper import get_warp, crop_border
from src.infrastructure.Image.image_loader import load_image

logger = logging.getLogger(__name__)

POINT_COLOR = (0, 255, 0)


def draw_points(image: np.ndarray, points: np.ndarray, color: Tuple[int, int, int] = POINT_COLOR) -> np.ndarray:
    """Marca cada punto con un círculo relleno y su índice. Dibuja in-place."""
    for i, (x, y) in enumerate(np.asarray(points).reshape(-1, 2)):
        center = (int(x), int(y))
        cv2.circle(image, center, 10, color, cv2.FILLED)
        cv2.putText(image, str(i), center, cv2.FONT_HERSHEY_PLAIN, 4, color, 4)
    return image


class DocumentWarperService:
    """
    Escáner de documentos de una sola pasada:
    cargar -> redimensionar -> bordes -> quad más grande -> ordenar esquinas ->
    perspectiva a tamaño fijo -> recortar margen -> mostrar (y opcionalmente guardar).
    """

    def __init__(
        self,
        display: IFrameDisplay,
        loader: Callable[[str], np.ndarray] = load_image,
        resize_factor: Optional[float] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        crop_margin: Optional[int] = None,
        output_path: Optional[str] = None,
    ):
        self.display = display
        self.loader = loader
        self.resize_factor = resize_factor if resize_factor is not None else settings.document_resize_factor
        self.width = width if width is not None else settings.warp_width
        self.height = height if height is not None else settings.warp_height
        self.crop_margin = crop_margin if crop_margin is not None else settings.warp_crop_margin
        self.output_path = output_path if output_path is not None else settings.document_output_path

    # ---------------------------------------------------------
    # PIPELINE
    # ---------------------------------------------------------
    def scan(self, image: np.ndarray) -> DocumentScan:
        """
        Procesa una imagen ya cargada. Lanza DocumentNotFoundError si no hay quad.
        """
        if image is None or image.size == 0:
            raise ImageLoadError("Imagen vacía")

        if self.resize_factor != 1.0:
            image = cv2.resize(image, None, fx=self.resize_factor, fy=self.resize_factor)

        edges = preprocess(image)

        initial_points = find_largest_quadrilateral(edges)
        if len(initial_points) != 4:
            document_warp_failures_total.labels(reason="no_quadrilateral").inc()
            raise DocumentNotFoundError("No quadrilateral document found in image")

        logger.info("Esquinas detectadas: %s", initial_points.tolist())
        corners = reorder_points(initial_points)

        annotated = draw_points(image.copy(), corners)

        warped = get_warp(image, corners, self.width, self.height)
        crop = crop_border(warped, self.crop_margin)

        documents_warped_total.inc()
        return DocumentScan(
            annotated=annotated,
            edges=edges,
            corners=corners,
            warped=warped,
            crop=crop,
        )

    def run(self, path: str) -> DocumentScan:
        try:
            image = self.loader(path)
        except ImageLoadError:
            document_warp_failures_total.labels(reason="image_load").inc()
            raise

        result = self.scan(image)

        if self.output_path:
            self._save_crop(result)

        self.display.show(settings.document_window, result.annotated)
        self.display.show(settings.document_crop_window, result.crop)
        self.display.wait_key(0)
        self.display.close()

        return result

    def _save_crop(self, result: DocumentScan):
        # imwrite devuelve False (directorio inexistente) o lanza (extensión desconocida)
        try:
            ok = cv2.imwrite(self.output_path, result.crop)
        except cv2.error as e:
            document_warp_failures_total.labels(reason="crop_write").inc()
            raise CropWriteError(f"No se pudo guardar el recorte en {self.output_path}: {e}") from e

        if not ok:
            document_warp_failures_total.labels(reason="crop_write").inc()
            raise CropWriteError(f"cv2.imwrite no pudo escribir {self.output_path}")

        result.output_path = self.output_path
        logger.info("Recorte guardado en %s", self.output_path)
