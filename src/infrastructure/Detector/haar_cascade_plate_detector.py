import os
import logging
from typing import List, Optional

import cv2

from src.domain.Models.frame import Frame
from src.domain.Models.plate import Plate
from src.domain.Interfaces.plate_detector import IPlateDetector
from src.core.config import settings

logger = logging.getLogger(__name__)


class HaarCascadePlateDetector(IPlateDetector):
    """
    Detector de placas con un Haar cascade preentrenado de OpenCV.
    - Carga el XML desde la ruta configurada; si no existe, usa la copia que trae OpenCV
      (cv2.data.haarcascades) con el mismo nombre de archivo.
    - Si el modelo no carga, loguea el error y sigue: detect() devuelve [] en vez de
      dejar que detectMultiScale lance sobre un clasificador vacío.
    """

    def __init__(
        self,
        cascade_path: Optional[str] = None,
        scale_factor: Optional[float] = None,
        min_neighbors: Optional[int] = None,
    ):
        self.cascade_path = cascade_path or settings.cascade_path
        self.scale_factor = scale_factor if scale_factor is not None else settings.cascade_scale_factor
        self.min_neighbors = min_neighbors if min_neighbors is not None else settings.cascade_min_neighbors

        self.classifier = cv2.CascadeClassifier()
        self.loaded_from = self._load()

    @property
    def empty(self) -> bool:
        return self.classifier.empty()

    def _load(self) -> Optional[str]:
        for path in self._candidate_paths():
            if not os.path.isfile(path):
                continue
            try:
                if self.classifier.load(path):
                    logger.info(f"[Cascade] Modelo cargado desde {path}")
                    return path
            except cv2.error:
                logger.warning(f"[Cascade] XML inválido: {path}")

        logger.error(f"XML file not loaded ({self.cascade_path}); no se detectarán placas")
        return None

    def _candidate_paths(self) -> List[str]:
        paths = [self.cascade_path]
        bundled_dir = getattr(getattr(cv2, "data", None), "haarcascades", None)
        if bundled_dir:
            paths.append(os.path.join(bundled_dir, os.path.basename(self.cascade_path)))
        return paths

    def detect(self, frame: Frame) -> List[Plate]:
        """
        Devuelve las regiones (x, y, ancho, alto) encontradas en el frame.
        """
        if self.empty:
            return []

        image = frame.data
        if image.ndim == 3:
            image = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)

        rects = self.classifier.detectMultiScale(
            image,
            scaleFactor=self.scale_factor,
            minNeighbors=self.min_neighbors,
        )

        return [
            Plate(bounding_box=(int(x), int(y), int(w), int(h)), index=i)
            for i, (x, y, w, h) in enumerate(rects)
        ]
