import os
import logging
from typing import Optional

import cv2
import numpy as np

from src.core.config import settings
from src.core.exceptions import CropWriteError
from src.domain.Interfaces.crop_writer import ICropWriter

logger = logging.getLogger(__name__)


class PngCropWriter(ICropWriter):
    """
    Escribe cada recorte como <output_dir>/<prefix><index>.png.
    El índice es relativo al frame: el archivo se sobrescribe en el frame siguiente.
    """

    def __init__(self, output_dir: Optional[str] = None, prefix: Optional[str] = None):
        self.output_dir = output_dir or settings.plate_output_dir
        self.prefix = prefix if prefix is not None else settings.plate_file_prefix
        os.makedirs(self.output_dir, exist_ok=True)

    def path_for(self, index: int) -> str:
        return os.path.join(self.output_dir, f"{self.prefix}{index}.png")

    def write(self, index: int, crop: np.ndarray) -> str:
        path = self.path_for(index)
        if crop is None or crop.size == 0:
            raise CropWriteError(f"Recorte vacío para {path}")

        if not cv2.imwrite(path, crop):
            raise CropWriteError(f"cv2.imwrite no pudo escribir {path}")

        logger.debug("Recorte guardado en %s (%dx%d)", path, crop.shape[1], crop.shape[0])
        return path
