# src/domain/Models/document_scan.py
from dataclasses import dataclass
from typing import Optional
import numpy as np

@dataclass
class DocumentScan:
    """
    Resultado de una pasada del document warper.
    Nada de esto se conserva entre ejecuciones.
    """
    annotated: np.ndarray    # imagen redimensionada con las esquinas marcadas
    edges: np.ndarray        # imagen binaria de bordes dilatados
    corners: np.ndarray      # (4, 2) en orden [sup-izq, sup-der, inf-izq, inf-der]
    warped: np.ndarray       # imagen rectificada (alto x ancho fijo)
    crop: np.ndarray         # warped sin el margen de bordes
    output_path: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "corners": self.corners.tolist(),
            "warped_shape": self.warped.shape,
            "crop_shape": self.crop.shape,
            "output_path": self.output_path,
        }
