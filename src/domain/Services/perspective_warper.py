# src/domain/Services/perspective_warper.py
import cv2
import numpy as np

WARP_WIDTH = 420
WARP_HEIGHT = 596
CROP_MARGIN = 5


def _destination(width: float, height: float) -> np.ndarray:
    # mismo orden que reorder_points: sup-izq, sup-der, inf-izq, inf-der
    return np.array([
        [0.0, 0.0],
        [width, 0.0],
        [0.0, height],
        [width, height],
    ], dtype=np.float32)


def get_transformation_matrix(
    points: np.ndarray,
    width: float = WARP_WIDTH,
    height: float = WARP_HEIGHT,
) -> np.ndarray:
    """
    Matriz 3x3 que lleva los 4 puntos ordenados a las esquinas del rectángulo destino.
    """
    src = np.asarray(points, dtype=np.float32).reshape(4, 2)
    return cv2.getPerspectiveTransform(src, _destination(width, height))


def get_warp(
    image: np.ndarray,
    points: np.ndarray,
    width: float = WARP_WIDTH,
    height: float = WARP_HEIGHT,
) -> np.ndarray:
    """
    Rectifica `image` a un tamaño fijo (ancho x alto) usando los 4 puntos ordenados.
    """
    matrix = get_transformation_matrix(points, width, height)
    return cv2.warpPerspective(image, matrix, (int(width), int(height)))


def crop_border(image: np.ndarray, margin: int = CROP_MARGIN) -> np.ndarray:
    """
    Recorta `margin` píxeles por cada lado para quitar artefactos del borde.
    """
    h, w = image.shape[:2]
    if margin < 0 or 2 * margin >= min(h, w):
        raise ValueError(f"Margen {margin} inválido para imagen {w}x{h}")
    return image[margin:h - margin, margin:w - margin]
