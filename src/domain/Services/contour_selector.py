# src/domain/Services/contour_selector.py
import logging

import cv2
import numpy as np

logger = logging.getLogger(__name__)

APPROX_EPSILON = 0.02


def find_largest_quadrilateral(edges: np.ndarray) -> np.ndarray:
    """
    Busca el contorno externo de mayor área cuya aproximación poligonal tiene 4 vértices.

    - tolerancia de aproximación = 2% del perímetro cerrado del contorno
    - comparación estricta (>) -> en empate gana el primero encontrado
    - área truncada a entero, máximo inicial 0 (un quad de área 0 nunca gana)

    Devuelve un array (4, 2) int32 con los vértices en el orden de approxPolyDP,
    o un array vacío (0, 2) si no hay ningún contorno de 4 vértices.
    """
    contours, _ = cv2.findContours(edges, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)

    biggest = np.empty((0, 2), dtype=np.int32)
    max_area = 0

    for contour in contours:
        area = int(cv2.contourArea(contour))
        peri = cv2.arcLength(contour, True)
        approx = cv2.approxPolyDP(contour, APPROX_EPSILON * peri, True)

        if area > max_area and len(approx) == 4:
            biggest = approx.reshape(4, 2).astype(np.int32)
            max_area = area

    logger.debug("contornos=%d área máxima quad=%d", len(contours), max_area)
    return biggest
