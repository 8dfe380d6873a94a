# src/domain/Services/document_preprocessor.py
import cv2
import numpy as np

BLUR_KERNEL = (3, 3)
BLUR_SIGMA = 3
CANNY_LOW = 25
CANNY_HIGH = 75
DILATE_KERNEL = (3, 3)


def preprocess(image: np.ndarray) -> np.ndarray:
    """
    Gris -> blur gaussiano 3x3 -> Canny 25/75 -> dilatación 3x3.
    Devuelve la imagen binaria de bordes. No modifica la entrada.
    """
    if image.ndim == 3:
        gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    else:
        gray = image

    blurred = cv2.GaussianBlur(gray, BLUR_KERNEL, BLUR_SIGMA, 0)
    edges = cv2.Canny(blurred, CANNY_LOW, CANNY_HIGH)

    kernel = cv2.getStructuringElement(cv2.MORPH_RECT, DILATE_KERNEL)
    return cv2.dilate(edges, kernel)
