"""Fixtures compartidas: imágenes sintéticas de documentos y placas."""
import logging

import cv2
import numpy as np
import pytest

from src.infrastructure.Display.opencv_display import HeadlessDisplay
from src.test.synthetic import (
    DOCUMENT_CORNERS,
    PLATE_BOX,
    RENDERED_PLATE_BOX,
    RENDERED_PLATE_REGION,
    RENDERED_PLATE_TEXT,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)


@pytest.fixture
def document_image():
    """Hoja blanca ligeramente en perspectiva sobre fondo oscuro (1000x1300)."""
    image = np.full((1300, 1000, 3), 40, dtype=np.uint8)
    tl, tr, bl, br = DOCUMENT_CORNERS
    polygon = np.array([tl, tr, br, bl], dtype=np.int32)
    cv2.fillPoly(image, [polygon], (255, 255, 255))
    return image


@pytest.fixture
def document_path(tmp_path, document_image):
    path = tmp_path / "document.png"
    assert cv2.imwrite(str(path), document_image)
    return str(path)


@pytest.fixture
def blank_image():
    return np.full((600, 400, 3), 128, dtype=np.uint8)


@pytest.fixture
def plate_frame_image():
    """Frame 320x240 con un patrón tipo placa (fondo blanco + barras negras)."""
    image = np.full((240, 320, 3), 90, dtype=np.uint8)
    x, y, w, h = PLATE_BOX
    cv2.rectangle(image, (x, y), (x + w - 1, y + h - 1), (255, 255, 255), cv2.FILLED)
    for i in range(6):
        bx = x + 8 + i * 18
        cv2.rectangle(image, (bx, y + 8), (bx + 8, y + h - 9), (0, 0, 0), cv2.FILLED)
    return image


@pytest.fixture
def headless_display():
    return HeadlessDisplay()


@pytest.fixture
def rendered_plate_frame():
    """
    Frame 480x360 con una placa dibujada como las reales: fondo blanco, borde negro,
    caracteres gruesos y recuadro de región a la derecha, sobre un parachoques oscuro.
    """
    image = np.full((360, 480, 3), 150, dtype=np.uint8)
    x, y, w, h = RENDERED_PLATE_BOX
    cv2.rectangle(image, (x - 40, y - 30), (x + w + 40, y + h + 30), (60, 60, 60), cv2.FILLED)
    cv2.rectangle(image, (x, y), (x + w - 1, y + h - 1), (255, 255, 255), cv2.FILLED)
    cv2.rectangle(image, (x, y), (x + w - 1, y + h - 1), (0, 0, 0), 3)

    split = x + int(w * 0.75)
    cv2.line(image, (split, y), (split, y + h - 1), (0, 0, 0), 2)
    cv2.putText(image, RENDERED_PLATE_TEXT, (x + 10, y + h - 10),
                cv2.FONT_HERSHEY_SIMPLEX, 1.2, (0, 0, 0), 4, cv2.LINE_AA)
    cv2.putText(image, RENDERED_PLATE_REGION, (split + 8, y + h - 18),
                cv2.FONT_HERSHEY_SIMPLEX, 0.9, (0, 0, 0), 3, cv2.LINE_AA)
    return image
