"""Constantes de las imágenes sintéticas usadas por los tests."""
import numpy as np

# Esquinas del documento en la imagen original (antes del resize 0.5)
DOCUMENT_CORNERS = np.array([
    [220, 180],   # sup-izq
    [790, 230],   # sup-der
    [180, 1120],  # inf-izq
    [830, 1080],  # inf-der
], dtype=np.int32)

# (x, y, ancho, alto) del patrón de placa en plate_frame_image
PLATE_BOX = (60, 80, 120, 40)

# Placa renderada (formato ruso ~4.6:1) dentro de rendered_plate_frame
RENDERED_PLATE_BOX = (120, 160, 240, 52)
RENDERED_PLATE_TEXT = "A123BC"
RENDERED_PLATE_REGION = "77"
