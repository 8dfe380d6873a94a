# src/domain/Services/point_reorderer.py
import numpy as np


def reorder_points(points: np.ndarray) -> np.ndarray:
    """
    Ordena 4 puntos como [sup-izq, sup-der, inf-izq, inf-der].

    Usa x+y (mín = sup-izq, máx = inf-der) y x-y (máx = sup-der, mín = inf-izq).
    Solo es correcto para cuadriláteros aproximadamente alineados a los ejes
    (rotación < ~45°). En empate gana el primer índice.
    """
    pts = np.asarray(points).reshape(-1, 2)
    if pts.shape[0] != 4:
        raise ValueError(f"Se esperaban 4 puntos, llegaron {pts.shape[0]}")

    xy = pts.astype(np.float64)
    s = xy[:, 0] + xy[:, 1]
    d = xy[:, 0] - xy[:, 1]

    return np.array([
        pts[np.argmin(s)],  # sup-izq
        pts[np.argmax(d)],  # sup-der
        pts[np.argmin(d)],  # inf-izq
        pts[np.argmax(s)],  # inf-der
    ], dtype=pts.dtype)
