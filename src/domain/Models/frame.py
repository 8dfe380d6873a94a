from dataclasses import dataclass
import numpy as np

@dataclass
class Frame:
    """
    Buffer de píxeles capturado de una cámara o cargado de un archivo.
    Cada etapa del pipeline recibe el frame y devuelve uno nuevo; no se reutiliza.
    """
    data: np.ndarray   # imagen BGR (alto x ancho x canales)
    timestamp: float   # momento en que se capturó
    source: str        # índice de cámara, URL o ruta del archivo
    index: int = 0     # número de frame dentro de la sesión de captura

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    def to_dict(self) -> dict:
        """
        Dict serializable (sin la imagen) para logs.
        """
        return {
            "timestamp": self.timestamp,
            "source": self.source,
            "index": self.index,
            "shape": self.data.shape if isinstance(self.data, np.ndarray) else None
        }
