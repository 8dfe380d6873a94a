from abc import ABC, abstractmethod
import numpy as np

class ICropWriter(ABC):
    """
    Destino de los recortes de placa.
    """
    @abstractmethod
    def write(self, index: int, crop: np.ndarray) -> str:
        """Guarda el recorte número `index` del frame actual y devuelve su ruta."""
        pass
