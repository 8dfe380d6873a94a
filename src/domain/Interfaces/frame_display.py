from abc import ABC, abstractmethod
import numpy as np

class IFrameDisplay(ABC):
    """
    Ventanas de visualización (highgui o equivalente headless).
    """
    @abstractmethod
    def show(self, window: str, image: np.ndarray) -> None:
        pass

    @abstractmethod
    def wait_key(self, delay_ms: int) -> int:
        """Espera `delay_ms` (0 = indefinido) y devuelve la tecla pulsada o -1."""
        pass

    @abstractmethod
    def close(self) -> None:
        pass
