from abc import ABC, abstractmethod
from typing import Optional
from src.domain.Models.frame import Frame

class ICameraStream(ABC):
    """
    Abstracción de una fuente de captura (webcam, URL o archivo).
    """
    @abstractmethod
    def connect(self) -> None:
        """Abre la fuente de captura."""
        pass

    @abstractmethod
    def read_frame(self) -> Optional[Frame]:
        """Lee un frame. Devuelve None si la lectura falla."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Libera la fuente de captura."""
        pass

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.disconnect()
