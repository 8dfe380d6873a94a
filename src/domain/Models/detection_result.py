# src/domain/Models/detection_result.py
from dataclasses import dataclass, field
from typing import List
from src.domain.Models.plate import Plate

@dataclass
class DetectionResult:
    """
    Resultado de procesar un frame completo del detector de placas.
    """
    frame_index: int
    plates: List[Plate] = field(default_factory=list)
    source: str = ""          # cámara o archivo del que vino el frame
    captured_at: float = 0.0  # timestamp original del frame
    processed_at: float = 0.0 # timestamp cuando se terminó de procesar

    def to_dict(self) -> dict:
        """Convierte a dict serializable."""
        return {
            "frame_index": self.frame_index,
            "plates": [p.to_dict() for p in self.plates],
            "source": self.source,
            "captured_at": self.captured_at,
            "processed_at": self.processed_at,
        }
