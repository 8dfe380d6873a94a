from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass
class Plate:
    """
    Región rectangular (alineada a los ejes) donde el cascade encontró una placa.
    Vive solo durante el frame actual: se usa para recortar y para dibujar.
    """
    bounding_box: Tuple[int, int, int, int]   # (x, y, ancho, alto) en coordenadas de la imagen
    index: int = 0                            # posición dentro del frame -> plate_<index>.png
    crop_path: Optional[str] = None           # archivo donde se escribió el recorte

    @property
    def x(self) -> int:
        return self.bounding_box[0]

    @property
    def y(self) -> int:
        return self.bounding_box[1]

    @property
    def width(self) -> int:
        return self.bounding_box[2]

    @property
    def height(self) -> int:
        return self.bounding_box[3]

    @property
    def tl(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def br(self) -> Tuple[int, int]:
        return (self.x + self.width, self.y + self.height)

    @property
    def area(self) -> int:
        return max(0, self.width) * max(0, self.height)

    def iou(self, other: "Plate") -> float:
        """Intersection-over-Union entre dos regiones."""
        ix1 = max(self.x, other.x)
        iy1 = max(self.y, other.y)
        ix2 = min(self.br[0], other.br[0])
        iy2 = min(self.br[1], other.br[1])

        inter = max(0, ix2 - ix1) * max(0, iy2 - iy1)
        union = self.area + other.area - inter
        if union <= 0:
            return 0.0
        return inter / union

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "crop_path": self.crop_path,
        }
