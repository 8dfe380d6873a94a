from src.core.config import settings
from src.domain.Interfaces.plate_detector import IPlateDetector

def create_plate_detector() -> IPlateDetector:
    from src.infrastructure.Detector.haar_cascade_plate_detector import HaarCascadePlateDetector
    return HaarCascadePlateDetector(
        cascade_path=settings.cascade_path,
        scale_factor=settings.cascade_scale_factor,
        min_neighbors=settings.cascade_min_neighbors,
    )
