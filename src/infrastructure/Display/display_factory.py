from src.core.config import settings
from src.domain.Interfaces.frame_display import IFrameDisplay


def create_display() -> IFrameDisplay:
    """
    Ventanas OpenCV si DEBUG_SHOW está activo, si no display headless.
    """
    from src.infrastructure.Display.opencv_display import OpenCVDisplay, HeadlessDisplay
    if settings.debug_show:
        return OpenCVDisplay()
    return HeadlessDisplay()
