import logging
from typing import Dict

import cv2
import numpy as np

from src.domain.Interfaces.frame_display import IFrameDisplay

logger = logging.getLogger(__name__)


class OpenCVDisplay(IFrameDisplay):
    """
    Ventanas highgui (cv2.imshow / cv2.waitKey).
    """

    def show(self, window: str, image: np.ndarray) -> None:
        cv2.imshow(window, image)

    def wait_key(self, delay_ms: int) -> int:
        return cv2.waitKey(delay_ms)

    def close(self) -> None:
        try:
            cv2.destroyAllWindows()
        except cv2.error:
            # builds headless de OpenCV no tienen highgui
            logger.debug("destroyAllWindows no disponible")


class HeadlessDisplay(IFrameDisplay):
    """
    Display sin ventanas: guarda la última imagen de cada ventana.
    Útil en servidores y tests.
    """

    def __init__(self):
        self.windows: Dict[str, np.ndarray] = {}
        self.shown = 0
        self.waits = 0
        self.closed = False

    def show(self, window: str, image: np.ndarray) -> None:
        self.windows[window] = image
        self.shown += 1

    def wait_key(self, delay_ms: int) -> int:
        self.waits += 1
        return -1

    def close(self) -> None:
        self.closed = True
