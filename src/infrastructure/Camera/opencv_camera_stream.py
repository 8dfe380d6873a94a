import cv2
import time
import logging
from typing import Optional, Union

from src.core.exceptions import CameraError
from src.domain.Models.frame import Frame
from src.domain.Interfaces.camera_stream import ICameraStream

logger = logging.getLogger(__name__)


class OpenCVCameraStream(ICameraStream):
    """
    Implementación de ICameraStream sobre cv2.VideoCapture.
    Lectura síncrona: read_frame() bloquea hasta que la cámara entrega un frame.
    """

    def __init__(self, source: Union[int, str] = 0):
        """
        :param source: índice de dispositivo (0 = webcam por defecto) o URL/archivo.
        """
        self.source = source
        self.cap = None
        self._frame_idx = 0

    # ==========================================================
    # CONNECT
    # ==========================================================
    def connect(self) -> None:
        self.cap = cv2.VideoCapture(self.source)

        if not self.cap or not self.cap.isOpened():
            raise CameraError(f"No se pudo abrir la fuente de captura: {self.source}")

        self._frame_idx = 0
        logger.info(f"🎥 Conectado a la fuente {self.source}")

    # ==========================================================
    # READ FRAME
    # ==========================================================
    def read_frame(self) -> Optional[Frame]:
        if self.cap is None:
            return None

        ok, image = self.cap.read()
        if not ok or image is None:
            logger.warning(f"[{self.source}] Error al leer frame")
            return None

        frame = Frame(
            data=image,
            timestamp=time.time(),
            source=str(self.source),
            index=self._frame_idx,
        )
        self._frame_idx += 1
        return frame

    # ==========================================================
    # DISCONNECT
    # ==========================================================
    def disconnect(self) -> None:
        if self.cap:
            self.cap.release()
            self.cap = None

        logger.info(f"🔌 Fuente cerrada ({self.source}).")
