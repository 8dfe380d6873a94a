import cv2
import time
from typing import List, Optional

import numpy as np

from src.core.exceptions import CameraError
from src.domain.Models.frame import Frame
from src.domain.Interfaces.camera_stream import ICameraStream


class FakeCameraStream(ICameraStream):
    """
    Simula una cámara con un archivo de video o una lista de imágenes en memoria.
    Al llegar al final vuelve a empezar, como un stream continuo.
    """

    def __init__(self, video_path: Optional[str] = None, frames: Optional[List[np.ndarray]] = None):
        if video_path is None and not frames:
            raise ValueError("FakeCameraStream necesita video_path o frames")

        self.video_path = video_path
        self.frames = list(frames) if frames else []
        self.source = f"fake://{video_path}" if video_path else "fake://memory"

        self.cap = None
        self._pos = 0
        self._frame_idx = 0

    # ==========================================================
    # CONNECT
    # ==========================================================
    def connect(self):
        self._pos = 0
        self._frame_idx = 0
        if self.video_path is None:
            return

        self.cap = cv2.VideoCapture(self.video_path)
        if not self.cap.isOpened():
            raise CameraError(f"No se pudo abrir video {self.video_path}")

    # ==========================================================
    # READ FRAME
    # ==========================================================
    def read_frame(self) -> Optional[Frame]:
        image = self._next_image()
        if image is None:
            return None

        frame = Frame(
            data=image,
            timestamp=time.time(),
            source=self.source,
            index=self._frame_idx,
        )
        self._frame_idx += 1
        return frame

    def _next_image(self) -> Optional[np.ndarray]:
        if self.frames:
            image = self.frames[self._pos % len(self.frames)].copy()
            self._pos += 1
            return image

        if self.cap is None:
            return None

        ok, image = self.cap.read()
        if ok:
            return image

        # Si llega al final del video -> reiniciar
        self._restart_video()
        ok, image = self.cap.read()
        return image if ok else None

    def _restart_video(self):
        """Reinicia el archivo simulando un stream continuo."""
        if self.cap:
            self.cap.release()
        self.cap = cv2.VideoCapture(self.video_path)

    # ==========================================================
    # DISCONNECT
    # ==========================================================
    def disconnect(self):
        if self.cap:
            self.cap.release()
            self.cap = None
