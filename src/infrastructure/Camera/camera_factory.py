# src/infrastructure/Camera/camera_factory.py
from src.core.config import settings
from src.domain.Interfaces.camera_stream import ICameraStream


def create_camera_stream() -> ICameraStream:
    """
    Factory que elige la fuente de captura según settings.
    """

    # ==========================================================
    # 🧪 1) Fake camera (archivo de video) para pruebas
    # ==========================================================
    if settings.camera_url and settings.camera_url.startswith("fake://"):
        from src.infrastructure.Camera.fake_camera_stream import FakeCameraStream
        return FakeCameraStream(video_path=settings.camera_url.replace("fake://", ""))

    # ==========================================================
    # 📷 2) OpenCV: URL si está configurada, si no el índice de dispositivo
    # ==========================================================
    from src.infrastructure.Camera.opencv_camera_stream import OpenCVCameraStream
    source = settings.camera_url or settings.camera_index
    return OpenCVCameraStream(source)
