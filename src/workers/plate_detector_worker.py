import logging
import sys

from src.core.config import settings
from src.core.exceptions import VisionError
from src.application.plate_detector_service import PlateDetectorService
from src.infrastructure.Camera.camera_factory import create_camera_stream
from src.infrastructure.Detector.factory import create_plate_detector
from src.infrastructure.Display.display_factory import create_display
from src.infrastructure.Storage.png_crop_writer import PngCropWriter
from src.monitoring.metrics import start_metrics_server

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


def main() -> int:
    if settings.metrics_enabled:
        start_metrics_server(port=settings.prometheus_port)

    service = PlateDetectorService(
        camera_stream=create_camera_stream(),
        detector=create_plate_detector(),
        crop_writer=PngCropWriter(
            output_dir=settings.plate_output_dir,
            prefix=settings.plate_file_prefix,
        ),
        display=create_display(),
    )

    logger.info("🚀 Detector de placas iniciado. Ctrl+C para salir.")
    try:
        service.run()
    except VisionError as e:
        logger.error("❌ %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
