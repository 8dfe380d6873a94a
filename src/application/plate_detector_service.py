# src/application/plate_detector_service.py
import time
import logging
import threading
from typing import Optional, Tuple

import cv2

from src.monitoring.metrics import (
    frames_processed_total, plates_detected_total, detector_latency
)

from src.domain.Models.frame import Frame
from src.domain.Models.detection_result import DetectionResult
from src.domain.Interfaces.camera_stream import ICameraStream
from src.domain.Interfaces.plate_detector import IPlateDetector
from src.domain.Interfaces.crop_writer import ICropWriter
from src.domain.Interfaces.frame_display import IFrameDisplay
from src.core.config import settings

logger = logging.getLogger(__name__)


class PlateDetectorService:
    """
    Loop de detección: leer frame -> cascade -> recortar/guardar cada placa ->
    dibujar recuadros -> mostrar -> esperar 1 ms. Todo en un solo hilo.
    Termina cuando alguien llama stop() (o con Ctrl+C).
    """

    def __init__(
        self,
        camera_stream: ICameraStream,
        detector: IPlateDetector,
        crop_writer: ICropWriter,
        display: IFrameDisplay,
        stop_event: Optional[threading.Event] = None,
        window: Optional[str] = None,
        box_color: Optional[Tuple[int, int, int]] = None,
        box_thickness: Optional[int] = None,
        wait_key_ms: Optional[int] = None,
    ):
        self.camera_stream = camera_stream
        self.detector = detector
        self.crop_writer = crop_writer
        self.display = display

        self.stop_event = stop_event or threading.Event()
        self.window = window or settings.plate_window
        self.box_color = tuple(box_color or settings.plate_box_color)
        self.box_thickness = box_thickness if box_thickness is not None else settings.plate_box_thickness
        self.wait_key_ms = wait_key_ms if wait_key_ms is not None else settings.wait_key_ms

        self.frames_processed = 0

    # ---------------------------------------------------------
    # START / STOP
    # ---------------------------------------------------------
    def run(self):
        logger.info("Detector de placas iniciado (ventana=%s)", self.window)

        self.stop_event.clear()
        self.camera_stream.connect()

        try:
            while not self.stop_event.is_set():
                frame = self.camera_stream.read_frame()
                if frame is None:
                    logger.debug("Frame ilegible, se omite")
                    continue

                self.process_frame(frame)
                self.display.wait_key(self.wait_key_ms)
        except KeyboardInterrupt:
            logger.info("Interrupción recibida - deteniendo")
        finally:
            self.camera_stream.disconnect()
            self.display.close()

        logger.info("Detector detenido tras %d frames", self.frames_processed)

    def stop(self):
        self.stop_event.set()

    # ---------------------------------------------------------
    # PROCESSING (por frame)
    # ---------------------------------------------------------
    def process_frame(self, frame: Frame) -> DetectionResult:
        t0 = time.perf_counter()
        plates = self.detector.detect(frame) or []
        detector_latency.labels(source=frame.source).set(time.perf_counter() - t0)

        image = frame.data

        # los recortes salen del frame sin anotar; los recuadros se dibujan después
        crops = [
            image[p.y:p.y + p.height, p.x:p.x + p.width].copy()
            for p in plates
        ]

        for i, (plate, crop) in enumerate(zip(plates, crops)):
            plate.index = i
            plate.crop_path = self.crop_writer.write(i, crop)

        for plate in plates:
            cv2.rectangle(image, plate.tl, plate.br, self.box_color, self.box_thickness)

        self.display.show(self.window, image)

        frames_processed_total.labels(source=frame.source).inc()
        if plates:
            plates_detected_total.labels(source=frame.source).inc(len(plates))

        self.frames_processed += 1
        logger.debug(
            "Frame %d: %d placas en %.3fs", frame.index, len(plates), time.perf_counter() - t0
        )

        return DetectionResult(
            frame_index=frame.index,
            plates=plates,
            source=frame.source,
            captured_at=frame.timestamp,
            processed_at=time.time(),
        )
