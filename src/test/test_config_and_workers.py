import pytest

from src.core.config import Settings, settings
from src.core.exceptions import ConfigError
from src.workers import document_warper_worker
from src.infrastructure.Camera import camera_factory
from src.infrastructure.Camera.fake_camera_stream import FakeCameraStream
from src.infrastructure.Camera.opencv_camera_stream import OpenCVCameraStream
from src.infrastructure.Display import display_factory
from src.infrastructure.Display.opencv_display import HeadlessDisplay, OpenCVDisplay


@pytest.fixture
def clean_env(monkeypatch):
    for var in ("WARP_WIDTH", "DOCUMENT_PATH", "CAMERA_URL", "CASCADE_MIN_NEIGHBORS"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    s = Settings()

    assert s.cascade_path == "haarcascade_russian_plate_number.xml"
    assert s.cascade_scale_factor == 1.1
    assert s.cascade_min_neighbors == 10
    assert (s.warp_width, s.warp_height, s.warp_crop_margin) == (420, 596, 5)
    assert s.document_resize_factor == 0.5
    assert s.document_path is None
    assert s.plate_window == "Image"
    assert s.document_crop_window == "Image Crop"


def test_environment_overrides(clean_env):
    clean_env.setenv("WARP_WIDTH", "300")
    clean_env.setenv("CASCADE_MIN_NEIGHBORS", "4")

    s = Settings()

    assert s.warp_width == 300
    assert s.cascade_min_neighbors == 4


def test_document_path_is_required(monkeypatch):
    monkeypatch.setattr(settings, "document_path", None)

    with pytest.raises(ConfigError):
        document_warper_worker.resolve_path([])

    assert document_warper_worker.main([]) == 1


def test_document_path_from_argument_or_settings(monkeypatch):
    monkeypatch.setattr(settings, "document_path", "/data/doc.jpg")

    assert document_warper_worker.resolve_path([]) == "/data/doc.jpg"
    assert document_warper_worker.resolve_path(["/tmp/other.png"]) == "/tmp/other.png"


def test_document_worker_end_to_end(monkeypatch, document_path, tmp_path):
    out = tmp_path / "crop.png"
    monkeypatch.setattr(settings, "debug_show", False)
    monkeypatch.setattr(settings, "metrics_enabled", False)
    monkeypatch.setattr(settings, "document_output_path", str(out))

    assert document_warper_worker.main([document_path]) == 0
    assert out.exists()


def test_document_worker_reports_missing_image(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "debug_show", False)
    monkeypatch.setattr(settings, "metrics_enabled", False)

    assert document_warper_worker.main([str(tmp_path / "missing.jpg")]) == 1


def test_camera_factory_selection(monkeypatch):
    monkeypatch.setattr(settings, "camera_url", "fake://clip.mp4")
    stream = camera_factory.create_camera_stream()
    assert isinstance(stream, FakeCameraStream)
    assert stream.video_path == "clip.mp4"

    monkeypatch.setattr(settings, "camera_url", None)
    monkeypatch.setattr(settings, "camera_index", 2)
    stream = camera_factory.create_camera_stream()
    assert isinstance(stream, OpenCVCameraStream)
    assert stream.source == 2


def test_display_factory_selection(monkeypatch):
    monkeypatch.setattr(settings, "debug_show", False)
    assert isinstance(display_factory.create_display(), HeadlessDisplay)

    monkeypatch.setattr(settings, "debug_show", True)
    assert isinstance(display_factory.create_display(), OpenCVDisplay)


@pytest.mark.parametrize("name", ["nope/crop.png", "crop"])
def test_document_worker_reports_unwritable_output(monkeypatch, document_path, tmp_path, name):
    out = tmp_path / name
    monkeypatch.setattr(settings, "debug_show", False)
    monkeypatch.setattr(settings, "metrics_enabled", False)
    monkeypatch.setattr(settings, "document_output_path", str(out))

    assert document_warper_worker.main([document_path]) == 1
    assert not out.exists()
