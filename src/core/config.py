import os
from typing import Optional, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from dotenv import load_dotenv


# ==========================================================
# 1) Cargar .env raíz
# ==========================================================
load_dotenv(".env")
DEPLOY_ENV = os.getenv("DEPLOY_ENV", "prod").lower()

# ==========================================================
# 2) Cargar .env del entorno
# ==========================================================
ENV_PATH = f"DevOps/{DEPLOY_ENV}/.env"
load_dotenv(ENV_PATH, override=True)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=ENV_PATH,
        extra="allow"
    )

    # =========================
    #  App
    # =========================
    deploy_env: str = Field("prod", env="DEPLOY_ENV")
    app_name: str = Field("vision-demos", env="APP_NAME")
    app_env: str = Field("prod", env="APP_ENV")
    log_level: str = Field("INFO", env="LOG_LEVEL")

    # =========================
    #  Camera
    # =========================
    camera_index: int = Field(0, env="CAMERA_INDEX")
    camera_url: Optional[str] = Field(None, env="CAMERA_URL")

    # =========================
    #  Haar cascade (placas)
    # =========================
    cascade_path: str = Field("haarcascade_russian_plate_number.xml", env="CASCADE_PATH")
    cascade_scale_factor: float = Field(1.1, env="CASCADE_SCALE_FACTOR")
    cascade_min_neighbors: int = Field(10, env="CASCADE_MIN_NEIGHBORS")

    # =========================
    #  Salida de recortes de placa
    # =========================
    plate_output_dir: str = Field(".", env="PLATE_OUTPUT_DIR")
    plate_file_prefix: str = Field("plate_", env="PLATE_FILE_PREFIX")
    plate_box_color: Tuple[int, int, int] = Field((255, 0, 255), env="PLATE_BOX_COLOR")
    plate_box_thickness: int = Field(3, env="PLATE_BOX_THICKNESS")
    plate_window: str = Field("Image", env="PLATE_WINDOW")
    wait_key_ms: int = Field(1, env="WAIT_KEY_MS")

    # =========================
    #  Document warper
    # =========================
    document_path: Optional[str] = Field(None, env="DOCUMENT_PATH")
    document_output_path: Optional[str] = Field(None, env="DOCUMENT_OUTPUT_PATH")
    document_resize_factor: float = Field(0.5, env="DOCUMENT_RESIZE_FACTOR")
    warp_width: int = Field(420, env="WARP_WIDTH")
    warp_height: int = Field(596, env="WARP_HEIGHT")
    warp_crop_margin: int = Field(5, env="WARP_CROP_MARGIN")
    document_window: str = Field("Image", env="DOCUMENT_WINDOW")
    document_crop_window: str = Field("Image Crop", env="DOCUMENT_CROP_WINDOW")

    # =========================
    #  Runtime
    # =========================
    debug_show: bool = Field(True, env="DEBUG_SHOW")

    # =========================
    #  Monitoring
    # =========================
    metrics_enabled: bool = Field(False, env="METRICS_ENABLED")
    prometheus_port: int = Field(9100, env="PROMETHEUS_PORT")


settings = Settings()
