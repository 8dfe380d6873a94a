import logging
import sys
from typing import List, Optional

from src.core.config import settings
from src.core.exceptions import ConfigError, VisionError
from src.application.document_warper_service import DocumentWarperService
from src.infrastructure.Display.display_factory import create_display
from src.monitoring.metrics import start_metrics_server

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


def resolve_path(argv: List[str]) -> str:
    """Ruta del documento: primer argumento o DOCUMENT_PATH. No hay valor por defecto."""
    path = argv[0] if argv else settings.document_path
    if not path:
        raise ConfigError(
            "Falta la imagen del documento: pásala como argumento o define DOCUMENT_PATH"
        )
    return path


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    if settings.metrics_enabled:
        start_metrics_server(port=settings.prometheus_port)

    try:
        path = resolve_path(argv)
        service = DocumentWarperService(display=create_display())
        result = service.run(path)
    except VisionError as e:
        logger.error("❌ %s", e)
        return 1

    logger.info("📄 Documento rectificado: %s", result.to_dict())
    return 0


if __name__ == "__main__":
    sys.exit(main())
