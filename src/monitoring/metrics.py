import logging

from prometheus_client import Gauge, Counter, start_http_server

logger = logging.getLogger(__name__)

# Frames procesados por el detector de placas
frames_processed_total = Counter(
    "frames_processed_total",
    "Total de frames procesados",
    ["source"]
)

# Placas detectadas
plates_detected_total = Counter(
    "plates_detected_total",
    "Total de placas detectadas",
    ["source"]
)

# Latencia detector
detector_latency = Gauge(
    "detector_latency_seconds",
    "Tiempo de ejecución del cascade por frame",
    ["source"]
)

# Documentos rectificados
documents_warped_total = Counter(
    "documents_warped_total",
    "Total de documentos rectificados"
)

# Fallos del document warper
document_warp_failures_total = Counter(
    "document_warp_failures_total",
    "Total de fallos al rectificar documentos",
    ["reason"]
)

def start_metrics_server(port: int = 9100):
    """Arranca servidor de métricas Prometheus."""
    start_http_server(port)
    logger.info(f"📊 Prometheus metrics disponible en :{port}")
