"""Errores propios de los pipelines de visión."""


class VisionError(Exception):
    """Error base de la aplicación."""
    pass


class ConfigError(VisionError):
    """Falta una entrada de configuración obligatoria."""
    pass


class ImageLoadError(VisionError):
    """La imagen no existe o no se pudo decodificar."""
    pass


class DocumentNotFoundError(VisionError):
    """No se encontró ningún contorno de 4 vértices en la imagen."""
    pass


class CameraError(VisionError, ConnectionError):
    """No se pudo abrir la fuente de captura."""
    pass


class CropWriteError(VisionError):
    """cv2.imwrite no pudo escribir el recorte."""
    pass
