"""
Paquete raiz del reporte de tiempos de archivos `.lif`.

Cada submodulo representa una capa: nucleo compartido (configuracion y
telemetria), pipeline del reporte y scripts de entrada.
"""

from .core.config import ReportConfig  # noqa: F401
from .core.telemetry import setup_logger  # noqa: F401
from .report.pipeline import run_report  # noqa: F401

__all__ = ["ReportConfig", "setup_logger", "run_report"]


if __name__ == "__main__":
    # Prueba rapida para verificar que los imports principales funcionan.
    cfg = ReportConfig(directory=".")
    logger = setup_logger()
    logger.info("Inicializacion basica completada.")
    print(cfg)
