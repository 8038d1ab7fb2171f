"""
Componentes compartidos por el pipeline y los scripts: configuracion y
telemetria.
"""

from .config import ReportConfig  # noqa: F401
from .telemetry import LOGGER_NAME, get_logger, setup_logger  # noqa: F401

__all__ = [
    "ReportConfig",
    "LOGGER_NAME",
    "get_logger",
    "setup_logger",
]


if __name__ == "__main__":
    logger = setup_logger()
    logger.info("Core module smoke test completado.")
