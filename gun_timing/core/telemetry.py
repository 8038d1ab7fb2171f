"""
Registro compartido por el pipeline y los scripts.
"""

from __future__ import annotations

import logging
from typing import IO, Optional, Union

LOGGER_NAME = "gun_time_report"
LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(message)s"


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).strip().upper(), logging.INFO)


def setup_logger(level: Union[str, int] = "INFO", stream: Optional[IO[str]] = None) -> logging.Logger:
    """
    Logger del reporte: un solo handler hacia stderr (o `stream`).

    Llamadas posteriores solo ajustan el nivel; un nivel desconocido cae en INFO.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_resolve_level(level))
    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


if __name__ == "__main__":
    log = setup_logger()
    log.info("Telemetria configurada correctamente.")
