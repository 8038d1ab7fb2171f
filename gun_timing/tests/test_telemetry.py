from __future__ import annotations

import io
import logging

from gun_timing.core.telemetry import LOGGER_NAME, setup_logger


def test_setup_logger_is_idempotent_and_adjusts_level() -> None:
    logger = setup_logger("WARNING", stream=io.StringIO())
    handlers = list(logger.handlers)

    again = setup_logger("debug")

    assert again is logger
    assert again.handlers == handlers
    assert again.level == logging.DEBUG
    assert setup_logger(logging.ERROR).level == logging.ERROR
    assert setup_logger("nonsense").level == logging.INFO
    assert logger.name == LOGGER_NAME
    setup_logger("WARNING")
