"""
Тесты для настройки логирования
"""

import logging

from src.core.logging import LOG_FORMAT, get_logger, setup_logging


class TestLogging:
    """setup_logging / get_logger."""

    def test_get_logger(self):
        logger = get_logger("src.slippage.validator")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "src.slippage.validator"

    def test_setup_logging_quiets_jsonschema(self):
        setup_logging("DEBUG")
        assert logging.getLogger("jsonschema").level == logging.WARNING

    def test_log_format(self):
        assert "%(name)s" in LOG_FORMAT
        assert "%(levelname)-8s" in LOG_FORMAT
