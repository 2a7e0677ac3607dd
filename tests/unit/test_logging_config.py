"""
Тесты для Logging

Проверяет:
1. get_logger объединяет контекст адаптера и extra вызова
2. setup_logging идемпотентен (один handler)
"""

import logging

from src.core.logging_config import StructuredLogger, get_logger, setup_logging


class TestGetLogger:
    """Тесты для get_logger"""

    def test_returns_adapter(self):
        logger = get_logger("src.core.test_component")
        assert isinstance(logger, StructuredLogger)
        assert logger.logger.name == "src.core.test_component"

    def test_context_merged_with_call_extra(self, caplog):
        logger = get_logger("src.core.test_component", component="windows")
        with caplog.at_level(logging.INFO, logger="src.core.test_component"):
            logger.info("hello", extra={"size": 3})
        record = caplog.records[-1]
        assert record.component == "windows"
        assert record.size == 3

    def test_call_extra_overrides_context(self, caplog):
        logger = get_logger("src.core.test_component", size=1)
        with caplog.at_level(logging.INFO, logger="src.core.test_component"):
            logger.info("hello", extra={"size": 2})
        assert caplog.records[-1].size == 2


class TestSetupLogging:
    """Тесты для setup_logging"""

    def test_idempotent(self):
        root = setup_logging(logging.WARNING)
        handlers_before = list(root.handlers)
        try:
            setup_logging(logging.DEBUG)
            assert root.handlers == handlers_before
            assert root.level == logging.DEBUG
        finally:
            for handler in handlers_before:
                root.removeHandler(handler)
            root.setLevel(logging.NOTSET)
