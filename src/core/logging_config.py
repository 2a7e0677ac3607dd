"""
Logging — единая точка получения логгеров

Библиотечный код не устанавливает handlers при импорте: только
get_logger(__name__). Приложение (или тесты) вызывает setup_logging один раз.

Использование:
    from src.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("enumeration done", extra={"variant": "product", "result_size": 16})
"""

import logging
from collections.abc import MutableMapping
from typing import Any

DEFAULT_LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_LOG_LEVEL: int = logging.INFO

_ROOT_LOGGER_NAME = "src.core"


class StructuredLogger(logging.LoggerAdapter):
    """
    LoggerAdapter, объединяющий контекст адаптера с extra конкретного вызова.

    Ключи extra вызова имеют приоритет над контекстом адаптера.
    """

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(self.extra or {})
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str, **context: Any) -> StructuredLogger:
    """
    Структурированный логгер компонента.

    Args:
        name: Имя компонента (обычно __name__)
        **context: Постоянный контекст, добавляемый к каждой записи

    Returns:
        StructuredLogger поверх logging.getLogger(name)
    """
    return StructuredLogger(logging.getLogger(name), context)


def setup_logging(level: int = DEFAULT_LOG_LEVEL, fmt: str = DEFAULT_LOG_FORMAT) -> logging.Logger:
    """
    Настройка stream handler для пакетного логгера (идемпотентно).

    Повторный вызов меняет только уровень, второй handler не добавляется.
    """
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(level)

    if not any(getattr(h, "_core_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        handler._core_handler = True
        root.addHandler(handler)

    return root
