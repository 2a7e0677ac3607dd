"""
Preconditions — проверки аргументов для sequence-операций

Модуль фиксирует единственный фатальный класс ошибок движка: нарушение
предусловия вызова. Количества (amount, n, power, min_size, length)
являются беззнаковыми целыми; отрицательные значения и нулевая длина окна
в infixes отвергаются сразу, до начала построения результата.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нарушение предусловия → PreconditionViolation (подкласс ValueError)
2. Нецелое значение (включая bool) → TypeError
3. Вырожденные, но валидные входы (n == 0, power > n) НЕ являются ошибкой
"""


class PreconditionViolation(ValueError):
    """
    Нарушение предусловия вызова (не восстанавливаемо, не ретраится).

    Примеры:
    - infixes(0, xs): длина окна должна быть > 0
    - repeat(-1, xs): количество повторов должно быть >= 0
    """
    pass


def _require_int(value: int, name: str) -> None:
    # bool является подклассом int, но как счётчик не допускается
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_count(value: int, name: str) -> None:
    """
    Валидация беззнакового счётчика (value >= 0).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int
        PreconditionViolation: Если value < 0
    """
    _require_int(value, name)

    if value < 0:
        raise PreconditionViolation(f"{name} must be non-negative, got {value}")


def validate_positive_count(value: int, name: str) -> None:
    """
    Валидация строго положительного счётчика (value > 0).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int
        PreconditionViolation: Если value <= 0
    """
    _require_int(value, name)

    if value <= 0:
        raise PreconditionViolation(f"{name} must be positive, got {value}")
