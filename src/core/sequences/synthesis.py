"""
Sequence Synthesis — построение последовательностей

Примитивы:
- generate(f, amount)         == [f(), f(), ..., f()]
- generate_by_idx(f, amount)  == [f(0), f(1), ..., f(amount - 1)]
- repeat(n, xs)               == xs + xs + ... (n раз)
- replicate(n, x)             == [x, x, ..., x] (n раз)
- fill_left / fill_right      == дополнение до min_size слева/справа

ИНВАРИАНТЫ:
1. Генераторы вызываются синхронно, строго в порядке 0..amount-1,
   без memoization (каждый вызов независим)
2. len(repeat(n, xs)) == n * len(xs); n == 0 → пустой результат
3. fill_*: len(result) == max(min_size, len(xs)); xs сохраняется
   непрерывным суффиксом (fill_left) или префиксом (fill_right)
"""

from collections.abc import Iterable
from typing import Any, Callable

from src.core.sequences.containers import Builder, as_indexable, builder_for, concat
from src.core.sequences.preconditions import PreconditionViolation, validate_count


# =============================================================================
# GENERATE
# =============================================================================


def generate(f: Callable[[], Any], amount: int, into: Builder = list) -> Any:
    """
    Вызов нуль-арного генератора amount раз.

    Args:
        f: Генератор без аргументов
        amount: Количество вызовов (>= 0)
        into: Конструктор выходного контейнера (default: list)

    Returns:
        [f(), f(), ..., f()] в порядке вызовов

    Raises:
        PreconditionViolation: Если amount < 0

    Examples:
        >>> generate(lambda: 7, 3)
        [7, 7, 7]
    """
    validate_count(amount, "amount")

    ys = []
    for _ in range(amount):
        ys.append(f())
    return into(ys)


def generate_by_idx(f: Callable[[int], Any], amount: int, into: Builder = list) -> Any:
    """
    Вызов генератора с индексом: f(0), f(1), ..., f(amount - 1).

    Аргумент f всегда неотрицательный int (предусловие на стороне f,
    во время выполнения не проверяется).

    Examples:
        >>> generate_by_idx(lambda i: i * i, 4)
        [0, 1, 4, 9]
    """
    validate_count(amount, "amount")

    ys = []
    for i in range(amount):
        ys.append(f(i))
    return into(ys)


# =============================================================================
# REPEAT / REPLICATE
# =============================================================================


def repeat(n: int, xs: Iterable[Any]) -> Any:
    """
    n последовательных копий xs в контейнере того же вида.

    Examples:
        >>> repeat(3, [1, 2])
        [1, 2, 1, 2, 1, 2]
        >>> repeat(2, "ab")
        'abab'
        >>> repeat(0, [1, 2])
        []
    """
    validate_count(n, "n")

    xs_idx = as_indexable(xs)
    return concat([xs_idx] * n, like=xs)


def replicate(n: int, x: Any, into: Builder = list) -> Any:
    """
    Ровно n копий значения x.

    Examples:
        >>> replicate(3, 1)
        [1, 1, 1]
        >>> replicate(2, "a", into="".join)
        'aa'
    """
    validate_count(n, "n")

    return into([x] * n)


# =============================================================================
# FILL
# =============================================================================


def _validate_fill_value(x: Any, xs: Iterable[Any]) -> None:
    # str/bytes хранят элементы, а не произвольные значения:
    # x должен быть ровно одним символом (str) или байтом (bytes)
    if isinstance(xs, str):
        if not isinstance(x, str) or len(x) != 1:
            raise PreconditionViolation(
                f"fill value for str must be a single character, got {x!r}"
            )
    elif isinstance(xs, (bytes, bytearray)):
        if isinstance(x, bool) or not isinstance(x, int) or not 0 <= x <= 255:
            raise PreconditionViolation(
                f"fill value for bytes must be an int in [0, 255], got {x!r}"
            )


def fill_left(x: Any, min_size: int, xs: Iterable[Any]) -> Any:
    """
    Дополнение xs слева копиями x до длины min_size.

    Если len(xs) >= min_size, xs возвращается без изменений.
    Для str x должен быть одним символом, для bytes: int в [0, 255].

    Examples:
        >>> fill_left(0, 6, [1, 2, 3, 4])
        [0, 0, 1, 2, 3, 4]
        >>> fill_left(0, 2, [1, 2, 3])
        [1, 2, 3]
    """
    validate_count(min_size, "min_size")
    _validate_fill_value(x, xs)

    xs_idx = as_indexable(xs)
    if min_size <= len(xs_idx):
        return xs_idx if xs_idx is xs else builder_for(xs)(xs_idx)
    return concat([[x] * (min_size - len(xs_idx)), xs_idx], like=xs)


def fill_right(x: Any, min_size: int, xs: Iterable[Any]) -> Any:
    """
    Дополнение xs справа копиями x до длины min_size.

    Examples:
        >>> fill_right(0, 6, [1, 2, 3, 4])
        [1, 2, 3, 4, 0, 0]
        >>> fill_right(" ", 4, "ab")
        'ab  '
    """
    validate_count(min_size, "min_size")
    _validate_fill_value(x, xs)

    xs_idx = as_indexable(xs)
    if min_size <= len(xs_idx):
        return xs_idx if xs_idx is xs else builder_for(xs)(xs_idx)
    return concat([xs_idx, [x] * (min_size - len(xs_idx))], like=xs)
