"""
Windows — скользящие окна фиксированной длины

infixes(3, [1, 2, 3, 4, 5, 6]) == [[1, 2, 3], [2, 3, 4], [3, 4, 5], [4, 5, 6]]

ИНВАРИАНТЫ:
1. length == 0 → PreconditionViolation
2. len(xs) < length → пустой результат
3. Иначе ровно len(xs) - length + 1 окон, окно i == xs[i:i + length],
   окна упорядочены по возрастанию i
"""

from collections.abc import Iterable
from typing import Any

from src.core.sequences.containers import Builder, as_indexable, builder_for
from src.core.sequences.preconditions import validate_positive_count


def infixes(length: int, xs: Iterable[Any], into: Builder = list) -> Any:
    """
    Все непрерывные подпоследовательности длины length.

    Окна строятся в контейнере того же вида, что и xs
    (str → str, list → list, прочее → tuple).

    Args:
        length: Длина окна (> 0)
        xs: Исходная последовательность
        into: Конструктор внешнего контейнера (default: list)

    Returns:
        Окна в порядке возрастания начального индекса

    Raises:
        PreconditionViolation: Если length == 0 (или < 0)

    Examples:
        >>> infixes(2, "abc")
        ['ab', 'bc']
        >>> infixes(4, [1, 2])
        []
    """
    validate_positive_count(length, "length")

    xs_idx = as_indexable(xs)
    size = len(xs_idx)
    if size < length:
        return into([])

    build = builder_for(xs)
    windows = []
    for idx in range(size - length + 1):
        windows.append(build(xs_idx[idx:idx + length]))
    return into(windows)
