"""
Index Filters — предикаты над индексными кортежами

- all_unique:          все значения попарно различны      (permutations)
- is_strictly_sorted:  каждое значение > предыдущего      (combinations)
- is_sorted:           каждое значение >= предыдущего     (with replacement)

Все три предиката prefix-closed: если префикс не проходит, не пройдёт и
любое его расширение. На этом основано отсечение в iter_product_idxs.
Пустой кортеж и синглтон проходят все три.
"""

from collections.abc import Iterable, Sequence
from typing import Callable, TypeVar

T = TypeVar("T")


def all_unique(idxs: Sequence[int]) -> bool:
    """
    Examples:
        >>> all_unique((0, 2, 1))
        True
        >>> all_unique((0, 2, 0))
        False
    """
    return len(set(idxs)) == len(idxs)


def is_strictly_sorted(idxs: Sequence[int]) -> bool:
    """
    Examples:
        >>> is_strictly_sorted((0, 1, 3))
        True
        >>> is_strictly_sorted((0, 1, 1))
        False
    """
    return all(a < b for a, b in zip(idxs, idxs[1:]))


def is_sorted(idxs: Sequence[int]) -> bool:
    """
    Examples:
        >>> is_sorted((0, 1, 1))
        True
        >>> is_sorted((1, 0))
        False
    """
    return all(a <= b for a, b in zip(idxs, idxs[1:]))


def keep_if(pred: Callable[[T], bool], xs: Iterable[T]) -> list[T]:
    """Элементы xs, удовлетворяющие pred, с сохранением порядка."""
    return [x for x in xs if pred(x)]
