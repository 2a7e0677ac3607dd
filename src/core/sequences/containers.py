"""
Containers — минимальная capability-прослойка над последовательностями

Движок не определяет собственных контейнеров. Вместо этого он опирается на
три возможности входной последовательности:
- размер и доступ по индексу (collections.abc.Sequence)
- построение контейнера "такого же вида" из списка элементов
- конкатенация

Любой Iterable приводится к индексируемой форме один раз (as_indexable).
Выходной контейнер выбирается явным шагом "build into" (параметр into/inner
у операций), а не типом входа.
"""

from collections.abc import Iterable, Sequence
from typing import Any, Callable

Builder = Callable[[Iterable[Any]], Any]


def as_indexable(xs: Iterable[Any]) -> Sequence[Any]:
    """
    Индексируемая форма входа.

    Sequence возвращается как есть (без копирования), остальные Iterable
    материализуются в list за один проход.

    Examples:
        >>> as_indexable([1, 2]) == [1, 2]
        True
        >>> as_indexable(x for x in "ab")
        ['a', 'b']
    """
    if isinstance(xs, Sequence):
        return xs
    return list(xs)


def _join_str(elems: Iterable[Any]) -> str:
    return "".join(elems)


def builder_for(xs: Any) -> Builder:
    """
    Конструктор контейнера того же вида, что и xs.

    str → "".join, bytes → bytes, list → list, tuple → tuple,
    всё остальное (range, генераторы, пользовательские Sequence) → tuple.

    Examples:
        >>> builder_for("AB")(["B", "A"])
        'BA'
        >>> builder_for([1])((2, 3))
        [2, 3]
        >>> builder_for(range(3))([0, 1])
        (0, 1)
    """
    if isinstance(xs, str):
        return _join_str
    if isinstance(xs, (bytes, bytearray)):
        return type(xs)
    if isinstance(xs, list):
        return list
    return tuple


def elems_at_idxs(idxs: Iterable[int], xs: Sequence[Any]) -> list[Any]:
    """
    Элементы xs по индексам idxs (в порядке idxs).

    Examples:
        >>> elems_at_idxs((2, 0), "abc")
        ['c', 'a']
    """
    return [xs[i] for i in idxs]


def concat(xss: Iterable[Iterable[Any]], like: Any) -> Any:
    """
    Конкатенация последовательностей в контейнер вида like.

    Examples:
        >>> concat([[1], [2, 3]], like=[])
        [1, 2, 3]
        >>> concat(["ab", "c"], like="")
        'abc'
    """
    build = builder_for(like)
    return build(x for xs in xss for x in xs)
