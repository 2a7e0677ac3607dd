"""
Cartesian Power — перечисление индексных кортежей

Строит все кортежи длины power над доменом индексов [0, n):

    product_idxs(2, [0, 1, 2]) ==
        (0,0) (0,1) (0,2) (1,0) (1,1) (1,2) (2,0) (2,1) (2,2)

ПОРЯДОК (воспроизводится побитово, от него зависят все варианты):
    Начинаем с синглтонов (x,) в порядке домена. Шаг k → k+1: для каждого
    кортежа a (в текущем порядке) порождаем n новых, дописывая каждый индекс
    домена (в порядке домена). Итог: лексикографический порядок, старшая
    позиция меняется медленнее всех.

Две реализации одного порядка:
- product_idxs: итеративное удвоение по одному измерению (eager, n^power)
- iter_product_idxs: одометр (mixed-radix counter) с опциональным
  отсечением префиксов; при prefix-closed предикате отвергнутый префикс
  пропускается вместе со всем поддеревом

СОГЛАШЕНИЕ power == 0: ровно один пустой кортеж () (n^0 == 1).
"""

from collections.abc import Iterator, Sequence
from typing import Callable, Optional

from src.core.sequences.preconditions import validate_count

IndexTuple = tuple[int, ...]
PrefixPredicate = Callable[[Sequence[int]], bool]


def product_idxs(power: int, idxs: Sequence[int]) -> list[IndexTuple]:
    """
    Полная декартова степень домена idxs (все len(idxs)^power кортежей).

    Args:
        power: Длина кортежа (>= 0)
        idxs: Домен индексов в порядке перечисления

    Returns:
        Список кортежей в лексикографическом порядке домена

    Raises:
        PreconditionViolation: Если power < 0

    Examples:
        >>> product_idxs(2, [0, 1])
        [(0, 0), (0, 1), (1, 0), (1, 1)]
        >>> product_idxs(0, [0, 1])
        [()]
    """
    validate_count(power, "power")

    if power == 0:
        return [()]

    acc: list[IndexTuple] = [(x,) for x in idxs]
    for _ in range(power - 1):
        acc = [a + (x,) for a in acc for x in idxs]
    return acc


def iter_product_idxs(
    power: int,
    domain_size: int,
    prefix_ok: Optional[PrefixPredicate] = None,
) -> Iterator[IndexTuple]:
    """
    Одометр по домену [0, domain_size) в порядке product_idxs.

    Если задан prefix_ok, он вызывается для каждого нового префикса.
    Отвергнутый префикс не расширяется: для prefix-closed предиката
    (all_unique, is_sorted, is_strictly_sorted) результат совпадает с
    keep_if(prefix_ok, product_idxs(...)), но без материализации n^power.

    Examples:
        >>> list(iter_product_idxs(2, 2))
        [(0, 0), (0, 1), (1, 0), (1, 1)]
        >>> from src.core.combinatorics.index_filters import is_strictly_sorted
        >>> list(iter_product_idxs(2, 3, is_strictly_sorted))
        [(0, 1), (0, 2), (1, 2)]
    """
    validate_count(power, "power")
    validate_count(domain_size, "domain_size")

    if power == 0:
        yield ()
        return

    digits: list[int] = []
    candidate = 0
    while True:
        if candidate < domain_size:
            digits.append(candidate)
            if prefix_ok is not None and not prefix_ok(digits):
                # префикс отвергнут: следующий кандидат на той же позиции
                candidate = digits.pop() + 1
            elif len(digits) == power:
                yield tuple(digits)
                candidate = digits.pop() + 1
            else:
                candidate = 0
        else:
            # перенос в старший разряд
            if not digits:
                return
            candidate = digits.pop() + 1
