"""
Counting — закрытые формулы размеров перечислений

Для домена размера n и длины кортежа p:
    product                        n^p
    permutations                   n! / (n - p)!      (0 при p > n)
    combinations                   C(n, p)            (0 при p > n)
    combinations_with_replacement  C(n + p - 1, p)    (1 при p == 0)

Формулы НЕ ограничивают рост n^p: внутренних лимитов нет, выбор
реалистичных размеров остаётся на вызывающей стороне. EnumerationCost
позволяет оценить транзиентную стоимость до запуска перечисления.
"""

import math
from typing import NamedTuple

from src.core.domain.enumeration import EnumerationVariant, FilterStrategy
from src.core.sequences.preconditions import validate_count


# =============================================================================
# FORMULAS
# =============================================================================


def product_count(n: int, p: int) -> int:
    """
    Examples:
        >>> product_count(4, 2)
        16
        >>> product_count(0, 0)
        1
    """
    validate_count(n, "n")
    validate_count(p, "p")
    return n ** p


def permutations_count(n: int, p: int) -> int:
    """
    Examples:
        >>> permutations_count(4, 2)
        12
        >>> permutations_count(2, 3)
        0
    """
    validate_count(n, "n")
    validate_count(p, "p")
    return math.perm(n, p)


def combinations_count(n: int, p: int) -> int:
    """
    Examples:
        >>> combinations_count(4, 2)
        6
    """
    validate_count(n, "n")
    validate_count(p, "p")
    return math.comb(n, p)


def combinations_with_replacement_count(n: int, p: int) -> int:
    """
    Examples:
        >>> combinations_with_replacement_count(4, 2)
        10
        >>> combinations_with_replacement_count(0, 0)
        1
        >>> combinations_with_replacement_count(0, 2)
        0
    """
    validate_count(n, "n")
    validate_count(p, "p")
    if p == 0:
        return 1
    if n == 0:
        return 0
    return math.comb(n + p - 1, p)


_COUNTERS = {
    EnumerationVariant.PRODUCT: product_count,
    EnumerationVariant.PERMUTATIONS: permutations_count,
    EnumerationVariant.COMBINATIONS: combinations_count,
    EnumerationVariant.COMBINATIONS_WITH_REPLACEMENT: combinations_with_replacement_count,
}


def expected_count(variant: EnumerationVariant, n: int, p: int) -> int:
    """Размер результата варианта variant для домена n и длины p."""
    return _COUNTERS[EnumerationVariant(variant)](n, p)


# =============================================================================
# COST
# =============================================================================


class EnumerationCost(NamedTuple):
    """
    Оценка стоимости перечисления до его запуска.

    materialized_tuples: сколько кортежей полной длины будет построено:
    n^power для EAGER (вся декартова степень до фильтрации),
    output_size для PRUNED (отвергнутые префиксы не достраиваются).
    """
    variant: EnumerationVariant
    domain_size: int
    power: int
    output_size: int
    materialized_tuples: int
    strategy: FilterStrategy


def estimate_cost(
    variant: EnumerationVariant,
    n: int,
    p: int,
    strategy: FilterStrategy = FilterStrategy.PRUNED,
) -> EnumerationCost:
    """
    Оценка стоимости перечисления.

    Examples:
        >>> cost = estimate_cost(EnumerationVariant.COMBINATIONS, 4, 2, FilterStrategy.EAGER)
        >>> (cost.output_size, cost.materialized_tuples)
        (6, 16)
    """
    variant = EnumerationVariant(variant)
    strategy = FilterStrategy(strategy)

    output_size = expected_count(variant, n, p)
    if strategy == FilterStrategy.EAGER or variant == EnumerationVariant.PRODUCT:
        materialized = product_count(n, p)
    else:
        materialized = output_size

    return EnumerationCost(
        variant=variant,
        domain_size=n,
        power=p,
        output_size=output_size,
        materialized_tuples=materialized,
        strategy=strategy,
    )
