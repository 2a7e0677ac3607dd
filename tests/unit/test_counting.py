"""
Тесты для Counting

Проверяет:
1. Закрытые формулы против фактического перечисления
2. Граничные случаи (n == 0, p == 0, p > n)
3. EnumerationCost для EAGER и PRUNED
4. Отсутствие внутренних ограничений на рост n^p
"""

import math

import pytest

from src.core.combinatorics import (
    EnumerationCost,
    combinations_count,
    combinations_with_replacement_count,
    estimate_cost,
    expected_count,
    permutations_count,
    product,
    product_count,
)
from src.core.domain import EnumerationVariant, FilterStrategy
from src.core.sequences import PreconditionViolation


class TestFormulas:
    """Тесты закрытых формул"""

    def test_reference_values(self) -> None:
        """Значения для домена из 4 элементов, p=2"""
        assert product_count(4, 2) == 16
        assert permutations_count(4, 2) == 12
        assert combinations_count(4, 2) == 6
        assert combinations_with_replacement_count(4, 2) == 10

    def test_power_greater_than_n(self) -> None:
        """p > n → 0 для перестановок и сочетаний"""
        assert permutations_count(3, 4) == 0
        assert combinations_count(3, 4) == 0
        assert combinations_with_replacement_count(3, 4) == 15

    def test_power_zero(self) -> None:
        """p == 0 → ровно один (пустой) кортеж для всех вариантов"""
        for n in range(4):
            for variant in EnumerationVariant:
                assert expected_count(variant, n, 0) == 1

    def test_empty_domain(self) -> None:
        """n == 0, p > 0 → 0 для всех вариантов"""
        for variant in EnumerationVariant:
            assert expected_count(variant, 0, 2) == 0

    def test_permutations_factorial_ratio(self) -> None:
        """n! / (n - p)!"""
        for n in range(7):
            for p in range(n + 1):
                assert permutations_count(n, p) == math.factorial(n) // math.factorial(n - p)

    def test_no_internal_bound(self) -> None:
        """Большие значения считаются без ограничений"""
        assert product_count(100, 50) == 100 ** 50

    def test_expected_count_accepts_string_variant(self) -> None:
        assert expected_count("combinations", 5, 2) == 10

    def test_negative_raises(self) -> None:
        with pytest.raises(PreconditionViolation, match="p must be non-negative"):
            product_count(3, -1)
        with pytest.raises(PreconditionViolation, match="n must be non-negative"):
            combinations_count(-3, 1)

    @pytest.mark.parametrize("n", [1, 3, 5])
    @pytest.mark.parametrize("p", [1, 2, 3])
    def test_product_matches_enumeration(self, n, p) -> None:
        """Формула n^p совпадает с фактическим размером product"""
        assert product_count(n, p) == len(product(p, range(n)))


class TestEstimateCost:
    """Тесты для estimate_cost"""

    def test_eager_materializes_full_power(self) -> None:
        cost = estimate_cost(EnumerationVariant.COMBINATIONS, 5, 3, FilterStrategy.EAGER)
        assert isinstance(cost, EnumerationCost)
        assert cost.output_size == 10
        assert cost.materialized_tuples == 125

    def test_pruned_materializes_output_only(self) -> None:
        cost = estimate_cost(EnumerationVariant.COMBINATIONS, 5, 3, FilterStrategy.PRUNED)
        assert cost.output_size == 10
        assert cost.materialized_tuples == 10

    def test_product_same_for_both_strategies(self) -> None:
        for strategy in FilterStrategy:
            cost = estimate_cost("product", 3, 2, strategy)
            assert cost.output_size == cost.materialized_tuples == 9

    def test_default_strategy_is_pruned(self) -> None:
        assert estimate_cost("permutations", 4, 2).strategy == FilterStrategy.PRUNED

    def test_fields(self) -> None:
        cost = estimate_cost("permutations", 4, 2, "eager")
        assert cost.variant == EnumerationVariant.PERMUTATIONS
        assert cost.domain_size == 4
        assert cost.power == 2
        assert cost.strategy == FilterStrategy.EAGER
