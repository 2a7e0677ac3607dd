"""
Тесты для Index Filters

Проверяет:
1. all_unique / is_strictly_sorted / is_sorted на типовых кортежах
2. Пустой кортеж и синглтон проходят все предикаты
3. Prefix-closed свойство
4. keep_if сохраняет порядок
"""

import itertools

import pytest

from src.core.combinatorics import all_unique, is_sorted, is_strictly_sorted, keep_if


class TestAllUnique:
    """Тесты для all_unique"""

    def test_distinct(self) -> None:
        assert all_unique((3, 0, 2))

    def test_repeated(self) -> None:
        assert not all_unique((1, 2, 1))

    def test_adjacent_repeat(self) -> None:
        assert not all_unique([4, 4])


class TestIsStrictlySorted:
    """Тесты для is_strictly_sorted"""

    def test_increasing(self) -> None:
        assert is_strictly_sorted((0, 2, 5))

    def test_equal_neighbours_rejected(self) -> None:
        assert not is_strictly_sorted((0, 2, 2))

    def test_decreasing_rejected(self) -> None:
        assert not is_strictly_sorted((1, 0))


class TestIsSorted:
    """Тесты для is_sorted"""

    def test_non_decreasing(self) -> None:
        assert is_sorted((0, 0, 1, 3, 3))

    def test_decreasing_rejected(self) -> None:
        assert not is_sorted((0, 2, 1))


class TestPredicateProperties:
    """Общие свойства предикатов"""

    @pytest.mark.parametrize("pred", [all_unique, is_sorted, is_strictly_sorted])
    def test_trivial_tuples_pass(self, pred) -> None:
        """Пустой кортеж и синглтон проходят"""
        assert pred(())
        assert pred((7,))

    @pytest.mark.parametrize("pred", [all_unique, is_sorted, is_strictly_sorted])
    def test_prefix_closed(self, pred) -> None:
        """Если кортеж проходит, проходит и любой его префикс"""
        for idxs in itertools.product(range(3), repeat=3):
            if pred(idxs):
                for k in range(len(idxs)):
                    assert pred(idxs[:k])

    def test_strict_implies_sorted_and_unique(self) -> None:
        """is_strictly_sorted ⇒ is_sorted и all_unique"""
        for idxs in itertools.product(range(3), repeat=3):
            if is_strictly_sorted(idxs):
                assert is_sorted(idxs)
                assert all_unique(idxs)


class TestKeepIf:
    """Тесты для keep_if"""

    def test_preserves_order(self) -> None:
        assert keep_if(lambda x: x % 2 == 0, [4, 1, 2, 3, 0]) == [4, 2, 0]

    def test_empty(self) -> None:
        assert keep_if(bool, []) == []
