"""
Enumerators — декартова степень, перестановки и сочетания элементов

    product(2, "ABCD")                       == AA AB AC AD BA BB ... DC DD
    permutations(2, "ABCD")                  == AB AC AD BA BC BD CA CB CD DA DB DC
    combinations(2, "ABCD")                  == AB AC AD BC BD CD
    combinations_with_replacement(2, "ABCD") == AA AB AC AD BB BC BD CC CD DD

Поток данных:
    элементы → домен [0, n) → индексные кортежи (cartesian_power)
    → фильтр (index_filters) → кортежи элементов через xs[i]

ИНВАРИАНТЫ:
1. Порядок результата == порядок product_idxs; фильтр сохраняет
   относительный порядок выживших кортежей
2. Размеры: n^p, n!/(n-p)!, C(n, p), C(n+p-1, p) (см. counting)
3. power > n для permutations/combinations → пустой результат, не ошибка
4. power == 0 → ровно один пустой кортеж элементов
5. Внутренних ограничений на n^power нет

Результат всегда полностью материализован (eager). Стратегия фильтрации
(EnumerationConfig.strategy) влияет только на транзиентную стоимость.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, NamedTuple, Optional

from src.core.combinatorics.cartesian_power import (
    IndexTuple,
    PrefixPredicate,
    iter_product_idxs,
    product_idxs,
)
from src.core.combinatorics.counting import estimate_cost
from src.core.combinatorics.index_filters import (
    all_unique,
    is_sorted,
    is_strictly_sorted,
    keep_if,
)
from src.core.contracts.validators import (
    EnumerationSummaryValidator,
    parse_enumeration_request,
)
from src.core.domain.enumeration import (
    EnumerationRequest,
    EnumerationSummary,
    EnumerationVariant,
    FilterStrategy,
)
from src.core.logging_config import get_logger
from src.core.sequences.containers import Builder, as_indexable, builder_for, elems_at_idxs
from src.core.sequences.preconditions import PreconditionViolation, validate_count

logger = get_logger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EnumerationConfig:
    """Конфигурация Enumerator.

    Параметры стратегии фильтрации и порога логирования.
    """

    # Фильтрация во время генерации (PRUNED) или после неё (EAGER)
    strategy: FilterStrategy = FilterStrategy.PRUNED

    # Порог материализованных кортежей, выше которого сводка пишется в INFO
    log_threshold: int = 100_000

    def __post_init__(self):
        # допускается строковое значение ("eager" / "pruned")
        object.__setattr__(self, "strategy", FilterStrategy(self.strategy))


class EnumerationRun(NamedTuple):
    """Результат Enumerator.run: кортежи элементов и проверенная сводка."""
    result: Any
    summary: EnumerationSummary


# Фильтр индексных кортежей для каждого варианта (None: без фильтра)
_VARIANT_FILTERS: dict[EnumerationVariant, Optional[PrefixPredicate]] = {
    EnumerationVariant.PRODUCT: None,
    EnumerationVariant.PERMUTATIONS: all_unique,
    EnumerationVariant.COMBINATIONS: is_strictly_sorted,
    EnumerationVariant.COMBINATIONS_WITH_REPLACEMENT: is_sorted,
}


# =============================================================================
# ENUMERATOR
# =============================================================================


class Enumerator:
    """Комбинаторный перечислитель над произвольной последовательностью.

    Все методы принимают любой Iterable: вход один раз приводится к
    индексируемой форме. Внутренний контейнер кортежа по умолчанию того же
    вида, что и вход (str → str, list → list, прочее → tuple); внешний list.

    Состояния между вызовами нет: экземпляр безопасно разделять между
    потоками.
    """

    def __init__(self, config: EnumerationConfig | None = None):
        """Инициализация Enumerator.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or EnumerationConfig()

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def product(
        self,
        power: int,
        xs: Iterable[Any],
        inner: Builder | None = None,
        into: Builder = list,
    ) -> Any:
        """Декартова степень: все len(xs)^power кортежей элементов.

        Examples:
            >>> Enumerator().product(2, "AB")
            ['AA', 'AB', 'BA', 'BB']
        """
        return self.enumerate(EnumerationVariant.PRODUCT, power, xs, inner=inner, into=into)

    def permutations(
        self,
        power: int,
        xs: Iterable[Any],
        inner: Builder | None = None,
        into: Builder = list,
    ) -> Any:
        """Кортежи с попарно различными индексами элементов.

        Examples:
            >>> Enumerator().permutations(2, [1, 2, 3])
            [[1, 2], [1, 3], [2, 1], [2, 3], [3, 1], [3, 2]]
        """
        return self.enumerate(EnumerationVariant.PERMUTATIONS, power, xs, inner=inner, into=into)

    def combinations(
        self,
        power: int,
        xs: Iterable[Any],
        inner: Builder | None = None,
        into: Builder = list,
    ) -> Any:
        """Кортежи со строго возрастающими индексами элементов.

        Examples:
            >>> Enumerator().combinations(2, (1, 2, 3))
            [(1, 2), (1, 3), (2, 3)]
        """
        return self.enumerate(EnumerationVariant.COMBINATIONS, power, xs, inner=inner, into=into)

    def combinations_with_replacement(
        self,
        power: int,
        xs: Iterable[Any],
        inner: Builder | None = None,
        into: Builder = list,
    ) -> Any:
        """Кортежи с неубывающими индексами элементов.

        Examples:
            >>> Enumerator().combinations_with_replacement(2, "AB")
            ['AA', 'AB', 'BB']
        """
        return self.enumerate(
            EnumerationVariant.COMBINATIONS_WITH_REPLACEMENT, power, xs, inner=inner, into=into
        )

    def enumerate(
        self,
        variant: EnumerationVariant,
        power: int,
        xs: Iterable[Any],
        inner: Builder | None = None,
        into: Builder = list,
    ) -> Any:
        """Перечисление варианта variant.

        Args:
            variant: вариант перечисления
            power: длина кортежа (>= 0)
            xs: элементы домена (в порядке домена)
            inner: конструктор кортежа элементов (default: вид xs)
            into: конструктор внешнего контейнера (default: list)

        Returns:
            Кортежи элементов в порядке перечисления

        Raises:
            PreconditionViolation: если power < 0
            ValueError: если variant неизвестен
        """
        variant = EnumerationVariant(variant)
        validate_count(power, "power")

        xs_idx = as_indexable(xs)
        result = self._materialize(variant, power, xs_idx, inner or builder_for(xs))
        return into(result)

    def run(
        self,
        request: EnumerationRequest | Mapping[str, Any],
        xs: Iterable[Any],
        inner: Builder | None = None,
        into: Builder = list,
    ) -> EnumerationRun:
        """Перечисление по запросу с проверенной сводкой.

        Payload-словарь сначала проверяется контрактом enumeration_request,
        сводка перед возвратом проверяется контрактом enumeration_summary.

        Args:
            request: EnumerationRequest или JSON payload запроса
            xs: элементы домена; len(xs) должен совпадать с request.domain_size
            inner: конструктор кортежа элементов (default: вид xs)
            into: конструктор внешнего контейнера (default: list)

        Returns:
            EnumerationRun(result, summary)

        Raises:
            ValidationError (jsonschema): payload нарушает контракт
            PreconditionViolation: domain_size не совпадает с len(xs)
        """
        request = parse_enumeration_request(request)

        xs_idx = as_indexable(xs)
        if len(xs_idx) != request.domain_size:
            raise PreconditionViolation(
                f"request domain_size {request.domain_size} does not match "
                f"len(xs) {len(xs_idx)}"
            )

        result = self._materialize(
            request.variant, request.power, xs_idx, inner or builder_for(xs)
        )
        cost = estimate_cost(
            request.variant, request.domain_size, request.power, self.config.strategy
        )
        summary = EnumerationSummary(
            variant=request.variant,
            strategy=self.config.strategy,
            power=request.power,
            domain_size=request.domain_size,
            result_size=len(result),
            materialized_tuples=cost.materialized_tuples,
        )
        EnumerationSummaryValidator().validate_model(summary)
        return EnumerationRun(result=into(result), summary=summary)

    def describe(self, variant: EnumerationVariant, power: int, domain_size: int) -> EnumerationSummary:
        """Сводка перечисления по формулам, без материализации.

        Examples:
            >>> Enumerator().describe("combinations", 2, 4).result_size
            6
        """
        cost = estimate_cost(variant, domain_size, power, self.config.strategy)
        summary = EnumerationSummary(
            variant=cost.variant,
            strategy=cost.strategy,
            power=cost.power,
            domain_size=cost.domain_size,
            result_size=cost.output_size,
            materialized_tuples=cost.materialized_tuples,
        )
        EnumerationSummaryValidator().validate_model(summary)
        return summary

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _materialize(
        self, variant: EnumerationVariant, power: int, xs: Sequence[Any], build: Builder
    ) -> list[Any]:
        """Кортежи элементов варианта (list, до шага into)."""
        result_idxss = self._index_tuples(variant, power, len(xs))
        result = [build(elems_at_idxs(idxs, xs)) for idxs in result_idxss]

        self._log_summary(variant, power, len(xs), len(result))
        return result

    def _index_tuples(self, variant: EnumerationVariant, power: int, n: int) -> list[IndexTuple]:
        """Индексные кортежи варианта в порядке product_idxs."""
        pred = _VARIANT_FILTERS[variant]

        if self.config.strategy == FilterStrategy.EAGER:
            idxss = product_idxs(power, range(n))
            return idxss if pred is None else keep_if(pred, idxss)

        return list(iter_product_idxs(power, n, pred))

    def _log_summary(self, variant: EnumerationVariant, power: int, n: int, result_size: int) -> None:
        cost = estimate_cost(variant, n, power, self.config.strategy)
        extra = {
            "variant": variant.value,
            "strategy": self.config.strategy.value,
            "power": power,
            "domain_size": n,
            "result_size": result_size,
            "materialized_tuples": cost.materialized_tuples,
        }
        if cost.materialized_tuples > self.config.log_threshold:
            logger.info(
                "Large enumeration: %s n=%d power=%d materialized=%d result=%d",
                variant.value, n, power, cost.materialized_tuples, result_size,
                extra=extra,
            )
        else:
            logger.debug(
                "Enumeration done: %s result=%d", variant.value, result_size, extra=extra
            )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_DEFAULT_ENUMERATOR = Enumerator()


def product(power: int, xs: Iterable[Any], inner: Builder | None = None, into: Builder = list) -> Any:
    """product(2, "ABCD") == AA AB AC AD BA BB BC BD CA CB CC CD DA DB DC DD"""
    return _DEFAULT_ENUMERATOR.product(power, xs, inner=inner, into=into)


def permutations(power: int, xs: Iterable[Any], inner: Builder | None = None, into: Builder = list) -> Any:
    """permutations(2, "ABCD") == AB AC AD BA BC BD CA CB CD DA DB DC"""
    return _DEFAULT_ENUMERATOR.permutations(power, xs, inner=inner, into=into)


def combinations(power: int, xs: Iterable[Any], inner: Builder | None = None, into: Builder = list) -> Any:
    """combinations(2, "ABCD") == AB AC AD BC BD CD"""
    return _DEFAULT_ENUMERATOR.combinations(power, xs, inner=inner, into=into)


def combinations_with_replacement(
    power: int, xs: Iterable[Any], inner: Builder | None = None, into: Builder = list
) -> Any:
    """combinations_with_replacement(2, "ABCD") == AA AB AC AD BB BC BD CC CD DD"""
    return _DEFAULT_ENUMERATOR.combinations_with_replacement(power, xs, inner=inner, into=into)
