"""
Enumeration — модели запроса и сводки комбинаторного перечисления

Immutable Pydantic модели, описывающие перечисление без его результата:
- EnumerationRequest: что перечисляем (вариант, power, размер домена)
- EnumerationSummary: что получилось (размер результата, стоимость)

Полная совместимость с JSON Schema (contracts/schema/enumeration_*.json).
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class EnumerationVariant(str, Enum):
    """Вариант комбинаторного перечисления"""

    PRODUCT = "product"
    PERMUTATIONS = "permutations"
    COMBINATIONS = "combinations"
    COMBINATIONS_WITH_REPLACEMENT = "combinations_with_replacement"


class FilterStrategy(str, Enum):
    """
    Стратегия фильтрации индексных кортежей.

    EAGER: материализовать всю декартову степень n^power, затем фильтровать
    PRUNED: фильтровать во время генерации, отсекая отвергнутые префиксы

    Обе стратегии дают одинаковый результат в одинаковом порядке.
    """

    EAGER = "eager"
    PRUNED = "pruned"


# =============================================================================
# REQUEST
# =============================================================================


class EnumerationRequest(BaseModel):
    """
    Запрос на перечисление.

    power и domain_size беззнаковые; power > domain_size допустим
    (вырожденный, но валидный случай).
    """

    schema_version: str = Field("1", pattern="^1$", description="Версия схемы")
    variant: EnumerationVariant = Field(..., description="Вариант перечисления")
    power: int = Field(..., ge=0, description="Длина кортежа")
    domain_size: int = Field(..., ge=0, description="Размер домена n")

    model_config = {"frozen": True}

    def expected_size(self) -> int:
        """Размер результата по закрытой формуле (без перечисления)."""
        # локальный импорт: counting зависит от этого модуля
        from src.core.combinatorics.counting import expected_count

        return expected_count(self.variant, self.domain_size, self.power)


# =============================================================================
# SUMMARY
# =============================================================================


class EnumerationSummary(BaseModel):
    """
    Сводка выполненного (или оценённого) перечисления.

    materialized_tuples: количество построенных кортежей полной длины:
    n^power для EAGER, result_size для PRUNED.
    """

    schema_version: str = Field("1", pattern="^1$", description="Версия схемы")
    variant: EnumerationVariant = Field(..., description="Вариант перечисления")
    strategy: FilterStrategy = Field(..., description="Стратегия фильтрации")
    power: int = Field(..., ge=0, description="Длина кортежа")
    domain_size: int = Field(..., ge=0, description="Размер домена n")
    result_size: int = Field(..., ge=0, description="Количество кортежей в результате")
    materialized_tuples: int = Field(
        ..., ge=0, description="Количество построенных кортежей полной длины"
    )

    model_config = {"frozen": True}

    @field_validator("materialized_tuples")
    @classmethod
    def validate_materialized_covers_result(cls, v: int, info) -> int:
        """Каждый кортеж результата построен, значит materialized >= result"""
        if "result_size" in info.data:
            result_size = info.data["result_size"]
            if v < result_size:
                raise ValueError(
                    f"materialized_tuples {v} must be >= result_size {result_size}"
                )
        return v

    def filtered_out(self) -> int:
        """Количество построенных, но отброшенных фильтром кортежей."""
        return self.materialized_tuples - self.result_size
