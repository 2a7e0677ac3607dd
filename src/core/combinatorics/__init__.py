"""
Combinatorics modules

Декартова степень индексного домена, фильтры перестановок/сочетаний
и их отображение обратно в элементы.
"""

# Cartesian Power
from src.core.combinatorics.cartesian_power import (
    IndexTuple,
    iter_product_idxs,
    product_idxs,
)

# Index Filters
from src.core.combinatorics.index_filters import (
    all_unique,
    is_sorted,
    is_strictly_sorted,
    keep_if,
)

# Counting
from src.core.combinatorics.counting import (
    EnumerationCost,
    combinations_count,
    combinations_with_replacement_count,
    estimate_cost,
    expected_count,
    permutations_count,
    product_count,
)

# Enumerators
from src.core.combinatorics.enumerators import (
    EnumerationConfig,
    EnumerationRun,
    Enumerator,
    combinations,
    combinations_with_replacement,
    permutations,
    product,
)

__all__ = [
    # Cartesian Power
    "IndexTuple",
    "iter_product_idxs",
    "product_idxs",
    # Index Filters
    "all_unique",
    "is_sorted",
    "is_strictly_sorted",
    "keep_if",
    # Counting — Types
    "EnumerationCost",
    # Counting — Functions
    "combinations_count",
    "combinations_with_replacement_count",
    "estimate_cost",
    "expected_count",
    "permutations_count",
    "product_count",
    # Enumerators — Types
    "EnumerationConfig",
    "EnumerationRun",
    "Enumerator",
    # Enumerators — Functions
    "combinations",
    "combinations_with_replacement",
    "permutations",
    "product",
]
