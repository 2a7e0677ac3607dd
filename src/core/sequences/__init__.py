"""
Sequence modules

Построение последовательностей и скользящие окна.
"""

# Preconditions
from src.core.sequences.preconditions import (
    PreconditionViolation,
    validate_count,
    validate_positive_count,
)

# Containers
from src.core.sequences.containers import (
    as_indexable,
    builder_for,
    concat,
    elems_at_idxs,
)

# Synthesis
from src.core.sequences.synthesis import (
    fill_left,
    fill_right,
    generate,
    generate_by_idx,
    repeat,
    replicate,
)

# Windows
from src.core.sequences.windows import infixes

__all__ = [
    # Preconditions
    "PreconditionViolation",
    "validate_count",
    "validate_positive_count",
    # Containers
    "as_indexable",
    "builder_for",
    "concat",
    "elems_at_idxs",
    # Synthesis
    "fill_left",
    "fill_right",
    "generate",
    "generate_by_idx",
    "repeat",
    "replicate",
    # Windows
    "infixes",
]
