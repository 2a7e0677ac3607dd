"""
Domain models and value objects.

Contains enumeration request/summary models and their enums.
"""

from src.core.domain.enumeration import (
    EnumerationRequest,
    EnumerationSummary,
    EnumerationVariant,
    FilterStrategy,
)

__all__ = [
    "EnumerationRequest",
    "EnumerationSummary",
    "EnumerationVariant",
    "FilterStrategy",
]
