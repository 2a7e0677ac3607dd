"""
Contract Validation Module

JSON Schema контракты запросов и сводок перечисления.
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    EnumerationRequestValidator,
    EnumerationSummaryValidator,
    load_schema,
    parse_enumeration_request,
    validate_enumeration_request,
    validate_enumeration_summary,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    # Classes
    "ContractValidator",
    "EnumerationRequestValidator",
    "EnumerationSummaryValidator",
    # Functions
    "load_schema",
    "parse_enumeration_request",
    "validate_enumeration_request",
    "validate_enumeration_summary",
]
