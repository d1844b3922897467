"""
Domain Layer - Validation Result Value Objects.

Value Objects:
    - ValidError: All failures recorded for one field
    - ValidationResult: Ordered error entries plus the primary message

Type Aliases:
    - FieldData, RuleSpec, MessageTable
"""

from form_validator.domain.value_objects import (
    FieldData,
    MessageTable,
    RuleSpec,
    ValidError,
    ValidationResult,
)

__all__ = [
    "FieldData",
    "MessageTable",
    "RuleSpec",
    "ValidError",
    "ValidationResult",
]
