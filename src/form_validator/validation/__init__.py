"""
Validation Package - Rule Normalization and Evaluation.

This package provides:
    - Validator: Engine running presence checks and per-field rules
    - rule_spec: Normalizer for rule input and the message table builder

Design Principles:
    - Setup mistakes raise, data failures are returned
    - Clear, field-addressable error messages
    - Deterministic ordering of reported errors
"""

from form_validator.validation.engine import (
    BoundValidator,
    Validator,
    validate,
    validate_or_fail,
    validate_strings,
)
from form_validator.validation.rule_spec import (
    build_message_table,
    normalize_rules,
    parse_rule_lists,
    parse_rule_strings,
    parse_token,
)

__all__ = [
    "BoundValidator",
    "Validator",
    "validate",
    "validate_or_fail",
    "validate_strings",
    "build_message_table",
    "normalize_rules",
    "parse_rule_lists",
    "parse_rule_strings",
    "parse_token",
]
