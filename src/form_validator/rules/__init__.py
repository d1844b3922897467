"""
Rules Package - Built-in Rule Predicates.

Components:
    - create_default_registry: Frozen registry of the built-in rules
    - DEFAULT_REGISTRY: Shared instance built at import
    - register_builtin_rules: Populate a caller-owned registry
"""

from form_validator.rules.builtin import (
    DEFAULT_REGISTRY,
    create_default_registry,
    register_builtin_rules,
)

__all__ = [
    "DEFAULT_REGISTRY",
    "create_default_registry",
    "register_builtin_rules",
]
