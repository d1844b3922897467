"""
Registry Module - Named Rule Management.

This module provides the registry that maps rule names to predicates,
so the engine dispatches by name without reflection.

Components:
    - RuleRegistry: Central registry of rule predicates
    - RuleInfo: Metadata about registered rules
    - ucfirst: Rule name normalization used for lookups
"""

from form_validator.registry.rule_registry import (
    RuleInfo,
    RuleRegistry,
    RuleRegistryProtocol,
    ucfirst,
)

__all__ = [
    "RuleInfo",
    "RuleRegistry",
    "RuleRegistryProtocol",
    "ucfirst",
]
