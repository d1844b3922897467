"""
Interfaces Layer - Abstract Protocols for Dependencies.

Protocols:
    - RulePredicate: A named check over one field's values

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - All methods have clear contracts in docstrings
"""

from form_validator.interfaces.rule_predicate import (
    FunctionPredicate,
    PredicateFunc,
    RulePredicate,
)

__all__ = [
    "FunctionPredicate",
    "PredicateFunc",
    "RulePredicate",
]
