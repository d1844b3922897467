"""
Built-in Rule Predicates.

Provides the predicates registered in the default registry:
    - Presence: Required, Nullable
    - Numeric: Int, Numeric, Min, Max, Lt, Lte, Gt, Gte
    - Format: Regex, Email, Url, Mobile
    - Membership: In

Design Notes:
    - Every predicate checks every value of the field
    - Min/Max compare numerically for numeric values, by length otherwise
    - Lt/Lte/Gt/Gte require numeric values
    - A malformed parameter ("min:abc") is a ConfigurationError
    - Nullable is consumed by the engine and never dispatched
"""

from __future__ import annotations

import logging
import operator
import re
from functools import lru_cache
from typing import Callable, Optional, Pattern, Sequence

from form_validator.errors import ConfigurationError
from form_validator.registry.rule_registry import RuleRegistry

logger = logging.getLogger(__name__)

INT_PATTERN = re.compile(r"^[+-]?\d+$")
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
URL_PATTERN = re.compile(
    r"^https?://"
    r"(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+[A-Z]{2,6}\.?|"
    r"localhost|"
    r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})"
    r"(?::\d+)?"
    r"(?:/?|[/?]\S+)$",
    re.IGNORECASE,
)
# Mainland China mobile numbers
MOBILE_PATTERN = re.compile(r"^1[3-9]\d{9}$")


def to_number(value: str) -> Optional[float]:
    """Parse a value as a finite number, or None."""
    try:
        number = float(value)
    except ValueError:
        return None
    if number != number or number in (float("inf"), float("-inf")):
        return None
    return number


def number_param(rule: str, param: str) -> float:
    """Parse a numeric rule parameter or fail as a configuration error."""
    number = to_number(param)
    if number is None:
        raise ConfigurationError(f"rule {rule} expects a numeric parameter, got '{param}'")
    return number


@lru_cache(maxsize=256)
def compile_pattern(param: str) -> Pattern[str]:
    """Compile a regex parameter, caching repeated patterns."""
    try:
        return re.compile(param)
    except re.error as e:
        raise ConfigurationError(f"rule regex has invalid pattern '{param}': {e}") from e


class RequiredRule:
    """At least one non-empty value."""

    def check(self, values: Sequence[str], param: str) -> bool:
        return any(len(value) > 0 for value in values)


class NullableRule:
    """Marker rule. The engine skips empty nullable fields itself."""

    def check(self, values: Sequence[str], param: str) -> bool:
        return True


class IntRule:
    """Every value is an integer literal."""

    def check(self, values: Sequence[str], param: str) -> bool:
        return all(INT_PATTERN.match(value) for value in values)


class NumericRule:
    """Every value parses as a finite number."""

    def check(self, values: Sequence[str], param: str) -> bool:
        return all(to_number(value) is not None for value in values)


class SizeRule:
    """
    Lower or upper bound on every value.

    Numeric values are compared by value, anything else by length.
    """

    def __init__(self, name: str, compare: Callable[[float, float], bool]) -> None:
        self.name = name
        self.compare = compare

    def check(self, values: Sequence[str], param: str) -> bool:
        bound = number_param(self.name, param)
        for value in values:
            number = to_number(value)
            size = number if number is not None else float(len(value))
            if not self.compare(size, bound):
                return False
        return True


class CompareRule:
    """Numeric comparison of every value against the parameter."""

    def __init__(self, name: str, compare: Callable[[float, float], bool]) -> None:
        self.name = name
        self.compare = compare

    def check(self, values: Sequence[str], param: str) -> bool:
        bound = number_param(self.name, param)
        for value in values:
            number = to_number(value)
            if number is None or not self.compare(number, bound):
                return False
        return True


class RegexRule:
    """Every value contains a match for the parameter pattern."""

    def check(self, values: Sequence[str], param: str) -> bool:
        pattern = compile_pattern(param)
        return all(pattern.search(value) for value in values)


class PatternRule:
    """Every value matches a fixed pattern."""

    def __init__(self, pattern: Pattern[str]) -> None:
        self.pattern = pattern

    def check(self, values: Sequence[str], param: str) -> bool:
        return all(self.pattern.match(value) for value in values)


class InRule:
    """Every value is one of the comma-separated parameter options."""

    def check(self, values: Sequence[str], param: str) -> bool:
        allowed = param.split(",")
        return all(value in allowed for value in values)


def register_builtin_rules(registry: RuleRegistry) -> RuleRegistry:
    """
    Register every built-in rule on a registry.

    Args:
        registry: Mutable registry to populate

    Returns:
        The same registry
    """
    registry.register("Required", RequiredRule(), "At least one non-empty value")
    registry.register("Min", SizeRule("min", operator.ge), "Value or length >= param")
    registry.register("Max", SizeRule("max", operator.le), "Value or length <= param")
    registry.register("Regex", RegexRule(), "Matches param pattern")
    registry.register("Int", IntRule(), "Integer literal")
    registry.register("Numeric", NumericRule(), "Finite number")
    registry.register("Nullable", NullableRule(), "Skip rules when empty")
    registry.register("Email", PatternRule(EMAIL_PATTERN), "Email address")
    registry.register("Url", PatternRule(URL_PATTERN), "http(s) URL")
    registry.register("Mobile", PatternRule(MOBILE_PATTERN), "Mobile number")
    registry.register("In", InRule(), "One of comma-separated param")
    registry.register("Lt", CompareRule("lt", operator.lt), "Number < param")
    registry.register("Lte", CompareRule("lte", operator.le), "Number <= param")
    registry.register("Gt", CompareRule("gt", operator.gt), "Number > param")
    registry.register("Gte", CompareRule("gte", operator.ge), "Number >= param")
    return registry


def create_default_registry(frozen: bool = True) -> RuleRegistry:
    """
    Create a registry holding the built-in rules.

    Args:
        frozen: Freeze before returning. Pass False to add custom rules,
                then call freeze() yourself.
    """
    registry = register_builtin_rules(RuleRegistry())
    return registry.freeze() if frozen else registry


DEFAULT_REGISTRY = create_default_registry()
