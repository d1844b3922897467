"""
Unit Tests for the Built-in Rules.

Test Aspects Covered:
    ✅ Business Logic: Default registry contents and a sample of predicates
    ✅ Error Handling: Malformed parameters
"""

from __future__ import annotations

import pytest

from form_validator.errors import ConfigurationError, RegistryFrozenError
from form_validator.registry.rule_registry import RuleRegistry
from form_validator.rules.builtin import create_default_registry

BUILTIN_NAMES = [
    "Required", "Min", "Max", "Regex", "Int", "Numeric", "Nullable",
    "Email", "Url", "Mobile", "In", "Lt", "Lte", "Gt", "Gte",
]


def check(registry: RuleRegistry, name: str, values: list, param: str = "") -> bool:
    return registry.resolve(name).check(values, param)


class TestDefaultRegistry:
    """Test cases for create_default_registry."""

    def test_registers_all_builtin_names(self, default_registry: RuleRegistry) -> None:
        assert default_registry.names() == BUILTIN_NAMES

    def test_default_registry_is_frozen(self, default_registry: RuleRegistry) -> None:
        with pytest.raises(RegistryFrozenError):
            default_registry.register("Extra", lambda values, param: True)

    def test_unfrozen_registry_accepts_custom_rules(self) -> None:
        registry = create_default_registry(frozen=False)

        registry.register("Even", lambda values, param: all(int(v) % 2 == 0 for v in values))

        assert registry.exists("even")
        assert registry.registered_count == len(BUILTIN_NAMES) + 1


class TestPredicates:
    """Spot checks of predicate behavior."""

    @pytest.mark.parametrize(
        "name,values,param,expected",
        [
            ("required", ["x"], "", True),
            ("required", [""], "", False),
            ("required", [], "", False),
            ("min", ["2"], "1", True),
            ("min", ["0"], "1", False),
            ("min", ["abc"], "3", True),
            ("max", ["abcd"], "3", False),
            ("int", ["-12", "7"], "", True),
            ("int", ["1.5"], "", False),
            ("numeric", ["1.5", "2"], "", True),
            ("numeric", ["nan"], "", False),
            ("regex", ["2"], r"^\w$", True),
            ("regex", ["22"], r"^\w$", False),
            ("email", ["a@example.com"], "", True),
            ("email", ["not-an-email"], "", False),
            ("url", ["https://example.com/path"], "", True),
            ("url", ["ftp://example.com"], "", False),
            ("mobile", ["13800138000"], "", True),
            ("mobile", ["12345"], "", False),
            ("in", ["a", "b"], "a,b,c", True),
            ("in", ["d"], "a,b,c", False),
            ("lt", ["4"], "5", True),
            ("lte", ["5"], "5", True),
            ("gt", ["5"], "5", False),
            ("gte", ["5"], "5", True),
            ("gte", ["five"], "5", False),
        ],
    )
    def test_predicate(
        self,
        default_registry: RuleRegistry,
        name: str,
        values: list,
        param: str,
        expected: bool,
    ) -> None:
        assert check(default_registry, name, values, param) is expected

    def test_invalid_numeric_param_raises(self, default_registry: RuleRegistry) -> None:
        with pytest.raises(ConfigurationError, match="numeric parameter"):
            check(default_registry, "min", ["1"], "one")

    def test_invalid_regex_param_raises(self, default_registry: RuleRegistry) -> None:
        with pytest.raises(ConfigurationError, match="invalid pattern"):
            check(default_registry, "regex", ["1"], "(")
