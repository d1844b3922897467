"""
Unit Tests for build_message_table.

Test Aspects Covered:
    ✅ Business Logic: Field-wide and rule-specific overrides
    ✅ Edge Cases: Unknown fields and rules are ignored
"""

from __future__ import annotations

from form_validator.registry.rule_registry import RuleRegistry
from form_validator.validation.rule_spec import build_message_table

DATA = {"age": ["abc"], "name": [""]}


class TestFieldDefaults:
    """Keys without '.' are field-wide defaults."""

    def test_registers_def_for_present_field(self, default_registry: RuleRegistry) -> None:
        table = build_message_table({"age": "age must be numeric"}, DATA, default_registry)

        assert table == {"age": {"def": "age must be numeric"}}

    def test_ignores_field_absent_from_data(self, default_registry: RuleRegistry) -> None:
        """
        SCENARIO: Override for a field that is only in the rules
        EXPECTED: Silently ignored
        """
        table = build_message_table({"email": "bad email"}, DATA, default_registry)

        assert table == {}

    def test_custom_default_key(self, default_registry: RuleRegistry) -> None:
        table = build_message_table(
            {"age": "bad"}, DATA, default_registry, default_key="*"
        )

        assert table == {"age": {"*": "bad"}}


class TestRuleOverrides:
    """Keys of the form field.rule target one rule."""

    def test_registers_rule_override(self, default_registry: RuleRegistry) -> None:
        table = build_message_table({"age.numeric": "bad number"}, DATA, default_registry)

        assert table == {"age": {"numeric": "bad number"}}

    def test_rule_key_kept_as_written(self, default_registry: RuleRegistry) -> None:
        """The override is stored under the name exactly as the key spells it."""
        table = build_message_table({"age.Numeric": "bad number"}, DATA, default_registry)

        assert table == {"age": {"Numeric": "bad number"}}

    def test_ignores_unknown_rule(self, default_registry: RuleRegistry) -> None:
        table = build_message_table({"age.between": "nope"}, DATA, default_registry)

        assert table == {}

    def test_ignores_unknown_field(self, default_registry: RuleRegistry) -> None:
        table = build_message_table({"email.email": "nope"}, DATA, default_registry)

        assert table == {}

    def test_extra_dots_use_first_two_parts(self, default_registry: RuleRegistry) -> None:
        table = build_message_table({"age.min.extra": "too small"}, DATA, default_registry)

        assert table == {"age": {"min": "too small"}}

    def test_trailing_dot_ignored(self, default_registry: RuleRegistry) -> None:
        assert build_message_table({"age.": "x"}, DATA, default_registry) == {}


class TestCombined:
    """Both override kinds for one field."""

    def test_def_and_rule_coexist(self, default_registry: RuleRegistry) -> None:
        messages = {
            "age": "age is wrong",
            "age.min": "age too small",
            "name.required": "name please",
        }

        table = build_message_table(messages, DATA, default_registry)

        assert table == {
            "age": {"def": "age is wrong", "min": "age too small"},
            "name": {"required": "name please"},
        }

    def test_none_and_empty_messages(self, default_registry: RuleRegistry) -> None:
        assert build_message_table(None, DATA, default_registry) == {}
        assert build_message_table({}, DATA, default_registry) == {}
