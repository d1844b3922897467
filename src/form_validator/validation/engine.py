"""
Validation Engine - Rule Evaluation over Field Data.

Runs one validation in three steps:
    1. Presence check: every non-nullable field in the rules must be in
       the data. Any miss ends the run before rules are evaluated.
    2. Message table: custom overrides are matched against data fields
       and registered rule names.
    3. Rule evaluation: each field's tokens run in order; nullable fields
       that are absent or all-empty are skipped; failures are recorded
       per field.

Design Notes:
    - Setup mistakes (bad rule shapes, unknown rules, no rules) raise
      ConfigurationError; data failures are returned in ValidationResult
    - Fields are evaluated in rule declaration order, so the primary
      error is always the first field that failed
    - Run state lives in a per-call object; Validator can be shared
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from form_validator.config.models import RuleSetConfig, ValidatorConfig
from form_validator.domain.value_objects import (
    MessageTable,
    RuleSpec,
    ValidError,
    ValidationResult,
)
from form_validator.errors import ConfigurationError, UnsupportedDataError
from form_validator.registry.rule_registry import RuleRegistry
from form_validator.rules.builtin import DEFAULT_REGISTRY
from form_validator.validation.rule_spec import (
    NULLABLE_TOKEN,
    build_message_table,
    normalize_rules,
    parse_rule_lists,
    parse_rule_strings,
    parse_token,
)

logger = logging.getLogger(__name__)


class _ValidationRun:
    """Mutable state of a single validation call."""

    def __init__(
        self,
        data: Mapping[str, Optional[Sequence[str]]],
        rules: RuleSpec,
        registry: RuleRegistry,
        config: ValidatorConfig,
    ) -> None:
        self.data = data
        self.rules = rules
        self.registry = registry
        self.config = config
        self.messages: MessageTable = {}
        self.errors: List[ValidError] = []
        self._index: Dict[str, ValidError] = {}

    def missing_check(self) -> bool:
        """Record a 'def' error for each absent non-nullable field."""
        if not self.rules:
            logger.error("Validation called without any rules")
            raise ConfigurationError("no validation rules given")

        for field, tokens in self.rules.items():
            if field not in self.data and NULLABLE_TOKEN not in tokens:
                self.insert_error(
                    self.config.default_key,
                    field,
                    self.config.format_missing(field),
                )

        return not self.errors

    def parse_messages(self, messages: Optional[Mapping[str, str]]) -> None:
        self.messages = build_message_table(
            messages, self.data, self.registry, self.config.default_key
        )

    def run(self) -> None:
        for field, tokens in self.rules.items():
            self.parse(field, tokens)

    def parse(self, field: str, tokens: List[str]) -> None:
        """Evaluate every rule token of one field."""
        for token in tokens:
            name, param = parse_token(token)
            predicate = self.registry.resolve(name, field=field)

            if name == NULLABLE_TOKEN:
                continue

            if not self.is_verifiable(field, tokens):
                logger.debug(f"Skipping {name} for empty nullable field '{field}'")
                continue

            values = self.values(field)
            if not predicate.check(values, param):
                logger.debug(f"Field '{field}' failed rule '{token}'")
                self.add_errors(field, name)

    def values(self, field: str) -> List[str]:
        """Values submitted for a field; None counts as no values."""
        value = self.data.get(field)
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            logger.error(f"Field '{field}' data is {type(value).__name__}, not a list")
            raise UnsupportedDataError(
                f"data for '{field}' must be a list of strings, "
                f"got {type(value).__name__}",
                field=field,
            )
        return list(value)

    def is_verifiable(self, field: str, tokens: List[str]) -> bool:
        """
        Check whether rules should run for a field.

        Nullable fields are skipped when absent or when every value is
        empty. Other fields are always verifiable here; presence was
        settled by missing_check.
        """
        if NULLABLE_TOKEN not in tokens:
            return True
        if field not in self.data:
            return False
        return any(len(value) > 0 for value in self.values(field))

    def add_errors(self, field: str, rule: str) -> None:
        """
        Record a rule failure, applying custom messages.

        A field-wide default is recorded under the default key whenever it
        exists. Independently, the rule key gets the rule-specific override
        or the generated message.
        """
        custom = self.messages.get(field, {})
        default_key = self.config.default_key

        if default_key in custom:
            self.insert_error(default_key, field, custom[default_key])

        if rule in custom:
            self.insert_error(rule, field, custom[rule])
        else:
            self.insert_error(rule, field, self.config.format_rule(field, rule))

    def insert_error(self, key: str, field: str, message: str) -> None:
        """Add a message to the field's single entry, creating it if needed."""
        entry = self._index.get(field)
        if entry is None:
            entry = ValidError(field=field)
            self._index[field] = entry
            self.errors.append(entry)
        entry.errors[key] = message

    def result(self) -> ValidationResult:
        error = None
        if self.errors:
            error = self.errors[0].first_message(self.config.default_key)
        return ValidationResult(
            errors=self.errors, error=error, default_key=self.config.default_key
        )


class Validator:
    """
    Validates field data against per-field rule tokens.

    Example:
        validator = Validator()
        result = validator.validate(
            {"age": ["abc"]},
            {"age": ["numeric"]},
            {"age": "age must be numeric"},
        )
        result.error  # "age must be numeric"
    """

    def __init__(
        self,
        registry: Optional[RuleRegistry] = None,
        config: Optional[ValidatorConfig] = None,
    ) -> None:
        """
        Initialize validator.

        Args:
            registry: Rule registry. Defaults to the built-in rules.
            config: Engine settings. Defaults to ValidatorConfig().
        """
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.config = config or ValidatorConfig()

    @classmethod
    def from_config(
        cls,
        rule_set: RuleSetConfig,
        registry: Optional[RuleRegistry] = None,
    ) -> "BoundValidator":
        """Create a validator bound to a loaded rule set."""
        return BoundValidator(cls(registry, rule_set.validator), rule_set)

    def validate(
        self,
        data: Mapping[str, Optional[Sequence[str]]],
        rules: Mapping[str, Sequence[str]],
        messages: Optional[Mapping[str, str]] = None,
    ) -> ValidationResult:
        """
        Validate data against rules given as token lists.

        Args:
            data: Field name -> submitted values
            rules: Field name -> rule tokens ("min:1", "nullable", ...)
            messages: Optional overrides keyed "field" or "field.rule"

        Returns:
            ValidationResult with per-field errors and the primary error

        Raises:
            ConfigurationError: If rules are malformed, empty or unknown
        """
        return self.run(data, parse_rule_lists(rules), messages)

    def validate_strings(
        self,
        data: Mapping[str, Optional[Sequence[str]]],
        rules: Mapping[str, str],
        messages: Optional[Mapping[str, str]] = None,
    ) -> ValidationResult:
        """Validate data against rules given as "a|b:1" strings."""
        return self.run(data, parse_rule_strings(rules), messages)

    def run(
        self,
        data: Mapping[str, Optional[Sequence[str]]],
        rules: RuleSpec,
        messages: Optional[Mapping[str, str]] = None,
    ) -> ValidationResult:
        """Validate against an already canonical rule specification."""
        state = _ValidationRun(data, rules, self.registry, self.config)

        if not state.missing_check():
            result = state.result()
            logger.debug(f"Missing fields: {result.fields()}")
            return result

        state.parse_messages(messages)
        state.run()

        result = state.result()
        if result.errors:
            logger.debug(f"Validation failed for fields: {result.fields()}")
        else:
            logger.debug(f"Validation passed for {len(rules)} fields")
        return result


class BoundValidator:
    """A Validator with a fixed rule set and messages."""

    def __init__(self, validator: Validator, rule_set: RuleSetConfig) -> None:
        self.validator = validator
        self.rule_set = rule_set
        self.rules = normalize_rules(rule_set.rules)

    def validate(self, data: Mapping[str, Optional[Sequence[str]]]) -> ValidationResult:
        return self.validator.run(data, self.rules, self.rule_set.messages)


# Convenience functions

def validate(
    data: Mapping[str, Optional[Sequence[str]]],
    rules: Mapping[str, Sequence[str]],
    messages: Optional[Mapping[str, str]] = None,
    registry: Optional[RuleRegistry] = None,
) -> ValidationResult:
    """
    Validate data with token-list rules.

    Example:
        result = validate({"hello": ["2"]}, {"hello": ["min:1", r"regex:^\\w$"]})
        assert result.valid
    """
    return Validator(registry).validate(data, rules, messages)


def validate_strings(
    data: Mapping[str, Optional[Sequence[str]]],
    rules: Mapping[str, str],
    messages: Optional[Mapping[str, str]] = None,
    registry: Optional[RuleRegistry] = None,
) -> ValidationResult:
    """Validate data with pipe-delimited rules ("nullable|min:1")."""
    return Validator(registry).validate_strings(data, rules, messages)


def validate_or_fail(
    data: Mapping[str, Optional[Sequence[str]]],
    rules: Mapping[str, Any],
    messages: Optional[Mapping[str, str]] = None,
    registry: Optional[RuleRegistry] = None,
) -> ValidationResult:
    """
    Validate rules in either form and raise on failure.

    Raises:
        ValidationError: If any field failed, with the primary message
        ConfigurationError: If rules are malformed, empty or unknown
    """
    result = Validator(registry).run(data, normalize_rules(rules), messages)
    result.raise_if_invalid()
    return result
