"""
Error Types.

Two disjoint classes of error:
    - ConfigurationError and subclasses: malformed setup (bad rule
      specifications, malformed field data, unknown rule names, registry
      misuse). Always raised, never recorded as field failures.
    - ValidationError: data failed validation. Only raised on request
      (ValidationResult.raise_if_invalid, validate_or_fail); the engine
      itself reports failures through ValidationResult.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from form_validator.domain.value_objects import ValidError


class ConfigurationError(Exception):
    """Raised when the validator is set up incorrectly."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class UnsupportedRuleSpecError(ConfigurationError, TypeError):
    """Raised when rule input is not one of the accepted shapes."""
    pass


class UnknownRuleError(ConfigurationError, LookupError):
    """Raised when a rule token names a rule missing from the registry."""

    def __init__(self, rule: str, field: Optional[str] = None) -> None:
        super().__init__(f"{rule} the valid rule not exist", field=field)
        self.rule = rule


class UnsupportedDataError(ConfigurationError, TypeError):
    """Raised when a field's data is not a list of values."""
    pass


class RegistryFrozenError(ConfigurationError):
    """Raised when a frozen registry is modified."""
    pass


class ValidationError(Exception):
    """Raised when validated data has at least one failing field."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        errors: Optional[List["ValidError"]] = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.message = message
        self.errors = errors or []
