"""
Value Objects for Validation Results.

A run produces at most one ValidError per field; every failing rule of that
field adds a key to the same entry. ValidationResult keeps the entries in
the order their fields first failed, which makes the primary error
deterministic.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from form_validator.errors import ValidationError


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Field data under test: field -> submitted values
FieldData = Dict[str, List[str]]

# Canonical rule specification: field -> raw rule tokens
RuleSpec = Dict[str, List[str]]

# Override messages: field -> ("def" | rule name) -> message
MessageTable = Dict[str, Dict[str, str]]


class ValidError(BaseModel):
    """All failures recorded for a single field."""

    field: str
    errors: Dict[str, str] = Field(
        default_factory=dict, description="Error key ('def' or rule) -> message"
    )

    def first_message(self, default_key: str = "def") -> Optional[str]:
        """Field-wide default message if recorded, else the first recorded one."""
        if default_key in self.errors:
            return self.errors[default_key]
        for message in self.errors.values():
            return message
        return None


class ValidationResult(BaseModel):
    """Outcome of one validation run."""

    errors: List[ValidError] = Field(default_factory=list)
    error: Optional[str] = Field(
        default=None, description="Primary error message surfaced to the caller"
    )
    default_key: str = Field(
        default="def",
        exclude=True,
        description="Key holding field-wide messages in each entry",
    )

    @property
    def valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        """Allow using result as boolean."""
        return self.valid

    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.valid

    def fields(self) -> List[str]:
        """Names of failing fields in the order they first failed."""
        return [entry.field for entry in self.errors]

    def get(self, field: str) -> Optional[ValidError]:
        """Get the error entry for a field."""
        for entry in self.errors:
            if entry.field == field:
                return entry
        return None

    def has_error(self, field: str) -> bool:
        """Check if field has error."""
        return self.get(field) is not None

    def get_errors(self, field: str) -> Dict[str, str]:
        """Get error messages for field keyed by 'def' or rule name."""
        entry = self.get(field)
        return dict(entry.errors) if entry else {}

    def first_error(self, field: Optional[str] = None) -> Optional[str]:
        """Get first error message, overall or for one field."""
        if field is None:
            return self.error
        entry = self.get(field)
        return entry.first_message(self.default_key) if entry else None

    def all_errors(self) -> List[str]:
        """Get all error messages as flat list."""
        messages: List[str] = []
        for entry in self.errors:
            messages.extend(entry.errors.values())
        return messages

    def raise_if_invalid(self) -> None:
        """Raise ValidationError if invalid."""
        if self.errors:
            raise ValidationError(
                self.error or "validation failed",
                field=self.errors[0].field,
                errors=list(self.errors),
            )
