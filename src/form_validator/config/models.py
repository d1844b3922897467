"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

import re
from typing import Dict, List, Union

from pydantic import BaseModel, Field, field_validator

PLACEHOLDER = re.compile(r"\{(field|rule)\}")


def render(template: str, **values: str) -> str:
    """Substitute {field} and {rule} literally, leaving other braces alone."""
    return PLACEHOLDER.sub(lambda m: values.get(m.group(1), m.group(0)), template)


class ValidatorConfig(BaseModel):
    """Engine settings: message templates and the field-wide message key."""

    missing_message: str = Field(default="the param {field} not valid!")
    rule_message: str = Field(default="the field {field} not valid in {rule}")
    default_key: str = Field(default="def", min_length=1)

    model_config = {"frozen": True, "extra": "forbid"}

    def format_missing(self, field: str) -> str:
        return render(self.missing_message, field=field)

    def format_rule(self, field: str, rule: str) -> str:
        return render(self.rule_message, field=field, rule=rule)


class RuleSetConfig(BaseModel):
    """Root configuration object: a named set of field rules."""

    version: str = "1.0"
    validator: ValidatorConfig = Field(default_factory=ValidatorConfig)
    rules: Dict[str, Union[str, List[str]]]
    messages: Dict[str, str] = Field(default_factory=dict)

    @field_validator("rules")
    @classmethod
    def rules_not_empty(
        cls, value: Dict[str, Union[str, List[str]]]
    ) -> Dict[str, Union[str, List[str]]]:
        if not value:
            raise ValueError("rule set must declare at least one field")
        return value
