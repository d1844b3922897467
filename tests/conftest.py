"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

import pytest

from form_validator.config.models import ValidatorConfig
from form_validator.registry.rule_registry import RuleRegistry
from form_validator.rules.builtin import DEFAULT_REGISTRY, create_default_registry
from form_validator.validation.engine import Validator


class RecordingPredicate:
    """Predicate returning a fixed verdict and recording every call."""

    def __init__(self, verdict: bool = True) -> None:
        self.verdict = verdict
        self.calls: List[Tuple[List[str], str]] = []

    def check(self, values: Sequence[str], param: str) -> bool:
        self.calls.append((list(values), param))
        return self.verdict


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding YAML fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_rules_path(fixtures_path: Path) -> Path:
    """Path to sample rule set file."""
    return fixtures_path / "sample_rules.yaml"


@pytest.fixture
def default_registry() -> RuleRegistry:
    """Shared frozen registry of built-in rules."""
    return DEFAULT_REGISTRY


@pytest.fixture
def recording_registry() -> Tuple[RuleRegistry, RecordingPredicate, RecordingPredicate]:
    """
    Built-in rules plus 'Pass' and 'Fail' recording predicates.

    Returns:
        (registry, pass_predicate, fail_predicate)
    """
    registry = create_default_registry(frozen=False)
    passing = RecordingPredicate(verdict=True)
    failing = RecordingPredicate(verdict=False)
    registry.register("Pass", passing)
    registry.register("Fail", failing)
    return registry.freeze(), passing, failing


@pytest.fixture
def validator() -> Validator:
    """Validator with the default registry and config."""
    return Validator()


@pytest.fixture
def default_config() -> ValidatorConfig:
    """Create default validator configuration."""
    return ValidatorConfig()
