"""
Form Validator - Declarative Rule Validation for Request Data.

Validates loosely-typed request data (every field is a list of strings, as
produced by form or query parsing) against per-field rule lists, and
reports failures per field with optional custom override messages.

Architecture:
    - Registry of named rule predicates (built once, then frozen)
    - Normalizer for pipe-delimited or pre-split rule specifications
    - Engine that runs presence checks, nullable skips and dispatch
    - Configuration-driven rule sets via YAML

Main Components:
    - domain: Result value objects (ValidError, ValidationResult)
    - interfaces: RulePredicate protocol
    - registry: RuleRegistry and name resolution
    - rules: Built-in predicates and the default registry
    - validation: Normalizer, message table builder, engine
    - config: Configuration models and loaders

Example:
    >>> from form_validator import validate
    >>> result = validate({"age": ["17"]}, {"age": ["required", "min:18"]})
    >>> result.error
    'the field age not valid in min'
"""

import logging

__version__ = "0.2.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Form Validator.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import form_validator
        >>> form_validator.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("form_validator").setLevel(level)


from form_validator.errors import (  # noqa: E402
    ConfigurationError,
    RegistryFrozenError,
    UnknownRuleError,
    UnsupportedDataError,
    UnsupportedRuleSpecError,
    ValidationError,
)
from form_validator.domain.value_objects import (  # noqa: E402
    ValidError,
    ValidationResult,
)
from form_validator.registry.rule_registry import RuleRegistry  # noqa: E402
from form_validator.rules.builtin import (  # noqa: E402
    DEFAULT_REGISTRY,
    create_default_registry,
)
from form_validator.validation.engine import (  # noqa: E402
    BoundValidator,
    Validator,
    validate,
    validate_or_fail,
    validate_strings,
)

__all__ = [
    "__version__",
    "configure_logging",
    # Errors
    "ConfigurationError",
    "RegistryFrozenError",
    "UnknownRuleError",
    "UnsupportedDataError",
    "UnsupportedRuleSpecError",
    "ValidationError",
    # Results
    "ValidError",
    "ValidationResult",
    # Registry
    "RuleRegistry",
    "DEFAULT_REGISTRY",
    "create_default_registry",
    # Engine
    "Validator",
    "BoundValidator",
    "validate",
    "validate_strings",
    "validate_or_fail",
]
