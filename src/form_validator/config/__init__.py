"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of Form Validator:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - RuleSetConfig: Root object (rules, messages, engine settings)
    - ValidatorConfig: Message templates and reserved tokens
"""

from form_validator.config.models import RuleSetConfig, ValidatorConfig
from form_validator.config.loader import ConfigLoader, load_config

__all__ = [
    "ConfigLoader",
    "RuleSetConfig",
    "ValidatorConfig",
    "load_config",
]
