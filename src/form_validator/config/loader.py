"""
Rule Set Loader - YAML Rule Files with Profile Overlays.

A rule set file declares field rules, override messages and optional
engine settings. A profile is a partial rule set that adjusts it for one
environment; profiles live in a "profiles" directory next to the rule
file unless a profiles_dir is given.

Example rule file (rules/signup.yaml):
    validator:
      missing_message: "the param {field} not valid!"
    rules:
      age: "nullable|int|gte:18"
      email: [required, email]
    messages:
      age: "age must be an adult age"
      email.email: "email looks wrong"

Example profile (rules/profiles/strict.yaml):
    rules:
      age: "required|int|gte:21"   # replaces the whole rule list
      nickname: null               # drops the field and its messages
    messages:
      age: "age must be at least 21"
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from form_validator.config.models import RuleSetConfig
from form_validator.errors import ConfigurationError

logger = logging.getLogger(__name__)

PROFILES_DIR_NAME = "profiles"
SECTIONS = ("rules", "messages", "validator")
FIELD_SEPARATOR = "."


class ConfigLoader:
    """Loads rule sets from YAML files and applies profiles."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        profiles_dir: Optional[Path] = None,
    ) -> None:
        """
        Initialize rule set loader.

        Args:
            base_path: Base path for relative rule file paths
            profiles_dir: Directory of profile files. Defaults to the
                "profiles" directory beside each rule file.
        """
        self._base_path = Path(base_path) if base_path else Path(".")
        self._profiles_dir = Path(profiles_dir) if profiles_dir else None

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> RuleSetConfig:
        """
        Load a rule set from a YAML file.

        Args:
            config_path: Path to the rule file
            profile: Optional profile name to overlay

        Returns:
            Validated RuleSetConfig object

        Raises:
            FileNotFoundError: If the rule file or profile doesn't exist
            ConfigurationError: If a file is not a YAML mapping
            pydantic.ValidationError: If the rule set is invalid
        """
        path = self._resolve_path(config_path)
        config_dict = self._load_yaml(path)

        if profile:
            profile_dict = self._load_yaml(self._profile_path(path, profile))
            config_dict = self._apply_profile(config_dict, profile_dict)
            logger.debug(f"Applied profile '{profile}' to {path}")

        rule_set = RuleSetConfig.model_validate(config_dict)
        logger.info(f"Loaded rule set {path} with {len(rule_set.rules)} fields")
        return rule_set

    def load_from_dict(self, config_dict: Dict[str, Any]) -> RuleSetConfig:
        """Validate a rule set given as a dictionary."""
        return RuleSetConfig.model_validate(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _profile_path(self, rule_path: Path, profile: str) -> Path:
        if self._profiles_dir is not None:
            directory = self._resolve_path(self._profiles_dir)
        else:
            directory = rule_path.parent / PROFILES_DIR_NAME
        profile_path = directory / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile} ({profile_path})")
        return profile_path

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f) or {}
        if not isinstance(content, dict):
            raise ConfigurationError(
                f"{path} must contain a mapping, got {type(content).__name__}"
            )
        return content

    def _apply_profile(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Overlay a profile onto a rule set.

        Within rules, messages and validator, entries are replaced one key
        at a time; a rule list is never merged with the base list. A null
        rule removes the field together with its messages, and a null
        message removes that override. Other top-level keys are replaced.
        """
        result = dict(base)
        for key, value in overlay.items():
            if key in SECTIONS and isinstance(value, dict):
                section = dict(result.get(key) or {})
                section.update(value)
                result[key] = section
            else:
                result[key] = value

        rules = result.get("rules") or {}
        dropped = [field for field, tokens in rules.items() if tokens is None]
        if dropped:
            result["rules"] = {f: t for f, t in rules.items() if t is not None}
            result["messages"] = {
                key: message
                for key, message in (result.get("messages") or {}).items()
                if key.split(FIELD_SEPARATOR)[0] not in dropped
            }
            logger.debug(f"Profile removed fields: {dropped}")

        if result.get("messages"):
            result["messages"] = {
                key: message
                for key, message in result["messages"].items()
                if message is not None
            }
        return result


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
    profiles_dir: Optional[Path] = None,
) -> RuleSetConfig:
    """
    Convenience function to load a rule set.

    Args:
        config_path: Path to the rule file
        profile: Optional profile name
        base_path: Base path for resolving relative paths
        profiles_dir: Directory of profile files

    Returns:
        Validated RuleSetConfig object
    """
    loader = ConfigLoader(base_path=base_path, profiles_dir=profiles_dir)
    return loader.load(config_path, profile)
