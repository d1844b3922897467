"""
Rule Registry - Name-Addressed Predicate Table.

This module provides a thread-safe registry mapping rule names to
predicates. The registry is populated once at startup and then frozen;
a frozen registry is read-only and can be shared across threads.

Rule names are resolved with an asymmetric casing rule: only the first
character of the requested name is uppercased ("min" -> "Min"). Nothing
else is normalized, so "mIN" looks up "MIN" and fails.

Usage:
    registry = RuleRegistry()
    registry.register("Min", MinRule(), description="Numeric lower bound")
    registry.register("Even", lambda values, param: ...)
    registry.freeze()

    predicate = registry.resolve("min")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock
from typing import Dict, List, Optional, Protocol, Union

from form_validator.errors import RegistryFrozenError, UnknownRuleError
from form_validator.interfaces.rule_predicate import (
    FunctionPredicate,
    PredicateFunc,
    RulePredicate,
)

logger = logging.getLogger(__name__)


def ucfirst(name: str) -> str:
    """Uppercase only the first character."""
    return name[:1].upper() + name[1:]


@dataclass
class RuleInfo:
    """Metadata about a registered rule."""

    name: str
    predicate: RulePredicate
    description: str = ""


class RuleRegistryProtocol(Protocol):
    """Protocol for rule registry implementations."""

    def register(
        self,
        name: str,
        predicate: Union[RulePredicate, PredicateFunc],
        description: str = "",
    ) -> None:
        """Register a predicate under a rule name."""
        ...

    def resolve(self, name: str, field: Optional[str] = None) -> RulePredicate:
        """Get the predicate for a rule token name."""
        ...

    def exists(self, name: str) -> bool:
        """Check whether a rule token name resolves."""
        ...


class RuleRegistry:
    """
    Thread-safe registry of rule predicates.

    Supports:
        - Registration of protocol instances or plain functions
        - First-letter-uppercase name resolution
        - Freezing into a read-only table
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._rules: Dict[str, RuleInfo] = {}
        self._lock = RLock()
        self._frozen = False
        logger.debug("RuleRegistry initialized")

    def register(
        self,
        name: str,
        predicate: Union[RulePredicate, PredicateFunc],
        description: str = "",
    ) -> None:
        """
        Register a predicate with the registry.

        Args:
            name: Registry key, conventionally capitalized ("Min")
            predicate: RulePredicate instance or function(values, param)
            description: Optional description

        Raises:
            ValueError: If the name is empty, taken, or predicate invalid
            RegistryFrozenError: If the registry has been frozen
        """
        with self._lock:
            self._ensure_mutable(name)
            if not name:
                raise ValueError("Rule name must not be empty")
            if name in self._rules:
                raise ValueError(
                    f"Rule '{name}' is already registered. "
                    f"Use unregister() first."
                )

            info = RuleInfo(
                name=name,
                predicate=self._as_predicate(name, predicate),
                description=description,
            )
            self._rules[name] = info
            logger.info(f"Registered rule: {name}")

    def _as_predicate(
        self,
        name: str,
        predicate: Union[RulePredicate, PredicateFunc],
    ) -> RulePredicate:
        """Wrap plain functions so every entry exposes check()."""
        if isinstance(predicate, RulePredicate):
            return predicate
        if callable(predicate):
            return FunctionPredicate(predicate)
        raise ValueError(
            f"Rule '{name}' must be a RulePredicate or a callable, "
            f"got {type(predicate).__name__}"
        )

    def unregister(self, name: str) -> bool:
        """
        Unregister a rule by name.

        Args:
            name: Registry key of the rule to remove

        Returns:
            True if rule was removed, False if not found
        """
        with self._lock:
            self._ensure_mutable(name)
            if name not in self._rules:
                logger.warning(f"Cannot unregister: rule '{name}' not found")
                return False

            del self._rules[name]
            logger.info(f"Unregistered rule: {name}")
            return True

    def _ensure_mutable(self, name: str) -> None:
        if self._frozen:
            logger.error(f"Refusing to modify frozen registry (rule '{name}')")
            raise RegistryFrozenError(
                f"Cannot modify rule '{name}': registry is frozen"
            )

    def freeze(self) -> "RuleRegistry":
        """Make the registry read-only. Returns self for chaining."""
        with self._lock:
            if not self._frozen:
                self._frozen = True
                logger.info(f"Froze rule registry with {len(self._rules)} rules")
            return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def copy(self) -> "RuleRegistry":
        """Create an unfrozen registry holding the same rules."""
        with self._lock:
            clone = RuleRegistry()
            clone._rules = {
                name: RuleInfo(
                    name=info.name,
                    predicate=info.predicate,
                    description=info.description,
                )
                for name, info in self._rules.items()
            }
            return clone

    def get(self, name: str) -> Optional[RulePredicate]:
        """
        Get a predicate by rule token name.

        Args:
            name: Rule name as written in a rule token

        Returns:
            Predicate or None if the name does not resolve
        """
        info = self._rules.get(ucfirst(name))
        return info.predicate if info else None

    def resolve(self, name: str, field: Optional[str] = None) -> RulePredicate:
        """
        Get a predicate by rule token name, failing loudly.

        Args:
            name: Rule name as written in a rule token
            field: Field being validated, for the error report

        Raises:
            UnknownRuleError: If the name does not resolve
        """
        predicate = self.get(name)
        if predicate is None:
            logger.error(f"Unknown rule '{name}' referenced by field '{field}'")
            raise UnknownRuleError(name, field=field)
        return predicate

    def exists(self, name: str) -> bool:
        """Check whether a rule token name resolves."""
        return ucfirst(name) in self._rules

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)

    def list_all(self) -> Dict[str, RuleInfo]:
        """
        List all registered rules.

        Returns:
            Dictionary of registry key to RuleInfo
        """
        with self._lock:
            return dict(self._rules)

    def names(self) -> List[str]:
        """Registry keys in registration order."""
        with self._lock:
            return list(self._rules)

    @property
    def registered_count(self) -> int:
        """Total number of registered rules."""
        with self._lock:
            return len(self._rules)

    def clear(self) -> None:
        """Remove all registered rules."""
        with self._lock:
            self._ensure_mutable("*")
            self._rules.clear()
            logger.info("Cleared all rules from registry")
