"""
Rule Predicate Protocol.

Defines the interface every registered rule implements. A predicate
receives the complete value list of one field plus the raw parameter text
from its rule token, and answers pass/fail.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Predicates are stateless and safe to share between runs
    - The parameter is passed verbatim (no trimming, no splitting)
"""

from __future__ import annotations

from typing import Callable, Protocol, Sequence, runtime_checkable


@runtime_checkable
class RulePredicate(Protocol):
    """Abstract interface for rule predicates."""

    def check(self, values: Sequence[str], param: str) -> bool:
        """
        Check a field's values.

        Args:
            values: All submitted values of the field, in order
            param: Text after the first ':' in the rule token, or ""

        Returns:
            True if the values satisfy the rule
        """
        ...


# Plain function form accepted by RuleRegistry.register
PredicateFunc = Callable[[Sequence[str], str], bool]


class FunctionPredicate:
    """Adapts a plain function to the RulePredicate protocol."""

    def __init__(self, func: PredicateFunc) -> None:
        self.func = func

    def check(self, values: Sequence[str], param: str) -> bool:
        return bool(self.func(values, param))

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", type(self.func).__name__)
        return f"FunctionPredicate({name})"
