"""Ignore rules for hiding tree nodes by name."""

from .base_rules import BaseIgnoreRules
from .wildcard_rules import WildcardIgnoreRules, compile_patterns

__all__ = [
    "BaseIgnoreRules",
    "WildcardIgnoreRules",
    "compile_patterns",
]
