"""
Password complexity tiers.
Data-driven rule table evaluated from the strictest tier down.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Complexity(str, Enum):
    """Ordered complexity tiers, weakest first."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    ULTRA = "ULTRA"

    @property
    def rank(self) -> int:
        """Position of the tier in the LOW < MEDIUM < HIGH < ULTRA ordering."""
        return _ORDER.index(self)

    def __lt__(self, other):
        if not isinstance(other, Complexity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Complexity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Complexity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Complexity):
            return NotImplemented
        return self.rank >= other.rank


_ORDER: Tuple[Complexity, ...] = (
    Complexity.LOW,
    Complexity.MEDIUM,
    Complexity.HIGH,
    Complexity.ULTRA,
)


@dataclass(frozen=True)
class ComplexityRule:
    """
    Requirements a password must meet to reach a tier.

    min_length of 0 for LOW means the tier accepts any length that passed
    the global length bounds.
    """
    complexity: Complexity
    min_length: int
    requires_both_cases: bool
    requires_special: bool

    def matches(self, length: int, has_lower: bool, has_upper: bool, has_special: bool) -> bool:
        """Check whether the observed password traits satisfy this rule."""
        return (
            length >= self.min_length
            and (not self.requires_both_cases or (has_lower and has_upper))
            and (not self.requires_special or has_special)
        )


# Strictest first; the first matching rule wins
COMPLEXITY_RULES: Tuple[ComplexityRule, ...] = (
    ComplexityRule(Complexity.ULTRA, min_length=17, requires_both_cases=True, requires_special=True),
    ComplexityRule(Complexity.HIGH, min_length=9, requires_both_cases=True, requires_special=True),
    ComplexityRule(Complexity.MEDIUM, min_length=6, requires_both_cases=True, requires_special=False),
    ComplexityRule(Complexity.LOW, min_length=0, requires_both_cases=False, requires_special=False),
)


def rule_for(complexity: Complexity) -> ComplexityRule:
    """Look up the rule row of a tier."""
    for rule in COMPLEXITY_RULES:
        if rule.complexity is complexity:
            return rule
    raise KeyError(complexity)
