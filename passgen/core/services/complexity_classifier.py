"""
Complexity classifier for passgen.
Maps a password to one of the ordered complexity tiers.
"""
from typing import Optional, Sequence

from passgen.config.password_rules import PasswordRules, password_rules
from passgen.core.models.complexity import Complexity, ComplexityRule, COMPLEXITY_RULES
from passgen.core.models.errors import InvalidLengthError, UndeterminableComplexityError


def check_length(length: int, rules: Optional[PasswordRules] = None) -> None:
    """
    Validate a password length against the configured bounds.

    Raises:
        InvalidLengthError: If length is outside [min_length, max_length]
    """
    rules = rules or password_rules
    if not rules.is_length_allowed(length):
        raise InvalidLengthError(length, rules.min_length, rules.max_length)


def classify(
    password: str,
    rules: Optional[PasswordRules] = None,
    complexity_rules: Sequence[ComplexityRule] = COMPLEXITY_RULES
) -> Complexity:
    """
    Return the complexity tier of a password.

    Letters count towards the lower/upper flags; any character that is
    neither a letter, a digit nor whitespace counts as special.

    Args:
        password: Password to classify
        rules: Length bounds, defaults to the global password rules
        complexity_rules: Tier table, strictest first

    Returns:
        Complexity: Strictest tier whose rule the password satisfies

    Raises:
        InvalidLengthError: If the password length is out of bounds
        UndeterminableComplexityError: If no rule in the table matches
    """
    length = len(password)
    check_length(length, rules)

    has_lower = has_upper = has_special = False
    for char in password:
        if char.isalpha():
            if char.islower():
                has_lower = True
            elif char.isupper():
                has_upper = True
        elif not char.isdigit() and not char.isspace():
            has_special = True

    for rule in complexity_rules:
        if rule.matches(length, has_lower, has_upper, has_special):
            return rule.complexity

    raise UndeterminableComplexityError(
        "Could not determine password complexity according to existing complexity rules."
    )
