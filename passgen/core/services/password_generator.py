"""
Character-class password generator for passgen.
Generates cryptographically secure passwords containing every requested character class.
"""
import secrets
import string
from typing import List, Optional

from passgen.config.password_rules import PasswordRules, password_rules
from passgen.core.models.complexity import Complexity
from passgen.core.models.errors import (
    BatchTooLargeError,
    InvalidAmountError,
    InvalidLengthError,
    NoCharacterClassSelectedError
)
from passgen.core.models.password import GeneratedPassword, GenerationRequest
from passgen.core.services.complexity_classifier import check_length, classify
from passgen.infrastructure.logging.log_config import get_logger


LOWER = string.ascii_lowercase
UPPER = string.ascii_uppercase
SPECIAL = "!@#$%&*()_+-=[]|,./?><"

logger = get_logger(__name__)


def validate_generation(
    length: int,
    lower: bool,
    upper: bool,
    special: bool,
    amount: int,
    rules: Optional[PasswordRules] = None
) -> None:
    """
    Check generation parameters before any password is produced.

    Raises:
        InvalidLengthError: If length is out of bounds or shorter than the
            number of enabled character classes
        NoCharacterClassSelectedError: If every character class is disabled
        BatchTooLargeError: If amount exceeds the batch limit
        InvalidAmountError: If amount is lower than one
    """
    rules = rules or password_rules
    check_length(length, rules)

    if not (lower or upper or special):
        raise NoCharacterClassSelectedError()

    # One position per enabled class is reserved
    class_count = sum((lower, upper, special))
    if length < class_count:
        raise InvalidLengthError(length, class_count, rules.max_length)

    if amount > rules.max_batch:
        raise BatchTooLargeError(amount, rules.max_batch)

    if amount < 1:
        raise InvalidAmountError(amount)


def _character_classes(lower: bool, upper: bool, special: bool) -> List[str]:
    classes = []
    if lower:
        classes.append(LOWER)
    if upper:
        classes.append(UPPER)
    if special:
        classes.append(SPECIAL)
    return classes


def generate_password(length: int, classes: List[str]) -> str:
    """
    Generate one password using a fresh secure random source.

    Positions are shuffled first; the leading shuffled positions receive
    one character of each class so every class is present, the rest are
    drawn from the combined alphabet.

    Raises:
        ValueError: If length cannot hold one character of each class
    """
    if length < len(classes):
        raise ValueError(f"Length {length} cannot hold {len(classes)} character classes")

    secure_random = secrets.SystemRandom()
    alphabet = "".join(classes)

    positions = list(range(length))
    secure_random.shuffle(positions)

    chars = [""] * length
    for position, char_class in zip(positions, classes):
        chars[position] = secure_random.choice(char_class)

    for position in positions[len(classes):]:
        chars[position] = secure_random.choice(alphabet)

    return "".join(chars)


def generate(
    length: int,
    lower: bool,
    upper: bool,
    special: bool,
    amount: int = 1,
    rules: Optional[PasswordRules] = None
) -> List[GeneratedPassword]:
    """
    Generate a batch of passwords. Does not persist anything.

    The complexity is computed once from the first password and shared
    by the whole batch.

    Args:
        length: Length of every password
        lower: Include lowercase letters
        upper: Include uppercase letters
        special: Include special characters
        amount: Number of passwords to generate
        rules: Password rules, defaults to the global rules

    Returns:
        List[GeneratedPassword]: Generated passwords in generation order
    """
    rules = rules or password_rules
    validate_generation(length, lower, upper, special, amount, rules)

    classes = _character_classes(lower, upper, special)
    complexity: Optional[Complexity] = None
    passwords = []

    for _ in range(amount):
        plaintext = generate_password(length, classes)
        if complexity is None:
            complexity = classify(plaintext, rules)
        passwords.append(GeneratedPassword.create(plaintext, complexity))

    logger.debug("Generated password batch", extra={
        'extra_fields': {
            "length": length,
            "amount": amount,
            "character_classes": len(classes),
            "complexity": complexity.value
        }
    })

    return passwords


def generate_from_request(
    request: GenerationRequest,
    rules: Optional[PasswordRules] = None
) -> List[GeneratedPassword]:
    """Generate a batch described by a GenerationRequest."""
    return generate(
        length=request.length,
        lower=request.include_lower,
        upper=request.include_upper,
        special=request.include_special,
        amount=request.amount,
        rules=rules
    )
