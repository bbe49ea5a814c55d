"""
Core domain models for passgen.
"""
from .complexity import (
    Complexity,
    ComplexityRule,
    COMPLEXITY_RULES,
    rule_for
)

from .password import (
    GenerationRequest,
    GeneratedPassword,
    StoredPassword,
    PasswordLookup,
    GenerationResult
)

from .errors import (
    PasswordGenerationError,
    PasswordValidationError,
    InvalidLengthError,
    NoCharacterClassSelectedError,
    BatchTooLargeError,
    InvalidAmountError,
    UndeterminableComplexityError,
    DigestUnavailableError,
    PasswordRepositoryError
)

__all__ = [
    "Complexity",
    "ComplexityRule",
    "COMPLEXITY_RULES",
    "rule_for",
    "GenerationRequest",
    "GeneratedPassword",
    "StoredPassword",
    "PasswordLookup",
    "GenerationResult",
    "PasswordGenerationError",
    "PasswordValidationError",
    "InvalidLengthError",
    "NoCharacterClassSelectedError",
    "BatchTooLargeError",
    "InvalidAmountError",
    "UndeterminableComplexityError",
    "DigestUnavailableError",
    "PasswordRepositoryError"
]
