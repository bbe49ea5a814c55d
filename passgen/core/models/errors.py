"""
Domain errors for passgen.

Validation errors are caller-fixable and map to HTTP 400. The remaining
errors signal server-side faults and map to HTTP 500.
"""


class PasswordGenerationError(Exception):
    """Base class for all passgen domain errors."""


class PasswordValidationError(PasswordGenerationError):
    """Raised when request parameters break a password rule."""


class InvalidLengthError(PasswordValidationError):
    """Exception raised when a password length is outside the allowed bounds."""

    def __init__(self, length: int, min_length: int, max_length: int):
        super().__init__(
            f"Password length must be between {min_length} and {max_length}, got {length}."
        )
        self.length = length
        self.min_length = min_length
        self.max_length = max_length


class NoCharacterClassSelectedError(PasswordValidationError):
    """Exception raised when lower, upper and special characters are all disabled."""

    def __init__(self):
        super().__init__("At least one character class must be selected.")


class BatchTooLargeError(PasswordValidationError):
    """Exception raised when more passwords are requested than one batch allows."""

    def __init__(self, amount: int, max_batch: int):
        super().__init__(
            f"Cannot request more than {max_batch} passwords to be generated at once, got {amount}."
        )
        self.amount = amount
        self.max_batch = max_batch


class InvalidAmountError(PasswordValidationError):
    """Exception raised when a batch would contain no passwords."""

    def __init__(self, amount: int):
        super().__init__(f"At least one password must be requested, got {amount}.")
        self.amount = amount


class UndeterminableComplexityError(PasswordGenerationError):
    """Exception raised when no complexity rule matches a password."""


class DigestUnavailableError(PasswordGenerationError):
    """Exception raised when the search hash digest cannot be obtained."""

    def __init__(self, algorithm: str, reason: str = ""):
        message = f"Search hash digest '{algorithm}' is unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.algorithm = algorithm


class PasswordRepositoryError(PasswordGenerationError):
    """Exception raised when the password store fails."""
