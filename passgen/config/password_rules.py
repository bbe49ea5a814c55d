"""
Password business rules for passgen.
Length bounds, batch limits and hashing parameters shared by the domain services.
"""
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PasswordRules(BaseSettings):
    """
    Limits applied to password generation and classification.

    Values can be overridden with PASSGEN_* environment variables
    (e.g. PASSGEN_MAX_BATCH=500) but are immutable once loaded.
    """

    # Length bounds (inclusive)
    min_length: int = 3
    max_length: int = 32

    # Maximum passwords generated by one request
    max_batch: int = 1000

    # Search hash digest, must be available in hashlib
    search_hash_algorithm: str = "md5"

    # Cost factor for the one-way credential hash
    bcrypt_rounds: int = 12

    model_config = SettingsConfigDict(
        env_prefix="PASSGEN_",
        env_file=[".env.local", ".env.development", ".env.staging", ".env.production"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True
    )

    @model_validator(mode="after")
    def validate_bounds(self) -> "PasswordRules":
        """Reject inconsistent length bounds."""
        if self.min_length < 1:
            raise ValueError("min_length must be at least 1")
        if self.max_length < self.min_length:
            raise ValueError("max_length must not be lower than min_length")
        return self

    def is_length_allowed(self, length: int) -> bool:
        """Check if a password length is within the configured bounds."""
        return self.min_length <= length <= self.max_length


# Global password rules instance
password_rules = PasswordRules()
