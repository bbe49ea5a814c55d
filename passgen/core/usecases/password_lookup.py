"""
Password lookup use cases for passgen.
Complexity checks and deletions of single passwords.
"""
from typing import Optional

from passgen.config.password_rules import PasswordRules
from passgen.core.models.password import PasswordLookup
from passgen.core.services.complexity_classifier import classify
from passgen.core.services.password_persistence_service import PasswordPersistenceService


def _unpersisted(password: str, rules: Optional[PasswordRules]) -> PasswordLookup:
    """Classify a password that is not stored; created_at stays empty."""
    return PasswordLookup(password=password, complexity=classify(password, rules))


class CheckComplexityUseCase:
    """Report the complexity of a password, using the stored record when there is one."""

    def __init__(
        self,
        persistence_service: PasswordPersistenceService,
        rules: Optional[PasswordRules] = None
    ):
        self.persistence_service = persistence_service
        self.rules = rules

    async def execute(self, password: str) -> PasswordLookup:
        """
        Check a password's complexity.

        The length is validated before the store is queried.

        Raises:
            InvalidLengthError: If the password length is out of bounds
        """
        unpersisted = _unpersisted(password, self.rules)
        stored = await self.persistence_service.get_password(password)
        return stored or unpersisted


class DeletePasswordUseCase:
    """Delete a stored password and report what was removed."""

    def __init__(
        self,
        persistence_service: PasswordPersistenceService,
        rules: Optional[PasswordRules] = None
    ):
        self.persistence_service = persistence_service
        self.rules = rules

    async def execute(self, password: str) -> PasswordLookup:
        """
        Delete a password.

        Returns:
            PasswordLookup: The removed record's projection, or a fresh
            classification with no timestamp if nothing was stored

        Raises:
            InvalidLengthError: If the password length is out of bounds
        """
        unpersisted = _unpersisted(password, self.rules)
        deleted = await self.persistence_service.delete(password)
        return deleted or unpersisted
