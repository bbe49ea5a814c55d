"""
Generate passwords use case for passgen.
Generates a batch and persists the passwords that are not stored yet.
"""
from typing import Optional

from passgen.config.password_rules import PasswordRules
from passgen.core.models.password import GenerationRequest, GenerationResult
from passgen.core.services.password_generator import generate_from_request
from passgen.core.services.password_persistence_service import PasswordPersistenceService


class GeneratePasswordsUseCase:
    """
    Use case for generating and storing password batches.
    """

    def __init__(
        self,
        persistence_service: PasswordPersistenceService,
        rules: Optional[PasswordRules] = None
    ):
        """
        Initialize generate passwords use case.

        Args:
            persistence_service: Service deduplicating and storing passwords
            rules: Password rules, defaults to the global rules
        """
        self.persistence_service = persistence_service
        self.rules = rules

    async def execute(self, request: GenerationRequest) -> GenerationResult:
        """
        Generate a batch of passwords and persist the unique ones.

        Args:
            request: Generation parameters

        Returns:
            GenerationResult: All generated passwords, rejected duplicates
            and the complexity shared by the batch

        Raises:
            PasswordValidationError: If the request breaks a password rule
            DigestUnavailableError: If the search hash cannot be computed
        """
        passwords = generate_from_request(request, self.rules)
        duplicates = await self.persistence_service.persist_unique_batch(passwords)

        return GenerationResult(
            passwords=passwords,
            duplicates=duplicates,
            complexity=passwords[0].complexity
        )
