"""
Dependency injection configuration for passgen.
Central configuration following Clean Architecture principles.
"""
from functools import lru_cache

# Domain ports
from passgen.core.ports.password_repository import PasswordRepositoryPort
from passgen.core.ports.credential_hasher import CredentialHasherPort

# Domain services and use cases
from passgen.core.services.search_hash import SearchHashGenerator
from passgen.core.services.password_persistence_service import PasswordPersistenceService
from passgen.core.usecases.generate_passwords import GeneratePasswordsUseCase
from passgen.core.usecases.password_lookup import CheckComplexityUseCase, DeletePasswordUseCase

# Infrastructure adapters
from passgen.adapters.repositories.in_memory_password_repository import InMemoryPasswordRepository
from passgen.adapters.services.bcrypt_credential_hasher import BcryptCredentialHasher
from passgen.infrastructure.config.infrastructure_settings import infra_settings
from passgen.infrastructure.logging.log_config import get_logger

logger = get_logger(__name__)


class DependencyContainer:
    """
    Dependency injection container following Clean Architecture.
    """

    def __init__(self):
        """Initialize dependency container."""
        self._password_repository = None
        self._credential_hasher = None
        self._search_hash_generator = None
        self._persistence_service = None
        self._generate_passwords_use_case = None
        self._check_complexity_use_case = None
        self._delete_password_use_case = None

    # INFRASTRUCTURE LAYER (Outer layer)
    @property
    def password_repository(self) -> PasswordRepositoryPort:
        """Get password repository instance (singleton) for the configured backend."""
        if self._password_repository is None:
            if infra_settings.use_dynamodb:
                from passgen.adapters.repositories.dynamodb_password_repository import DynamoDBPasswordRepository
                self._password_repository = DynamoDBPasswordRepository()
            else:
                self._password_repository = InMemoryPasswordRepository()
        return self._password_repository

    @property
    def credential_hasher(self) -> CredentialHasherPort:
        """Get credential hasher instance (singleton)."""
        if self._credential_hasher is None:
            self._credential_hasher = BcryptCredentialHasher()
        return self._credential_hasher

    # DOMAIN LAYER
    @property
    def search_hash_generator(self) -> SearchHashGenerator:
        """Get search hash generator instance (singleton)."""
        if self._search_hash_generator is None:
            self._search_hash_generator = SearchHashGenerator()
        return self._search_hash_generator

    @property
    def persistence_service(self) -> PasswordPersistenceService:
        """Get password persistence service (singleton)."""
        if self._persistence_service is None:
            self._persistence_service = PasswordPersistenceService(
                password_repository=self.password_repository,
                credential_hasher=self.credential_hasher,
                search_hash_generator=self.search_hash_generator
            )
        return self._persistence_service

    # APPLICATION LAYER (Use cases)
    @property
    def generate_passwords_use_case(self) -> GeneratePasswordsUseCase:
        """Get generate passwords use case (singleton)."""
        if self._generate_passwords_use_case is None:
            self._generate_passwords_use_case = GeneratePasswordsUseCase(
                persistence_service=self.persistence_service
            )
        return self._generate_passwords_use_case

    @property
    def check_complexity_use_case(self) -> CheckComplexityUseCase:
        """Get check complexity use case (singleton)."""
        if self._check_complexity_use_case is None:
            self._check_complexity_use_case = CheckComplexityUseCase(
                persistence_service=self.persistence_service
            )
        return self._check_complexity_use_case

    @property
    def delete_password_use_case(self) -> DeletePasswordUseCase:
        """Get delete password use case (singleton)."""
        if self._delete_password_use_case is None:
            self._delete_password_use_case = DeletePasswordUseCase(
                persistence_service=self.persistence_service
            )
        return self._delete_password_use_case

    # TESTING SUPPORT
    def _reset_dependents(self) -> None:
        self._persistence_service = None
        self._generate_passwords_use_case = None
        self._check_complexity_use_case = None
        self._delete_password_use_case = None

    def override_password_repository(self, repository: PasswordRepositoryPort) -> None:
        """Override password repository (for testing)."""
        self._password_repository = repository
        self._reset_dependents()

    def override_credential_hasher(self, hasher: CredentialHasherPort) -> None:
        """Override credential hasher (for testing)."""
        self._credential_hasher = hasher
        self._reset_dependents()


# GLOBAL CONTAINER INSTANCE
@lru_cache()
def get_dependency_container() -> DependencyContainer:
    """Get global dependency container (singleton)."""
    return DependencyContainer()


# FASTAPI DEPENDENCY FUNCTIONS
def get_generate_passwords_use_case() -> GeneratePasswordsUseCase:
    """FastAPI dependency for generate passwords use case."""
    return get_dependency_container().generate_passwords_use_case


def get_check_complexity_use_case() -> CheckComplexityUseCase:
    """FastAPI dependency for check complexity use case."""
    return get_dependency_container().check_complexity_use_case


def get_delete_password_use_case() -> DeletePasswordUseCase:
    """FastAPI dependency for delete password use case."""
    return get_dependency_container().delete_password_use_case


# CONFIGURATION VALIDATION
def validate_dependencies() -> None:
    """
    Validate that all dependencies can be created successfully.
    Call this at application startup.
    """
    container = get_dependency_container()

    try:
        container.password_repository
        container.search_hash_generator.digest_size
        container.generate_passwords_use_case
        container.check_complexity_use_case
        container.delete_password_use_case
    except Exception as e:
        logger.error("Dependency validation failed", extra={
            'extra_fields': {"error": str(e), "error_type": type(e).__name__}
        })
        raise

    logger.info("Dependencies validated", extra={
        'extra_fields': {"repository": type(container.password_repository).__name__}
    })
