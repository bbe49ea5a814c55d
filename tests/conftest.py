"""
Shared test configuration and fixtures for passgen tests.
"""
import pytest
from unittest.mock import Mock
from fastapi.testclient import TestClient

from passgen.main import app
from passgen.config.password_rules import PasswordRules
from passgen.core.services.password_persistence_service import PasswordPersistenceService
from passgen.core.usecases.generate_passwords import GeneratePasswordsUseCase
from passgen.core.usecases.password_lookup import CheckComplexityUseCase, DeletePasswordUseCase
from passgen.adapters.repositories.in_memory_password_repository import InMemoryPasswordRepository
from passgen.adapters.services.bcrypt_credential_hasher import BcryptCredentialHasher

from tests.utils.mock_helpers import MockHelpers, overridden_container


# ENVIRONMENT & CONFIGURATION FIXTURES

@pytest.fixture
def test_settings(monkeypatch):
    """Create InfrastructureSettings instance with test configuration."""
    test_env = MockHelpers.create_test_environment_config()
    for key, value in test_env.items():
        monkeypatch.setenv(key, value)

    from passgen.infrastructure.config.infrastructure_settings import InfrastructureSettings
    return InfrastructureSettings()


@pytest.fixture
def rules() -> PasswordRules:
    """Default password rules, independent of the environment."""
    return PasswordRules(
        min_length=3,
        max_length=32,
        max_batch=1000,
        search_hash_algorithm="md5",
        bcrypt_rounds=4
    )


# MOCK FIXTURES (for unit tests)

@pytest.fixture
def mock_password_repository():
    """Mock password repository for unit tests."""
    return MockHelpers.create_mock_password_repository()


@pytest.fixture
def mock_credential_hasher() -> Mock:
    """Mock credential hasher for unit tests."""
    return MockHelpers.create_mock_credential_hasher()


# REAL SERVICE FIXTURES

@pytest.fixture
def password_repository() -> InMemoryPasswordRepository:
    return InMemoryPasswordRepository()


@pytest.fixture
def credential_hasher() -> BcryptCredentialHasher:
    """bcrypt with the minimum cost factor to keep tests fast."""
    return BcryptCredentialHasher(rounds=4)


@pytest.fixture
def persistence_service(password_repository, credential_hasher) -> PasswordPersistenceService:
    return PasswordPersistenceService(password_repository, credential_hasher)


@pytest.fixture
def generate_use_case(persistence_service, rules) -> GeneratePasswordsUseCase:
    return GeneratePasswordsUseCase(persistence_service, rules)


@pytest.fixture
def check_complexity_use_case(persistence_service, rules) -> CheckComplexityUseCase:
    return CheckComplexityUseCase(persistence_service, rules)


@pytest.fixture
def delete_use_case(persistence_service, rules) -> DeletePasswordUseCase:
    return DeletePasswordUseCase(persistence_service, rules)


# API TESTING FIXTURES

@pytest.fixture
def client(password_repository, credential_hasher):
    """Create FastAPI test client backed by a fresh in-memory store."""
    with overridden_container(password_repository, credential_hasher):
        with TestClient(app) as test_client:
            yield test_client
