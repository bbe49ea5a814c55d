"""
Infrastructure settings for passgen.
Configuration for external services, databases, and logging.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class InfrastructureSettings(BaseSettings):
    """
    Infrastructure configuration.
    Settings for external services and infrastructure components.
    """

    # ENVIRONMENT & DEPLOYMENT
    environment: str = "development"
    stage: str = "dev"

    # AWS CORE CONFIGURATION
    aws_region: str = "us-east-1"

    # AWS Client Configuration
    aws_max_retry_attempts: int = 3
    aws_max_pool_connections: int = 50

    # DATABASE CONFIGURATION
    # Password repository backend: "memory" or "dynamodb"
    repository_backend: str = "memory"

    # DynamoDB
    dynamodb_endpoint_url: Optional[str] = None
    passwords_table_name: str = "passgen-passwords"
    create_tables_on_startup: bool = False

    # MONITORING & LOGGING CONFIGURATION
    log_level: str = "INFO"
    log_format: str = "colored"
    service_name: str = "passgen"

    # Configuration
    model_config = SettingsConfigDict(
        env_file=[".env.local", ".env.development", ".env.staging", ".env.production"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def use_local_dynamodb(self) -> bool:
        """Check if should use local DynamoDB."""
        return self.dynamodb_endpoint_url is not None

    @property
    def use_dynamodb(self) -> bool:
        """Check if passwords are persisted in DynamoDB."""
        return self.repository_backend.lower() == "dynamodb"

    @property
    def is_production_env(self) -> bool:
        """Check if running in production environment (computed from environment)."""
        return self.environment.lower() == "production"


# Global infrastructure settings instance
infra_settings = InfrastructureSettings()
