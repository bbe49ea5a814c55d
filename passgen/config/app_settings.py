"""
Application-level settings for passgen.
Configuration that affects the application runtime and behavior.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application-level configuration.
    Settings that control app behavior, networking, and runtime.
    """

    # Environment
    environment: str = "development"

    # Application Network
    app_host: str = "localhost"
    app_port: int = 8080
    app_protocol: str = "http"

    # API metadata
    app_title: str = "Password Generator API"
    app_version: str = "1.0.0"
    api_prefix: str = "/api"

    # Configuration
    model_config = SettingsConfigDict(
        env_file=[".env.local", ".env.development", ".env.staging", ".env.production"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() in ("production", "prod")

    @property
    def app_url(self) -> str:
        """Get full application URL for testing and documentation."""
        if self.app_port in (80, 443):
            return f"{self.app_protocol}://{self.app_host}"
        return f"{self.app_protocol}://{self.app_host}:{self.app_port}"


# Global app settings instance
app_settings = AppSettings()
