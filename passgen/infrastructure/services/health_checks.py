"""
Health checks service for infrastructure components.
Reports the state of the configured password store.
"""
from typing import Dict, Any, Optional
from passgen.infrastructure.config.infrastructure_settings import infra_settings
from passgen.infrastructure.databases.dynamodb_setup import DynamoDBSetup


class HealthCheckService:
    """
    Service for performing health checks on infrastructure components.
    """

    def __init__(self, dynamodb_setup: Optional[DynamoDBSetup] = None):
        self._dynamodb_setup = dynamodb_setup

    @property
    def dynamodb_setup(self) -> DynamoDBSetup:
        """Create the DynamoDB setup lazily; the memory backend never needs it."""
        if self._dynamodb_setup is None:
            self._dynamodb_setup = DynamoDBSetup()
        return self._dynamodb_setup

    def check_all_services(self) -> Dict[str, Any]:
        """
        Perform health checks on all infrastructure services.

        Returns:
            Dictionary with health check results keyed by service
        """
        return {"repository": self._check_repository()}

    def _check_repository(self) -> Dict[str, Any]:
        """
        Check the password repository backend.

        Returns:
            Dictionary with repository health status
        """
        if not infra_settings.use_dynamodb:
            return {"status": "healthy", "type": "memory"}

        try:
            dynamodb_health = self.dynamodb_setup.health_check()
            table_ready = dynamodb_health.get("passwords_table", {}).get("exists", False)

            return {
                "status": "healthy" if dynamodb_health.get("dynamodb_connection") and table_ready else "unhealthy",
                "type": "dynamodb-local" if infra_settings.use_local_dynamodb else "dynamodb",
                "endpoint": infra_settings.dynamodb_endpoint_url or "AWS Default",
                "details": dynamodb_health
            }
        except Exception as e:
            return {
                "status": "unhealthy",
                "error": str(e),
                "type": "dynamodb-local" if infra_settings.use_local_dynamodb else "dynamodb",
                "endpoint": infra_settings.dynamodb_endpoint_url or "AWS Default"
            }


health_check_service = HealthCheckService()
