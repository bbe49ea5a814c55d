"""
AWS service configuration and client management.
Handles connection to DynamoDB with environment-specific settings.
"""
import boto3
from botocore.config import Config
from typing import Optional, Dict, Any
from .infrastructure_settings import infra_settings


class AWSConfig:
    """
    Manages AWS service connections and configuration.
    Resources are created lazily so the in-memory backend never touches AWS.
    """

    def __init__(self):
        self._dynamodb_resource: Optional[boto3.resource] = None
        self._dynamodb_client: Optional[boto3.client] = None
        self._boto_config = Config(
            region_name=infra_settings.aws_region,
            retries={
                'max_attempts': infra_settings.aws_max_retry_attempts,
                'mode': 'adaptive'
            },
            max_pool_connections=infra_settings.aws_max_pool_connections
        )

    @property
    def dynamodb_resource(self) -> boto3.resource:
        """Get or create DynamoDB resource with proper configuration."""
        if self._dynamodb_resource is None:
            self._dynamodb_resource = boto3.resource(**self._dynamodb_kwargs())
        return self._dynamodb_resource

    @property
    def dynamodb_client(self) -> boto3.client:
        """Get or create DynamoDB client with proper configuration."""
        if self._dynamodb_client is None:
            self._dynamodb_client = boto3.client(**self._dynamodb_kwargs())
        return self._dynamodb_client

    def _dynamodb_kwargs(self) -> Dict[str, Any]:
        """Build boto3 arguments for local DynamoDB or AWS."""
        kwargs = {
            'service_name': 'dynamodb',
            'config': self._boto_config,
            'region_name': infra_settings.aws_region
        }

        if infra_settings.use_local_dynamodb:
            kwargs.update({
                'endpoint_url': infra_settings.dynamodb_endpoint_url,
                'aws_access_key_id': 'fakeMyKeyId',
                'aws_secret_access_key': 'fakeSecretAccessKey'
            })

        return kwargs

    def get_table(self, table_name: str):
        """
        Get DynamoDB table with error handling.

        Args:
            table_name: Name of the DynamoDB table

        Returns:
            DynamoDB table resource

        Raises:
            ConnectionError: If table connection fails
        """
        try:
            return self.dynamodb_resource.Table(table_name)
        except Exception as e:
            raise ConnectionError(
                f"Failed to connect to DynamoDB table '{table_name}': {str(e)}"
            ) from e


# Global AWS configuration instance
aws_config = AWSConfig()
