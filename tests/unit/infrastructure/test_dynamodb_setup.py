"""
Unit tests for DynamoDB setup and the infrastructure health checks.
"""
import pytest
from unittest.mock import MagicMock, Mock
from botocore.exceptions import ClientError

from passgen.infrastructure.config.infrastructure_settings import infra_settings
from passgen.infrastructure.databases.dynamodb_setup import DynamoDBSetup
from passgen.infrastructure.databases.table_schemas import SEARCH_HASH_INDEX
from passgen.infrastructure.services.health_checks import HealthCheckService


def _not_found() -> ClientError:
    return ClientError({'Error': {'Code': 'ResourceNotFoundException', 'Message': 'missing'}}, 'DescribeTable')


class TestDynamoDBSetup:
    """Test DynamoDBSetup class."""

    @pytest.mark.unit
    def test_creates_missing_table(self):
        dynamodb = MagicMock()
        dynamodb.Table.return_value.load.side_effect = _not_found()
        created = dynamodb.create_table.return_value
        created.table_status = 'ACTIVE'
        created.name = infra_settings.passwords_table_name
        created.global_secondary_indexes = [{'IndexName': SEARCH_HASH_INDEX, 'IndexStatus': 'ACTIVE'}]

        result = DynamoDBSetup(dynamodb).create_passwords_table()

        assert result['action'] == 'created'
        assert result['gsi_count'] == 1
        schema = dynamodb.create_table.call_args.kwargs
        assert schema['TableName'] == infra_settings.passwords_table_name

    @pytest.mark.unit
    def test_skips_existing_table_with_gsi(self):
        dynamodb = MagicMock()
        dynamodb.Table.return_value.global_secondary_indexes = [{'IndexName': SEARCH_HASH_INDEX}]

        result = DynamoDBSetup(dynamodb).create_passwords_table()

        assert result['action'] == 'skipped'
        dynamodb.create_table.assert_not_called()

    @pytest.mark.unit
    def test_reports_existing_table_without_gsi(self):
        dynamodb = MagicMock()
        dynamodb.Table.return_value.global_secondary_indexes = None

        result = DynamoDBSetup(dynamodb).create_passwords_table()

        assert result['success'] is False
        assert result['reason'] == 'missing_search_hash_gsi'

    @pytest.mark.unit
    def test_table_exists_propagates_other_errors(self):
        dynamodb = MagicMock()
        dynamodb.Table.return_value.load.side_effect = ClientError(
            {'Error': {'Code': 'AccessDeniedException', 'Message': 'denied'}}, 'DescribeTable'
        )

        with pytest.raises(ClientError):
            DynamoDBSetup(dynamodb).table_exists("passwords")

    @pytest.mark.unit
    def test_are_indexes_active(self):
        table = Mock(global_secondary_indexes=[{'IndexStatus': 'ACTIVE'}, {'IndexStatus': 'CREATING'}])

        assert DynamoDBSetup(MagicMock()).are_indexes_active(table) is False


class TestHealthCheckService:
    """Test HealthCheckService class."""

    @pytest.mark.unit
    def test_memory_backend_is_healthy(self, monkeypatch):
        monkeypatch.setattr(infra_settings, "repository_backend", "memory")

        result = HealthCheckService().check_all_services()

        assert result == {"repository": {"status": "healthy", "type": "memory"}}

    @pytest.mark.unit
    def test_dynamodb_backend(self, monkeypatch):
        monkeypatch.setattr(infra_settings, "repository_backend", "dynamodb")
        setup = Mock()
        setup.health_check.return_value = {
            'dynamodb_connection': True,
            'passwords_table': {'exists': True}
        }

        result = HealthCheckService(setup).check_all_services()

        assert result["repository"]["status"] == "healthy"

    @pytest.mark.unit
    def test_dynamodb_failure_is_unhealthy(self, monkeypatch):
        monkeypatch.setattr(infra_settings, "repository_backend", "dynamodb")
        setup = Mock()
        setup.health_check.side_effect = ConnectionError("unreachable")

        result = HealthCheckService(setup).check_all_services()

        assert result["repository"]["status"] == "unhealthy"
        assert result["repository"]["error"] == "unreachable"
