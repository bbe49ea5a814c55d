"""
DynamoDB implementation of PasswordRepositoryPort.
Stores password records with a GSI on the search hash for candidate lookups.
"""
from typing import Any, Dict, Iterable, List
from datetime import datetime
from uuid import uuid4

from botocore.exceptions import ClientError
from boto3.dynamodb.conditions import Key

from passgen.core.models.complexity import Complexity
from passgen.core.models.errors import PasswordRepositoryError
from passgen.core.models.password import StoredPassword
from passgen.core.ports.password_repository import PasswordRepositoryPort
from passgen.infrastructure.config.aws_config import aws_config
from passgen.infrastructure.config.infrastructure_settings import infra_settings
from passgen.infrastructure.databases.table_schemas import SEARCH_HASH_INDEX
from passgen.infrastructure.logging.log_decorators import log_infrastructure_operation, op_config


class DynamoDBPasswordRepository(PasswordRepositoryPort):
    """
    DynamoDB implementation of PasswordRepositoryPort.

    Records are keyed by a generated password_id. The search-hash-index
    GSI returns every record sharing a search hash without a table scan.
    """

    def __init__(self, table=None):
        self.table_name = infra_settings.passwords_table_name
        self.table = table if table is not None else aws_config.get_table(self.table_name)

    @log_infrastructure_operation("find_passwords_by_search_hash", **op_config("DEBUG"))
    async def find_all_by_search_hash(self, search_hash: bytes) -> List[StoredPassword]:
        """
        Get every record sharing a search hash using the GSI.

        Args:
            search_hash: Lookup key computed from the password prefix

        Returns:
            List[StoredPassword]: Candidate records, possibly empty

        Raises:
            PasswordRepositoryError: If the query fails
        """
        query_kwargs: Dict[str, Any] = {
            'IndexName': SEARCH_HASH_INDEX,
            'KeyConditionExpression': Key('search_hash').eq(search_hash)
        }
        records = []

        try:
            while True:
                response = self.table.query(**query_kwargs)
                records.extend(self._from_dynamodb_item(item) for item in response.get('Items', []))

                last_key = response.get('LastEvaluatedKey')
                if not last_key:
                    break
                query_kwargs['ExclusiveStartKey'] = last_key

        except ClientError as e:
            raise PasswordRepositoryError(
                f"Failed to query passwords by search hash: {e.response['Error']['Message']}"
            ) from e

        return records

    @log_infrastructure_operation("save_passwords", **op_config(result=False))
    async def save_all(self, records: Iterable[StoredPassword]) -> List[StoredPassword]:
        """
        Insert records with a batch writer.

        Returns:
            List[StoredPassword]: Saved records with their assigned ids

        Raises:
            PasswordRepositoryError: If the batch write fails
        """
        saved = [record.with_id(str(uuid4())) for record in records]

        try:
            with self.table.batch_writer() as batch:
                for record in saved:
                    batch.put_item(Item=self._to_dynamodb_item(record))
        except ClientError as e:
            raise PasswordRepositoryError(
                f"Failed to save passwords: {e.response['Error']['Message']}"
            ) from e

        return saved

    @log_infrastructure_operation("delete_password", **op_config())
    async def delete(self, record: StoredPassword) -> None:
        """Delete a record by its id."""
        try:
            self.table.delete_item(Key={'password_id': record.id})
        except ClientError as e:
            raise PasswordRepositoryError(
                f"Failed to delete password: {e.response['Error']['Message']}"
            ) from e

    def _to_dynamodb_item(self, record: StoredPassword) -> dict:
        """
        Convert StoredPassword domain entity to DynamoDB item.

        Args:
            record: StoredPassword with an assigned id

        Returns:
            dict: DynamoDB item representation
        """
        return {
            'password_id': record.id,
            'verification_hash': record.verification_hash,
            'search_hash': record.search_hash,
            'complexity': record.complexity.value,
            'created_at': record.created_at.isoformat()
        }

    def _from_dynamodb_item(self, item: dict) -> StoredPassword:
        """
        Convert DynamoDB item to StoredPassword domain entity.

        boto3 returns binary attributes wrapped in Binary objects.
        """
        search_hash = item['search_hash']
        search_hash = getattr(search_hash, 'value', search_hash)

        return StoredPassword(
            id=item['password_id'],
            verification_hash=item['verification_hash'],
            search_hash=bytes(search_hash),
            complexity=Complexity(item['complexity']),
            created_at=datetime.fromisoformat(item['created_at'])
        )
